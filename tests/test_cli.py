from wordtally.cli import count_words, iter_words, main
from wordtally.wc_utils import format_entries


def test_iter_words_splits_and_lowercases():
    assert list(iter_words("Hello, hello WORLD!x2y")) == [
        "hello",
        "hello",
        "world",
        "x",
        "y",
    ]


def test_iter_words_non_ascii_separates():
    assert list(iter_words("caféBar")) == ["caf", "bar"]


def test_count_words_orders_by_first_appearance():
    entries = count_words("The cat and the hat and THE bat")
    words = [entry.word for entry in entries]
    assert words == ["the", "cat", "and", "hat", "bat"]
    counts = {entry.word: entry.count for entry in entries}
    assert counts["the"] == 3
    assert sum(counts.values()) == len(list(iter_words("The cat and the hat and THE bat")))


def test_main_prints_unsorted_then_sorted(tmp_path, capsys):
    path = tmp_path / "words.txt"
    text = "b b b a c c"
    path.write_text(text)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    unsorted = format_entries(count_words(text))
    assert out.startswith(unsorted)
    second = out[len(unsorted):]
    lines = [line for line in second.split("↓ ↓ ↓ TAIL ↓ ↓ ↓")[0].splitlines() if line]
    counts = [int(line.rsplit("count: ", 1)[1]) for line in lines[1:]]
    assert counts == sorted(counts)
    assert len(counts) == len(set(iter_words(text)))


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "ERROR: usage: wordcount <filename>\n"
    assert main(["a", "b"]) == 1


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().out == f"ERROR: cannot open file {missing}\n"