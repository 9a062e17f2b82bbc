# wordtally

`wordtally` reads a text file and counts how often each word appears in it.

A word is a run of ASCII letters (`A`–`Z`, `a`–`z`). Anything else separates
words, and that includes digits, punctuation and letters outside ASCII.
Capital letters are folded to lower case, so `The` and `the` count as the
same word. The file is read as Latin-1 text.

## Installation

```
pip install .
```

## Usage

```
wordtally <filename>
```

The command prints the table of words twice:

- The first table lists the words in the order in which each word was first
  seen.
- The second table lists them sorted by count, from least to most frequent.
  Words with equal counts may come in any order, because the sort picks its
  pivots at random.

Each table walks the list from head to tail and then back from tail to head.
For a file containing `The cat saw the other cat.` the first table is:

```

↓ ↓ ↓ HEAD ↓ ↓ ↓
word: the | length: 3 | count: 2
word: cat | length: 3 | count: 2
word: saw | length: 3 | count: 1
word: other | length: 5 | count: 1

↓ ↓ ↓ TAIL ↓ ↓ ↓
word: other | length: 5 | count: 1
word: saw | length: 3 | count: 1
word: cat | length: 3 | count: 2
word: the | length: 3 | count: 2
```

The command prints `ERROR: usage: wordcount <filename>` and exits with status 1
if it is given no filename or more than one. It prints
`ERROR: cannot open file <filename>` and exits with status 1 if the file
cannot be opened.

## Using it from Python

```python
from wordtally.cli import count_words, iter_words
from wordtally.wc_qsort import quicksort
from wordtally.wc_utils import format_entries

list(iter_words("Hello, World"))   # ['hello', 'world']

entries = count_words("The cat saw the other cat.")
print(format_entries(entries), end="")

quicksort(entries, 1, len(entries))   # positions are 1-based and inclusive
[e.count for e in entries]            # [1, 1, 2, 2]
```

The modules are:

- `wordtally.dl_list`: `DLList`, a doubly linked list of `Node` objects with
  `head` and `tail`. It iterates its data forwards and backwards with `iter`
  and `reversed`, reports its `len`, and offers `nodes()`, `find(predicate)`,
  `insert_head`, `insert_tail`, `insert(data, above, below)`, `delete_head`,
  `delete_tail`, `delete(node)` and `swap(a, b)`. Storing `None` raises
  `ValueError`, and deleting from an empty list raises `IndexError`.
- `wordtally.wc_entry`: `WordEntry`, a record with `word`, `length` (the
  length of the word if not given) and `count` (1 for a new entry).
- `wordtally.wc_utils`: `is_ascii_letter`, `is_ascii_capital`, `find_entry`,
  `log_word` (adds one to a word's count, or appends a new entry) and
  `format_entries` (the text of the tables shown above).
- `wordtally.wc_qsort`: `node_at` (node at a 1-based position), `partition`
  and `quicksort`, which sorts a range of positions in place by ascending
  count.
- `wordtally.prand`: `prand(maximum)`, a pseudorandom integer in
  `[0, maximum)`.
- `wordtally.cli`: `iter_words`, `count_words` and `main`, the function
  behind the `wordtally` command.

## Running the tests

```
pip install .[test]
pytest
```