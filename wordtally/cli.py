"""Command line word counter: lists each word's count before and after sorting."""

from __future__ import annotations

import re
import sys
from typing import Iterator, Optional, Sequence

from .dl_list import DLList
from .wc_qsort import quicksort
from .wc_utils import format_entries, log_word

_WORD = re.compile(r"[A-Za-z]+")


def iter_words(text: str) -> Iterator[str]:
    """Yield the runs of ASCII letters in ``text``, lower-cased."""
    for match in _WORD.finditer(text):
        yield match.group().lower()


def count_words(text: str) -> DLList:
    """Count the words of ``text`` in order of first appearance."""
    entries = DLList()
    for word in iter_words(text):
        log_word(entries, word)
    return entries


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Count the words of one file, print them, sort by count and print again."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("ERROR: usage: wordcount <filename>")
        return 1
    filename = args[0]
    try:
        with open(filename, encoding="latin-1") as handle:
            text = handle.read()
    except OSError:
        print(f"ERROR: cannot open file {filename}")
        return 1
    entries = count_words(text)
    print(format_entries(entries), end="")
    quicksort(entries, 1, len(entries))
    print(format_entries(entries), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())