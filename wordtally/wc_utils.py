"""Letter classification and word-entry list helpers."""

from __future__ import annotations

from typing import Optional, Union

from .dl_list import DLList
from .wc_entry import WordEntry

_HEAD_BANNER = "\n↓ ↓ ↓ HEAD ↓ ↓ ↓\n"
_TAIL_BANNER = "\n↓ ↓ ↓ TAIL ↓ ↓ ↓\n"


def _code(c: Union[str, int]) -> int:
    return ord(c) if isinstance(c, str) else c


def is_ascii_letter(c: Union[str, int]) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii_capital(c: Union[str, int]) -> bool:
    """Tell whether ``c`` is an ASCII capital letter."""
    return ord("A") <= _code(c) <= ord("Z")


def find_entry(entries: DLList, word: str) -> Optional[WordEntry]:
    """Return the entry holding ``word``, or None."""
    node = entries.find(lambda entry: entry.word == word)
    return None if node is None else node.data


def log_word(entries: DLList, word: str) -> WordEntry:
    """Count one more ``word``, appending a new entry if it is unseen."""
    entry = find_entry(entries, word)
    if entry is None:
        entry = WordEntry(word)
        entries.insert_tail(entry)
    else:
        entry.count += 1
    return entry


def _format_line(entry: WordEntry) -> str:
    return f"word: {entry.word} | length: {entry.length} | count: {entry.count}\n"


def format_entries(entries: DLList) -> str:
    """Render the entries head to tail, then tail to head."""
    forward = "".join(_format_line(entry) for entry in entries)
    backward = "".join(_format_line(entry) for entry in reversed(entries))
    return f"{_HEAD_BANNER}{forward}{_TAIL_BANNER}{backward}"