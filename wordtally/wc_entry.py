"""A word together with how often it has been seen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class WordEntry:
    """A counted word; a new entry has been seen once."""

    word: str
    length: Optional[int] = None
    count: int = 1

    def __post_init__(self) -> None:
        if self.length is None:
            self.length = len(self.word)