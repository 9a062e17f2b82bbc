"""Quicksort of a word-entry list by count, addressing nodes by position."""

from __future__ import annotations

from .dl_list import DLList, Node
from .prand import prand


def node_at(entries: DLList, index: int) -> Node:
    """Return the node at 1-based ``index``; indices below 1 give the head."""
    node = entries.head
    if node is None:
        raise IndexError("list is empty")
    for _ in range(index - 1):
        node = node.next
        if node is None:
            raise IndexError(f"no node at position {index}")
    return node


def _count(entries: DLList, index: int) -> int:
    return node_at(entries, index).data.count


def partition(entries: DLList, left: int, right: int) -> int:
    """Partition positions ``left..right`` around a random pivot.

    Returns a split position ``p`` such that every count in ``left..p`` is no
    greater than every count in ``p+1..right``.
    """
    if left < 1 or right > len(entries) or left >= right:
        raise ValueError(f"invalid range {left}..{right}")
    chosen = left + prand(right - left)
    entries.swap(node_at(entries, chosen), node_at(entries, left))
    pivot = _count(entries, left)
    i, j = left - 1, right + 1
    while True:
        i += 1
        while _count(entries, i) < pivot:
            i += 1
        j -= 1
        while _count(entries, j) > pivot:
            j -= 1
        if i >= j:
            return j
        entries.swap(node_at(entries, i), node_at(entries, j))


def quicksort(entries: DLList, left: int, right: int) -> None:
    """Sort positions ``left..right`` into ascending order of count."""
    if left < right:
        split = partition(entries, left, right)
        quicksort(entries, left, split)
        quicksort(entries, split + 1, right)