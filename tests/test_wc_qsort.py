import random
from collections import Counter

import pytest

from wordtally.dl_list import DLList
from wordtally.wc_entry import WordEntry
from wordtally.wc_qsort import node_at, partition, quicksort


def build(counts):
    entries = DLList()
    for position, count in enumerate(counts):
        entries.insert_tail(WordEntry(f"w{position}", count=count))
    return entries


def counts_of(entries):
    return [entry.count for entry in entries]


def test_node_at_positions():
    entries = build([5, 6, 7])
    assert node_at(entries, 0) is entries.head
    assert node_at(entries, 1) is entries.head
    assert node_at(entries, 3) is entries.tail
    assert node_at(entries, 2).data.count == 6


def test_node_at_out_of_range():
    with pytest.raises(IndexError):
        node_at(build([1, 2]), 3)
    with pytest.raises(IndexError):
        node_at(DLList(), 1)


@pytest.mark.parametrize("seed", range(8))
def test_partition_splits(seed):
    rng = random.Random(seed)
    counts = [rng.randint(1, 6) for _ in range(12)]
    entries = build(counts)
    split = partition(entries, 1, len(counts))
    assert 1 <= split < len(counts)
    result = counts_of(entries)
    assert max(result[:split]) <= min(result[split:])
    assert sorted(result) == sorted(counts)


def test_partition_rejects_bad_range():
    entries = build([1, 2, 3])
    with pytest.raises(ValueError):
        partition(entries, 0, 3)
    with pytest.raises(ValueError):
        partition(entries, 1, 4)


@pytest.mark.parametrize("seed", range(10))
def test_quicksort_sorts_by_count(seed):
    rng = random.Random(seed)
    counts = [rng.randint(1, 9) for _ in range(rng.randint(1, 20))]
    entries = build(counts)
    before = Counter((entry.word, entry.count) for entry in entries)
    quicksort(entries, 1, len(counts))
    assert counts_of(entries) == sorted(counts)
    assert Counter((entry.word, entry.count) for entry in entries) == before
    assert list(reversed(entries)) == list(entries)[::-1]


def test_quicksort_partial_range():
    entries = build([9, 3, 2, 1])
    quicksort(entries, 2, 4)
    assert counts_of(entries) == [9, 1, 2, 3]