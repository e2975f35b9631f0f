"""Tests for the array-backed min-heap."""

from __future__ import annotations

import random

import pytest

from webrank.heap import ArrayHeap


def test_new_heap_is_empty():
    heap = ArrayHeap()

    assert heap.is_empty()
    assert heap.size() == 0
    assert len(heap) == 0


def test_remove_min_drains_in_ascending_order():
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(200)]
    heap = ArrayHeap()
    for value in values:
        heap.insert(value)

    assert heap.size() == len(values)
    drained = [heap.remove_min() for _ in range(len(values))]

    assert drained == sorted(values)
    assert heap.is_empty()


def test_peek_min_does_not_remove():
    heap = ArrayHeap()
    for value in (5, 3, 8):
        heap.insert(value)

    assert heap.peek_min() == 3
    assert heap.size() == 3


def test_empty_heap_operations_raise():
    heap = ArrayHeap()

    with pytest.raises(IndexError):
        heap.peek_min()
    with pytest.raises(IndexError):
        heap.remove_min()


def test_insert_none_rejected():
    heap = ArrayHeap()

    with pytest.raises(ValueError):
        heap.insert(None)
    assert heap.is_empty()


def test_duplicates_and_tuples():
    heap = ArrayHeap()
    for item in [(2, "b"), (1, "z"), (2, "a"), (1, "z")]:
        heap.insert(item)

    assert [heap.remove_min() for _ in range(4)] == [(1, "z"), (1, "z"), (2, "a"), (2, "b")]
