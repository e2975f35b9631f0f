"""Tests for heap-based top-k selection."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from webrank.searcher import top_k_sort


def test_k_larger_than_input_returns_full_sort():
    items = [5, 1, 4, 1, 3]
    original = list(items)

    result = top_k_sort(10, items)

    assert result == [1, 1, 3, 4, 5]
    assert items == original
    assert result is not items


def test_k_equal_to_input_size_returns_full_sort():
    items = ["pear", "apple", "fig"]

    assert top_k_sort(3, items) == ["apple", "fig", "pear"]


def test_returns_largest_k_ascending():
    items = [9, 2, 7, 4, 11, 0, 7]

    assert top_k_sort(3, items) == [7, 9, 11]


def test_k_zero_returns_empty_list():
    assert top_k_sort(0, [3, 2, 1]) == []
    assert top_k_sort(0, []) == []


def test_empty_input():
    assert top_k_sort(5, []) == []


def test_negative_k_rejected():
    with pytest.raises(ValueError):
        top_k_sort(-1, [1, 2, 3])
    with pytest.raises(ValueError):
        top_k_sort(-1, [])


def test_none_element_rejected():
    with pytest.raises(ValueError):
        top_k_sort(2, [1, None, 3])
    with pytest.raises(ValueError):
        top_k_sort(5, [None])
    with pytest.raises(ValueError):
        top_k_sort(0, [None])


def test_accepts_generators_and_tuples():
    assert top_k_sort(2, (x * x for x in range(5))) == [9, 16]
    assert top_k_sort(2, (3, 1, 2)) == [2, 3]


def test_random_inputs_select_top_k():
    rng = random.Random(1234)
    for _ in range(200):
        size = rng.randint(0, 40)
        items = [rng.randint(-20, 20) for _ in range(size)]
        snapshot = list(items)
        k = rng.randint(0, size + 5)

        result = top_k_sort(k, items)

        assert items == snapshot
        assert len(result) == min(k, size)
        assert result == sorted(result)
        assert result == sorted(items)[size - len(result):]

        remaining = Counter(items)
        remaining.subtract(result)
        assert min(remaining.values(), default=0) >= 0
        left_out = list(remaining.elements())
        if result and left_out:
            assert min(result) >= max(left_out)
