import random

import pytest

from streamsort.sorting import sample_sort, simple_quicksort, sort


def _random_values(count, seed, low=-1000, high=1000):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(count)]


@pytest.mark.parametrize(
    "values",
    [
        [],
        [7],
        [2, 1],
        [5, 5, 5, 5],
        list(range(50)),
        list(range(50, 0, -1)),
        _random_values(500, 1),
        _random_values(300, 2, 0, 3),
    ],
)
def test_simple_quicksort_matches_sorted(values):
    assert simple_quicksort(values) == sorted(values)


def test_simple_quicksort_leaves_input_untouched():
    values = [3, 1, 2]
    simple_quicksort(values)
    assert values == [3, 1, 2]


@pytest.mark.parametrize("threads", [1, 2, 3, 4, 5, 8])
def test_sample_sort_matches_sorted(threads):
    values = _random_values(1000, threads)
    assert sample_sort(values, threads) == sorted(values)


@pytest.mark.parametrize("threads", [1, 2, 4])
def test_sample_sort_with_many_duplicates(threads):
    values = _random_values(400, 9, 0, 2)
    assert sample_sort(values, threads) == sorted(values)


def test_sample_sort_more_threads_than_values():
    values = [4, -2, 9]
    assert sample_sort(values, 8) == [-2, 4, 9]


def test_sample_sort_empty():
    assert sample_sort([], 4) == []


def test_sample_sort_keeps_every_element():
    values = _random_values(777, 5)
    result = sample_sort(values, 3)
    assert len(result) == len(values)
    assert sorted(result) == sorted(values)


def test_sample_sort_rejects_zero_threads():
    with pytest.raises(ValueError):
        sample_sort([1, 2], 0)


def test_sort_sequential_and_parallel_agree():
    values = _random_values(600, 11)
    assert sort(values, 0) == sort(values, 4) == sorted(values)


def test_sort_default_is_sequential():
    values = _random_values(100, 12)
    assert sort(values) == sorted(values)


def test_sort_rejects_negative_threads():
    with pytest.raises(ValueError):
        sort([1], -1)