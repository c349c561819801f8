import random

import pytest

from algodrills.subarrays import (
    alternate_signs,
    longest_positive_subarray_with_sum,
    longest_subarray_with_sum,
    majority_element,
    majority_vote,
    max_profit,
    max_subarray,
    max_subarray_sum_clamped,
    sort_colors,
    two_sum,
    two_sum_sorted,
)


def test_two_sum_finds_pair():
    items = [1, 3, 2, 2, 9]
    i, j = two_sum(items, 4)
    assert i < j
    assert items[i] + items[j] == 4


def test_two_sum_none():
    assert two_sum([1, 2, 3], 100) is None


def test_two_sum_sorted_finds_pair():
    items = [1, 3, 2, 2, 9]
    ordered = sorted(items)
    i, j = two_sum_sorted(items, 4)
    assert i < j
    assert ordered[i] + ordered[j] == 4


def test_two_sum_sorted_none():
    assert two_sum_sorted([5], 5) is None


def test_alternate_signs():
    items = [1, 2, 3, -4, -5, -3, -1, -2, 5, 4]
    result = alternate_signs(items)
    assert result[0::2] == [x for x in items if x > 0]
    assert result[1::2] == [x for x in items if x <= 0]


def test_alternate_signs_unbalanced():
    with pytest.raises(ValueError):
        alternate_signs([1, 2, -1])


def test_max_profit_sample():
    assert max_profit([5, 2, 7, 1, 5, 4]) == 5


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit([]) == 0


def test_max_profit_rising_prices():
    prices = [1, 3, 6, 10]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_longest_subarray_sample():
    assert longest_subarray_with_sum([1, 2, 1, 1, 1], 3) == 3
    assert longest_positive_subarray_with_sum([1, 2, 1, 1, 1], 3) == 3


def test_longest_subarray_with_negatives():
    assert longest_subarray_with_sum([1, -2, 3, 4, -2], 3) == 4


def test_longest_subarray_none():
    assert longest_subarray_with_sum([1, 2], 10) == 0


def test_longest_subarray_all_zero():
    items = [0, 0, 0, 0]
    assert longest_subarray_with_sum(items, 0) == len(items)
    assert longest_positive_subarray_with_sum(items, 0) == len(items)


def test_longest_versions_agree_on_non_negative():
    rng = random.Random(7)
    for _ in range(200):
        items = [rng.randint(0, 4) for _ in range(rng.randint(0, 12))]
        k = rng.randint(0, 10)
        assert longest_positive_subarray_with_sum(items, k) == longest_subarray_with_sum(items, k)


def test_longest_positive_rejects_negative():
    with pytest.raises(ValueError):
        longest_positive_subarray_with_sum([1, -1], 0)


def test_majority_sample():
    items = [1, 4, 4, 4, 1, 2, 4, 3, 4]
    assert majority_element(items) == 4
    assert majority_vote(items) == 4


def test_majority_none():
    assert majority_element([1, 2, 3]) is None


def test_majority_vote_empty():
    with pytest.raises(ValueError):
        majority_vote([])


def test_max_subarray_sample():
    items = [2, 1, -2, -3, 4, 6, -1, 3]
    best, run = max_subarray(items)
    assert best == 12
    assert sum(run) == best
    start = items.index(run[0])
    assert items[start : start + len(run)] == run


def test_max_subarray_all_negative():
    assert max_subarray([-3, -1, -2]) == (-1, [-1])


def test_max_subarray_empty():
    with pytest.raises(ValueError):
        max_subarray([])


def test_max_subarray_sum_clamped_sample():
    assert max_subarray_sum_clamped([2, 1, -2, -3, 4, 6, -1, 3]) == 12


def test_max_subarray_sum_clamped_all_negative():
    assert max_subarray_sum_clamped([-3, -1, -2]) == 0


def test_sort_colors():
    original = [2, 2, 0, 0, 1, 1, 0]
    items = list(original)
    sort_colors(items)
    assert items == sorted(original)


def test_sort_colors_random():
    rng = random.Random(3)
    for _ in range(50):
        original = [rng.randint(0, 2) for _ in range(rng.randint(0, 15))]
        items = list(original)
        sort_colors(items)
        assert items == sorted(original)


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])