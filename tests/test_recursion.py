import pytest

from algodrills import recursion


@pytest.mark.parametrize("start,stop", [(0, 5), (3, 3), (-2, 4)])
def test_count_from(start, stop):
    assert recursion.count_from(start, stop) == list(range(start, stop))


def test_count_from_rejects_backwards_range():
    with pytest.raises(ValueError):
        recursion.count_from(6, 5)


@pytest.mark.parametrize("n", [0, 1, 4])
def test_greetings(n):
    result = recursion.greetings(n)
    assert len(result) == n
    assert all(g == "Hello" for g in result)


def test_greetings_negative_is_empty():
    assert recursion.greetings(-3) == []


@pytest.mark.parametrize("n", [0, 1, 7])
def test_count_up_and_down(n):
    up = recursion.count_up(n)
    assert up == list(range(n + 1))
    assert recursion.count_down(n) == up[::-1]


@pytest.mark.parametrize("items", [[], [1], [1, 2], [3, 1, 4, 1, 5], list(range(50))])
def test_reversals_agree(items):
    first = list(items)
    second = list(items)
    recursion.reverse_in_place(first)
    recursion.reverse_recursive(second)
    assert first == list(reversed(items))
    assert second == list(reversed(items))


def test_reverse_twice_restores():
    items = ["a", "b", "c", "d"]
    recursion.reverse_recursive(items)
    recursion.reverse_recursive(items)
    assert items == ["a", "b", "c", "d"]