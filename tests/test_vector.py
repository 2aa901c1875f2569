import pytest

from circuitos.vector import index_of, relocate, swap


def test_relocate_backwards_shifts_right():
    items = ["a", "b", "c", "d", "e"]
    relocate(items, 3, 1)
    assert items == ["a", "d", "b", "c", "e"]


def test_relocate_forwards_shifts_left():
    items = ["a", "b", "c", "d", "e"]
    relocate(items, 1, 3)
    assert items == ["a", "c", "d", "b", "e"]


def test_relocate_same_position_is_noop():
    items = [1, 2, 3]
    relocate(items, 1, 1)
    assert items == [1, 2, 3]


def test_relocate_round_trip_restores_order():
    items = list(range(6))
    relocate(items, 0, 5)
    relocate(items, 5, 0)
    assert items == list(range(6))


def test_relocate_keeps_elements():
    items = [5, 1, 4, 2]
    relocate(items, 0, 2)
    assert sorted(items) == [1, 2, 4, 5]
    assert items[2] == 5


@pytest.mark.parametrize("old, new", [(5, 0), (0, 5), (-1, 0)])
def test_relocate_out_of_range(old, new):
    with pytest.raises(IndexError):
        relocate([1, 2, 3], old, new)


def test_swap_exchanges_elements():
    items = ["x", "y", "z"]
    swap(items, 0, 2)
    assert items == ["z", "y", "x"]


def test_swap_twice_restores():
    items = [3, 1, 2]
    swap(items, 0, 1)
    swap(items, 0, 1)
    assert items == [3, 1, 2]


def test_swap_out_of_range():
    with pytest.raises(IndexError):
        swap([1], 0, 1)


def test_index_of_found():
    items = ["a", "b", "c", "b"]
    assert index_of(items, "b") == 1
    assert index_of(items, "c") == 2


def test_index_of_missing_returns_minus_one():
    assert index_of([1, 2, 3], 9) == -1
    assert index_of([], 0) == -1