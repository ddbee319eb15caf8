import pytest
from hypothesis import given, strategies as st

from algobox.linkedlist import LinkedList


def test_worked_example_sequence():
    items = LinkedList()
    items.append(1)
    items.prepend(7)
    items.insert_after(2, 100)
    assert list(items) == [7, 1, 100]
    items.append(3)
    items.insert_at(2, 88)
    assert list(items) == [7, 88, 1, 100, 3]
    assert len(items) == 5
    assert items.remove(100) == 100
    assert list(items) == [7, 88, 1, 3]
    assert items.remove(1) == 1
    assert list(items) == [7, 88, 3]
    assert items.find(3) == 3
    assert items.remove_at(3) == 3
    assert list(items) == [7, 88]


def test_reverse_example():
    items = LinkedList()
    for value in (0, 1, 8, 0, 4, 10):
        items.prepend(value)
    assert list(items) == [10, 4, 0, 8, 1, 0]
    items.reverse()
    assert list(items) == [0, 1, 8, 0, 4, 10]


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.find(1) is None


def test_remove_missing_raises():
    items = LinkedList([1, 2])
    with pytest.raises(ValueError):
        items.remove(9)
    assert list(items) == [1, 2]


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().remove(1)


def test_remove_at_errors():
    with pytest.raises(IndexError):
        LinkedList().remove_at(1)
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.remove_at(3)
    with pytest.raises(IndexError):
        items.remove_at(0)
    assert list(items) == [1, 2]


def test_insert_at_errors():
    with pytest.raises(IndexError):
        LinkedList().insert_at(1, 5)
    items = LinkedList([1])
    with pytest.raises(IndexError):
        items.insert_at(0, 5)
    with pytest.raises(IndexError):
        items.insert_at(3, 5)
    assert list(items) == [1]


def test_insert_at_end_position():
    items = LinkedList([1, 2])
    items.insert_at(3, 9)
    assert list(items) == [1, 2, 9]


def test_insert_after_errors():
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert_after(3, 5)
    with pytest.raises(IndexError):
        LinkedList().insert_after(1, 5)
    assert len(items) == 2


def test_remove_takes_first_occurrence():
    items = LinkedList([4, 2, 4])
    items.remove(4)
    assert list(items) == [2, 4]


def test_repr_shows_items():
    assert repr(LinkedList([1, 2])) == "LinkedList([1, 2])"


@given(st.lists(st.integers()))
def test_roundtrip_and_length(values):
    items = LinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


@given(st.lists(st.integers()))
def test_reverse_matches_list_reversal(values):
    items = LinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    items.reverse()
    assert list(items) == values


@given(st.lists(st.integers()), st.integers())
def test_append_and_prepend(values, extra):
    items = LinkedList(values)
    items.append(extra)
    items.prepend(extra)
    assert list(items) == [extra, *values, extra]
    assert len(items) == len(values) + 2


@given(st.lists(st.integers(), min_size=1), st.data())
def test_insert_at_matches_list_insert(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values) + 1))
    items = LinkedList(values)
    items.insert_at(position, "x")
    expected = list(values)
    expected.insert(position - 1, "x")
    assert list(items) == expected
    assert len(items) == len(expected)


@given(st.lists(st.integers(), min_size=1), st.data())
def test_insert_after_matches_list_insert(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values)))
    items = LinkedList(values)
    items.insert_after(position, "x")
    expected = list(values)
    expected.insert(position, "x")
    assert list(items) == expected


@given(st.lists(st.integers(), min_size=1), st.data())
def test_remove_at_matches_list_pop(values, data):
    position = data.draw(st.integers(min_value=1, max_value=len(values)))
    items = LinkedList(values)
    expected = list(values)
    assert items.remove_at(position) == expected.pop(position - 1)
    assert list(items) == expected
    assert len(items) == len(expected)


@given(st.lists(st.integers(min_value=0, max_value=5)), st.integers(min_value=0, max_value=5))
def test_find_matches_list_index(values, target):
    items = LinkedList(values)
    if target in values:
        assert items.find(target) == values.index(target) + 1
    else:
        assert items.find(target) is None