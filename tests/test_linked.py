import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.linked import LinkedList, Node


def test_empty_list_has_no_elements():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None


def test_constructor_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]


def test_add_front_prepends():
    items = LinkedList(["b"])
    node = items.add_front("a")
    assert items.head is node
    assert list(items) == ["a", "b"]


def test_add_back_appends():
    items = LinkedList(["a"])
    node = items.add_back("b")
    assert items.last() is node
    assert list(items) == ["a", "b"]


def test_add_back_to_empty_sets_head():
    items = LinkedList()
    node = items.add_back("only")
    assert items.head is node
    assert items.last() is node


def test_last_returns_tail_node():
    items = LinkedList([1, 2, 3])
    tail = items.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    items = LinkedList(["x", "y", "z"])
    items.clear(deleted.append)
    assert deleted == ["x", "y", "z"]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_delete():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_iterate_visits_every_content():
    seen = []
    items = LinkedList([3, 1, 2])
    items.iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    items = LinkedList(["a", "b"])
    mapped = items.map(str.upper, None)
    assert list(mapped) == ["A", "B"]
    assert list(items) == ["a", "b"]
    assert mapped.head is not items.head


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str.upper, None)) == 0


def test_map_failure_deletes_partial_result_and_raises():
    deleted = []

    def halve(value):
        if value == 0:
            raise ZeroDivisionError("zero")
        return 10 // value

    items = LinkedList([1, 2, 0, 5])
    with pytest.raises(ZeroDivisionError):
        items.map(halve, deleted.append)
    assert deleted == [10 // 1, 10 // 2]


@given(st.lists(st.integers()))
def test_len_matches_contents(values):
    items = LinkedList(values)
    assert len(items) == len(values)
    assert list(items) == values


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_front_and_back_insertion_order(front, back):
    items = LinkedList()
    for value in front:
        items.add_front(value)
    for value in back:
        items.add_back(value)
    assert list(items) == list(reversed(front)) + back


@given(st.lists(st.integers()))
def test_map_preserves_length_and_order(values):
    mapped = LinkedList(values).map(lambda v: v * 2, None)
    assert list(mapped) == [v * 2 for v in values]