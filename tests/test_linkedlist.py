import pytest

from graphmaze.linkedlist import LinkedList, Node


def test_construct_from_items_keeps_order():
    items = [3, 1, 4, 1, 5]
    values = LinkedList(items)
    assert list(values) == items
    assert len(values) == len(items)


def test_reversed_is_reverse_of_iteration():
    items = ["a", "b", "c", "d"]
    values = LinkedList(items)
    assert list(reversed(values)) == items[::-1]


def test_empty_list():
    values = LinkedList()
    assert len(values) == 0
    assert list(values) == []
    assert not values


def test_append_and_appendleft():
    values = LinkedList()
    values.append(2)
    values.appendleft(1)
    values.append(3)
    assert list(values) == [1, 2, 3]
    assert values.first() == 1
    assert values.last() == 3


def test_pop_and_popleft_return_values():
    values = LinkedList([1, 2, 3])
    assert values.pop() == 3
    assert values.popleft() == 1
    assert list(values) == [2]
    assert values.pop() == 2
    assert len(values) == 0


@pytest.mark.parametrize("method", ["pop", "popleft", "first", "last"])
def test_empty_access_raises(method):
    values = LinkedList()
    with pytest.raises(IndexError) as error:
        getattr(values, method)()
    assert "empty list" in str(error.value)
    assert len(values) == 0


def test_find_returns_first_matching_node():
    values = LinkedList(["x", "y", "x"])
    node = values.find("x")
    assert isinstance(node, Node)
    assert node.value == "x"
    assert node.prev is None
    assert node.next.value == "y"


def test_find_missing_returns_none():
    assert LinkedList([1, 2]).find(9) is None


def test_insert_before_middle():
    values = LinkedList([1, 3])
    new = values.insert_before(values.find(3), 2)
    assert new.value == 2
    assert list(values) == [1, 2, 3]
    assert list(reversed(values)) == [3, 2, 1]
    assert len(values) == 3


def test_insert_before_head_becomes_first():
    values = LinkedList([2, 3])
    values.insert_before(values.find(2), 1)
    assert values.first() == 1
    assert list(values) == [1, 2, 3]


def test_insert_before_none_appends():
    values = LinkedList([1])
    values.insert_before(None, 2)
    assert values.last() == 2
    assert list(values) == [1, 2]


def test_insert_into_empty_with_none():
    values = LinkedList()
    values.insert_before(None, "only")
    assert values.first() == values.last() == "only"


def test_remove_middle_head_and_tail():
    values = LinkedList([1, 2, 3, 4])
    values.remove(values.find(2))
    assert list(values) == [1, 3, 4]
    values.remove(values.find(1))
    assert values.first() == 3
    values.remove(values.find(4))
    assert values.last() == 3
    assert list(values) == [3]
    assert list(reversed(values)) == [3]


def test_remove_none_is_ignored():
    values = LinkedList([1, 2])
    values.remove(None)
    assert list(values) == [1, 2]


def test_remove_node_of_other_list_raises():
    first = LinkedList([1])
    second = LinkedList([1])
    with pytest.raises(ValueError):
        second.remove(first.find(1))
    assert list(second) == [1]


def test_removed_node_cannot_be_removed_twice():
    values = LinkedList([1, 2])
    node = values.find(1)
    values.remove(node)
    with pytest.raises(ValueError):
        values.remove(node)
    assert len(values) == 1


def test_clear_empties_list():
    values = LinkedList([1, 2, 3])
    values.clear()
    assert len(values) == 0
    assert list(values) == []
    values.append(5)
    assert list(values) == [5]


def test_equality_compares_contents():
    assert LinkedList([1, 2]) == LinkedList([1, 2])
    assert not LinkedList([1, 2]) == LinkedList([2, 1])


def test_copy_via_constructor_is_independent():
    original = LinkedList([1, 2, 3])
    duplicate = LinkedList(original)
    duplicate.pop()
    assert list(original) == [1, 2, 3]
    assert list(duplicate) == [1, 2]