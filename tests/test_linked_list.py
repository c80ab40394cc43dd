import pytest

from minishell.linked_list import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    lst.push_back("only")
    assert lst.head is not None and lst.head.content == "only"
    assert lst.last() is lst.head


def test_last_returns_final_node():
    lst = LinkedList(["x", "y", "z"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "z"
    assert tail.next is None


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList(["a"])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_all():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    original = LinkedList(["ab", "cd"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(original) == ["ab", "cd"]


def test_map_none_result_cleans_up():
    deleted = []

    def f(x):
        return None if x == 3 else x

    result = LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert result is None
    assert deleted == [1, 2]


@pytest.mark.parametrize("items", [[], [0], list(range(10))])
def test_len_matches_items(items):
    assert len(LinkedList(items)) == len(items)