import pytest

from improvedlib.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_add_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.add_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_add_back_appends_and_updates_last():
    lst = LinkedList()
    lst.add_front("x")
    node = lst.add_back("y")
    assert lst.last() is node
    assert list(lst) == ["x", "y"]


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.add_front("only")
    assert lst.last() is node
    assert lst.last().content == "only"


def test_nodes_are_linked():
    lst = LinkedList([1, 2])
    assert isinstance(lst.head, Node)
    assert lst.head.next is lst.last()
    assert lst.last().next is None


def test_remove_first_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.remove_first(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]
    assert len(lst) == 1


def test_remove_first_last_element_resets_tail():
    lst = LinkedList(["a"])
    lst.remove_first()
    assert lst.last() is None
    lst.add_back("b")
    assert list(lst) == ["b"]


def test_remove_first_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_deletes_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_iterate_visits_every_content():
    seen = []
    lst = LinkedList(["p", "q", "r"])
    lst.iterate(seen.append)
    assert seen == ["p", "q", "r"]


def test_map_builds_new_list():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped is not lst


def test_map_failure_deletes_partial_results():
    deleted = []

    def boom(value):
        if value == "c":
            raise RuntimeError("failed")
        return value * 2

    lst = LinkedList(["a", "b", "c"])
    with pytest.raises(RuntimeError):
        lst.map(boom, deleted.append)
    assert deleted == ["aa", "bb"]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_len_tracks_mutations():
    lst = LinkedList()
    for item in range(5):
        lst.add_back(item)
    lst.remove_first()
    assert len(lst) == len(list(lst)) == 4