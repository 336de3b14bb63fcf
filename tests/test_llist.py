import pytest

from pipex.llist import LinkedList, Node


def test_empty_list_has_no_length_and_no_items():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.head is None


def test_init_keeps_order():
    items = LinkedList(["lorem", "ipsum", "dolor", "sit"])
    assert list(items) == ["lorem", "ipsum", "dolor", "sit"]
    assert len(items) == 4


def test_push_front_prepends():
    items = LinkedList([2, 3])
    node = items.push_front(1)
    assert list(items) == [1, 2, 3]
    assert items.head is node
    assert node.next.value == 2


def test_push_back_appends():
    items = LinkedList([1])
    node = items.push_back(2)
    assert list(items) == [1, 2]
    assert node == Node(2)
    assert items.last() == 2


def test_push_front_on_empty_sets_last():
    items = LinkedList()
    items.push_front("a")
    assert items.last() == "a"
    items.push_back("b")
    assert list(items) == ["a", "b"]


def test_last_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_last_returns_final_value():
    assert LinkedList(["x", "y", "z"]).last() == "z"


def test_for_each_visits_in_order():
    seen = []
    LinkedList([1, 2, 3]).for_each(seen.append)
    assert seen == [1, 2, 3]


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []


def test_clear_releases_every_value():
    released = []
    items = LinkedList(["a", "b", "c"])
    items.clear(released.append)
    assert released == ["a", "b", "c"]
    assert len(items) == 0
    assert list(items) == []


def test_clear_without_release_and_reuse():
    items = LinkedList([1, 2])
    items.clear()
    assert items.head is None
    items.push_back(5)
    assert list(items) == [5]
    assert items.last() == 5


def test_length_matches_iteration():
    items = LinkedList(range(10))
    items.push_front(-1)
    items.push_back(10)
    assert len(items) == len(list(items))