import pytest

from algolab.doubly_linked_list import DoublyLinkedList


@pytest.fixture
def filled():
    dll = DoublyLinkedList()
    dll.insert_left(1)
    dll.insert_left(2)
    dll.insert_right(3)
    return dll


def test_first_insert_sets_cursor():
    dll = DoublyLinkedList()
    dll.insert_left(7)
    assert dll.current() == 7
    assert list(dll) == [7]
    assert len(dll) == 1


def test_inserts_keep_cursor_on_same_node(filled):
    assert filled.current() == 1
    assert list(filled) == [2, 1, 3]
    assert len(filled) == 3


def test_str_format(filled):
    assert str(filled) == "List:2->1->3"


def test_empty_str_and_current():
    dll = DoublyLinkedList()
    assert str(dll) == "List:"
    with pytest.raises(IndexError):
        dll.current()


def test_moving(filled):
    assert filled.move_left() == 2
    with pytest.raises(IndexError):
        filled.move_left()
    assert filled.current() == 2
    filled.move_right()
    assert filled.move_right() == 3
    with pytest.raises(IndexError):
        filled.move_right()


def test_remove_moves_cursor_forward(filled):
    assert filled.remove() == 1
    assert filled.current() == 3
    assert list(filled) == [2, 3]


def test_remove_last_moves_cursor_back(filled):
    filled.move_right()
    assert filled.remove() == 3
    assert filled.current() == 1
    assert len(filled) == 2


def test_remove_until_empty(filled):
    removed = [filled.remove() for _ in range(3)]
    assert sorted(removed) == [1, 2, 3]
    assert len(filled) == 0
    assert list(filled) == []
    with pytest.raises(IndexError):
        filled.remove()


def test_insert_right_on_empty_list():
    dll = DoublyLinkedList()
    dll.insert_right(4)
    assert dll.current() == 4
    assert list(dll) == [4]


def test_len_matches_iteration(filled):
    filled.insert_right(9)
    filled.insert_left(8)
    assert len(filled) == len(list(filled))