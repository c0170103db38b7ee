import pytest

from drills.doubly import DoublyLinkedList, DoublyNode


def _check_links(dll):
    assert list(reversed(dll)) == list(dll)[::-1]
    assert len(dll) == len(list(dll))
    if dll.head is not None:
        assert dll.head.prev is None
        assert dll.tail.next is None


def test_construction_and_iteration():
    values = [5, 10, 15]
    dll = DoublyLinkedList(values)
    assert list(dll) == values
    assert list(reversed(dll)) == values[::-1]
    _check_links(dll)


def test_empty():
    dll = DoublyLinkedList()
    assert list(dll) == []
    assert list(reversed(dll)) == []
    assert len(dll) == 0


def test_source_sequence_of_operations():
    dll = DoublyLinkedList([10])
    model = [10]
    dll.push_front(11)
    model.insert(0, 11)
    dll.push_back(13)
    model.append(13)
    dll.insert_at(4, 14)
    model.insert(3, 14)
    removed = dll.delete_at(3)
    assert removed == model.pop(2)
    assert list(dll) == model
    _check_links(dll)


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_matches_list_model(position):
    values = [1, 5, 10]
    dll = DoublyLinkedList(values)
    dll.insert_at(position, 42)
    model = list(values)
    model.insert(position - 1, 42)
    assert list(dll) == model
    _check_links(dll)


@pytest.mark.parametrize("position", [0, 4])
def test_insert_at_out_of_range(position):
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2]).insert_at(position, 3)


@pytest.mark.parametrize("position", [1, 2, 3])
def test_delete_at_matches_list_model(position):
    values = [1, 5, 10]
    dll = DoublyLinkedList(values)
    model = list(values)
    assert dll.delete_at(position) == model.pop(position - 1)
    assert list(dll) == model
    _check_links(dll)


def test_delete_only_node_empties_list():
    dll = DoublyLinkedList([7])
    assert dll.delete_at(1) == 7
    assert dll.head is None and dll.tail is None
    assert len(dll) == 0


def test_delete_at_out_of_range():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_at(1)


def test_push_front_on_empty_sets_tail():
    dll = DoublyLinkedList()
    dll.push_front(3)
    assert dll.head is dll.tail
    assert dll.tail.value == 3


def test_node_defaults():
    node = DoublyNode(4)
    assert node.value == 4
    assert node.prev is None and node.next is None