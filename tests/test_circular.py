import pytest

from drills.circular import CircularLinkedList, CircularNode


def _check_ring(cll):
    if cll.tail is None:
        assert len(cll) == 0
        return
    node = cll.head
    for _ in range(len(cll)):
        node = node.next
    assert node is cll.head
    assert cll.tail.next is cll.head


def test_construction_keeps_order():
    values = [5, 10, 15]
    cll = CircularLinkedList(values)
    assert list(cll) == values
    assert cll.head.value == 5
    assert cll.tail.value == 15
    _check_ring(cll)


def test_insert_after_on_empty_creates_single_ring():
    cll = CircularLinkedList()
    cll.insert_after(5, 10)
    assert list(cll) == [10]
    assert cll.tail.next is cll.tail


def test_remove_only_node_empties_list():
    cll = CircularLinkedList()
    cll.insert_after(5, 10)
    cll.remove(10)
    assert list(cll) == []
    assert cll.tail is None


def test_insert_after_middle_and_last():
    cll = CircularLinkedList([1, 2, 3])
    cll.insert_after(2, 9)
    cll.insert_after(3, 7)
    assert list(cll) == [1, 2, 9, 3, 7]
    assert cll.tail.value == 7
    _check_ring(cll)


def test_insert_after_missing_raises():
    cll = CircularLinkedList([1, 2])
    with pytest.raises(ValueError):
        cll.insert_after(42, 3)
    assert list(cll) == [1, 2]


@pytest.mark.parametrize("value", [1, 2, 3])
def test_remove_matches_list_model(value):
    values = [1, 2, 3]
    cll = CircularLinkedList(values)
    cll.remove(value)
    model = list(values)
    model.remove(value)
    assert list(cll) == model
    assert cll.tail.value == model[-1]
    _check_ring(cll)


def test_remove_errors():
    with pytest.raises(ValueError):
        CircularLinkedList().remove(1)
    with pytest.raises(ValueError):
        CircularLinkedList([1]).remove(2)


def test_push_front_and_back():
    cll = CircularLinkedList([5, 10, 15])
    cll.push_front(20)
    cll.push_back(1)
    assert list(cll) == [20, 5, 10, 15, 1]
    assert len(cll) == 5
    _check_ring(cll)


@pytest.mark.parametrize("position", [1, 2, 3, 4, 5])
def test_insert_at_matches_list_model(position):
    values = [20, 5, 10, 15]
    cll = CircularLinkedList(values)
    cll.insert_at(position, 32)
    model = list(values)
    model.insert(position - 1, 32)
    assert list(cll) == model
    _check_ring(cll)


@pytest.mark.parametrize("position", [0, 3])
def test_insert_at_out_of_range(position):
    with pytest.raises(IndexError):
        CircularLinkedList([1]).insert_at(position, 2)


def test_node_defaults():
    node = CircularNode(3)
    assert node.value == 3
    assert node.next is None