import pytest

from estudos.linked_list import DoubleLinkedList, IndexOutOfRangeError, LinkedListEval


def test_linked_list_operations():
    values = [0, -10, 69, 420]
    lst = LinkedListEval()
    for value in values:
        lst.append(value)

    assert len(lst) == len(values)
    for i, value in enumerate(values):
        assert lst.get(i) == value

    lst.prepend(69420)
    assert lst.get(0) == 69420
    assert lst.index_of(69420) == 0

    lst.set(0, 123)
    assert lst.get(0) == 123


@pytest.mark.parametrize(
    "items, to_remove, expected",
    [
        (["fizz", "buzz", "blaus"], "blaus", ["fizz", "buzz"]),
        (["fizz", "buzz", "blaus"], "flan", ["fizz", "buzz", "blaus"]),
        (["flan", "flan", "blaus"], "flan", ["flan", "blaus"]),
    ],
)
def test_remove_value(items, to_remove, expected):
    lst = LinkedListEval()
    for i, item in enumerate(items):
        lst.append(item)
        assert lst.get(i) == item

    lst.remove_value(to_remove)

    assert [lst.get(i) for i in range(len(lst))] == expected


@pytest.mark.parametrize("seed", [("test", "fuzz", "random"), ("tset", "flan", "modnar")])
@pytest.mark.parametrize("choice", [0, 1])
def test_remove_value_removes_one_occurrence(seed, choice):
    lst = LinkedListEval()
    for i, value in enumerate(seed):
        lst.append(value)
        assert lst.get(i) == value

    target = seed[choice]
    lst.remove_value(target)

    remaining = [lst.get(i) for i in range(len(lst))]
    assert remaining.count(target) == list(seed).count(target) - 1


def test_iteration_follows_order():
    lst = DoubleLinkedList()
    lst.append(2)
    lst.append(3)
    lst.prepend(1)
    assert list(lst) == [1, 2, 3]


def test_constructor_takes_items():
    lst = DoubleLinkedList([4, 5, 6])
    assert list(lst) == [4, 5, 6]
    assert len(lst) == 3


def test_get_on_empty_list_returns_none():
    assert DoubleLinkedList().get(0) is None


def test_get_at_length_returns_tail():
    lst = DoubleLinkedList(["a", "b", "c"])
    assert lst.get(3) == "c"


def test_get_out_of_range_raises():
    lst = DoubleLinkedList([1, 2])
    with pytest.raises(IndexOutOfRangeError):
        lst.get(3)
    with pytest.raises(IndexError):
        lst.get(-1)


def test_insert_at_positions():
    lst = DoubleLinkedList(["a", "c"])
    lst.insert_at(1, "b")
    lst.insert_at(0, "start")
    lst.insert_at(len(lst), "end")
    assert list(lst) == ["start", "a", "b", "c", "end"]
    assert len(lst) == 5


def test_insert_at_out_of_range_raises():
    lst = DoubleLinkedList([1])
    with pytest.raises(IndexOutOfRangeError):
        lst.insert_at(5, 2)
    assert list(lst) == [1]


def test_set_on_empty_list_appends():
    lst = DoubleLinkedList()
    lst.set(0, "x")
    assert list(lst) == ["x"]


def test_set_out_of_range_raises():
    with pytest.raises(IndexOutOfRangeError):
        DoubleLinkedList([1]).set(2, 9)


def test_remove_head_middle_tail():
    lst = DoubleLinkedList(["a", "b", "c", "d"])
    assert lst.remove(0) == "a"
    assert list(lst) == ["b", "c", "d"]
    assert lst.remove(1) == "c"
    assert list(lst) == ["b", "d"]
    assert lst.remove(1) == "d"
    assert list(lst) == ["b"]
    lst.append("e")
    assert list(lst) == ["b", "e"]


def test_remove_on_empty_list_is_noop():
    lst = DoubleLinkedList()
    assert lst.remove(0) is None
    assert len(lst) == 0


def test_remove_out_of_range_raises():
    with pytest.raises(IndexOutOfRangeError):
        DoubleLinkedList([1]).remove(2)


def test_index_of_missing_value():
    assert LinkedListEval(["fizz", "buzz"]).index_of("flan") == -1