import copy

import pytest

from patterndemos.circular_list import CircularIterator, CircularList

ITEMS = [10, 20, 30, 40, 50]


@pytest.fixture
def clist():
    return CircularList(ITEMS)


def test_insert_back_keeps_order(clist):
    assert list(clist) == ITEMS
    assert len(clist) == len(ITEMS)


def test_front_and_back(clist):
    assert clist.front() == ITEMS[0]
    assert clist.back() == ITEMS[-1]


def test_insert_front(clist):
    clist.insert_front(5)
    assert list(clist) == [5] + ITEMS
    assert clist.back() == ITEMS[-1]


def test_insert_at_middle(clist):
    clist.insert_at(3, 25)
    assert clist.at(3) == 25
    assert len(clist) == len(ITEMS) + 1
    assert list(clist)[:3] == ITEMS[:3]
    assert list(clist)[4:] == ITEMS[3:]


def test_insert_at_ends(clist):
    clist.insert_at(0, 1)
    clist.insert_at(len(clist), 99)
    assert clist.front() == 1
    assert clist.back() == 99


@pytest.mark.parametrize("index", [-1, len(ITEMS) + 1])
def test_insert_at_out_of_range(clist, index):
    with pytest.raises(IndexError):
        clist.insert_at(index, 7)


def test_empty_access_raises():
    empty = CircularList()
    with pytest.raises(IndexError):
        empty.front()
    with pytest.raises(IndexError):
        empty.back()
    with pytest.raises(IndexError):
        empty.at(0)


@pytest.mark.parametrize("index", [-1, len(ITEMS)])
def test_at_out_of_range(clist, index):
    with pytest.raises(IndexError):
        clist.at(index)


def test_getitem_matches_at(clist):
    assert [clist[i] for i in range(len(clist))] == ITEMS


def test_remove_front_and_back(clist):
    assert clist.remove_front() is True
    assert clist.remove_back() is True
    assert list(clist) == ITEMS[1:-1]


def test_remove_on_empty_returns_false():
    empty = CircularList()
    assert empty.remove_front() is False
    assert empty.remove_back() is False
    assert empty.remove_at(0) is False
    assert empty.remove_value(1) is False


def test_remove_single_element_empties():
    single = CircularList([1])
    assert single.remove_back() is True
    assert len(single) == 0
    assert list(single) == []


def test_remove_at(clist):
    assert clist.remove_at(2) is True
    assert list(clist) == ITEMS[:2] + ITEMS[3:]
    assert clist.remove_at(len(clist)) is False


def test_remove_value(clist):
    assert clist.remove_value(30) is True
    assert 30 not in clist
    assert clist.remove_value(12345) is False
    assert len(clist) == len(ITEMS) - 1


def test_find_index_and_contains(clist):
    assert clist.find_index(40) == ITEMS.index(40)
    assert clist.find_index(999) == -1
    assert 30 in clist
    assert 31 not in clist


def test_reverse(clist):
    clist.reverse()
    assert list(clist) == list(reversed(ITEMS))
    assert clist.back() == ITEMS[0]


def test_reverse_twice_restores(clist):
    clist.reverse()
    clist.reverse()
    assert list(clist) == ITEMS


def test_rotate_left_moves_front(clist):
    clist.rotate_left(2)
    assert clist.front() == ITEMS[2]
    assert sorted(clist) == sorted(ITEMS)


def test_rotate_left_then_right_restores(clist):
    clist.rotate_left(3)
    clist.rotate_right(3)
    assert list(clist) == ITEMS


def test_rotate_full_cycle_is_identity(clist):
    clist.rotate_left(len(ITEMS))
    clist.rotate_right(len(ITEMS) * 2)
    assert list(clist) == ITEMS


def test_rotate_non_positive_does_nothing(clist):
    clist.rotate_left(0)
    clist.rotate_right(-3)
    assert list(clist) == ITEMS


def test_rotate_right_moves_last_to_front(clist):
    clist.rotate_right()
    assert clist.front() == ITEMS[-1]


def test_clear(clist):
    clist.clear()
    assert len(clist) == 0
    assert list(clist) == []


def test_copy_is_independent(clist):
    other = copy.copy(clist)
    other.insert_back(60)
    assert list(clist) == ITEMS
    assert list(other) == ITEMS + [60]


def test_display(capsys):
    CircularList([1, 2, 3]).display()
    assert capsys.readouterr().out == "1 -> 2 -> 3 -> (back to 1)\n"


def test_display_empty(capsys):
    CircularList().display()
    assert capsys.readouterr().out == "Empty circular list\n"


def test_display_circular_two_rotations(capsys):
    CircularList([1, 2, 3]).display_circular(2)
    out = capsys.readouterr().out.strip()
    assert out.split(" -> ") == ["1", "2", "3"] * 2


def test_begin_equals_end_after_full_cycle(clist):
    assert clist.begin() == clist.end()
    assert CircularList().end().is_valid() is False


def test_iterator_wraps_when_advanced(clist):
    it = clist.begin().advance(10)
    assert it.is_valid()
    assert it.value() == ITEMS[10 % len(ITEMS)]


def test_iterator_distance(clist):
    start = clist.begin()
    later = clist.begin().advance(3)
    assert start.distance(later) == 3
    assert later.value() == ITEMS[3]


def test_iterator_reset(clist):
    it = clist.circular_begin().advance(3)
    it.reset_to_begin()
    assert it.value() == ITEMS[0]


def test_circular_iterator_one_loop(clist):
    assert list(CircularIterator(clist)) == ITEMS


def test_circular_iterator_several_loops(clist):
    assert list(CircularIterator(clist, 3)) == ITEMS * 3


def test_circular_iterator_loop_count(clist):
    it = CircularIterator(clist, 2)
    for _ in range(len(ITEMS)):
        it.step_forward()
    assert it.current_loop() == 1
    assert it.has_more_loops() is True
    for _ in range(len(ITEMS)):
        it.step_forward()
    assert it.current_loop() == 2
    assert it.has_more_loops() is False


def test_circular_iterator_value(clist):
    it = CircularIterator(clist)
    it.step_forward()
    assert it.value() == ITEMS[1]


def test_circular_iterator_on_empty_list():
    it = CircularIterator(CircularList())
    assert list(it) == []
    with pytest.raises(IndexError):
        it.value()