import copy

import pytest

from structlab.dllist import DLList


def _words_list():
    words = DLList()
    words.push_front("Irish")
    words.append("Here")
    words.push_front("Go")
    words.push_front("We")
    words.append("We")
    words.push_front("Here")
    words.append("Go")
    return words


def test_string_example_order():
    words = _words_list()
    assert list(words) == ["Here", "We", "Go", "Irish", "Here", "We", "Go"]
    assert str(words) == "Here We Go Irish Here We Go "


def test_reverse_follows_prev_links():
    words = _words_list()
    assert list(reversed(words)) == list(words)[::-1]


def test_float_example_delete():
    values = DLList()
    values.append(22.1)
    values.append(-19.46)
    values.append(1.4e-7)
    values.push_front(1.0)
    assert list(values) == [1.0, 22.1, -19.46, 1.4e-7]
    assert values.delete(-19.46) is True
    assert list(values) == [1.0, 22.1, 1.4e-7]
    assert list(reversed(values)) == [1.4e-7, 22.1, 1.0]


def test_delete_missing_returns_false():
    values = DLList([1, 2, 3])
    assert values.delete(9) is False
    assert list(values) == [1, 2, 3]


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        DLList().delete(1)


def test_delete_head_and_tail_keeps_links():
    values = DLList([1, 2, 3])
    assert values.delete(1)
    assert values.delete(3)
    assert list(values) == [2]
    assert list(reversed(values)) == [2]
    assert values.delete(2)
    assert values.is_empty()
    assert str(values) == "The list is empty"


def test_push_front_on_empty_sets_tail():
    values = DLList()
    values.push_front(5)
    values.push_back(6)
    assert list(values) == [5, 6]
    assert list(reversed(values)) == [6, 5]


def test_merge_equal_lengths():
    first = DLList([1, 2, 3])
    second = DLList([10, 20, 30])
    first.merge(second)
    assert list(first) == [1, 10, 2, 20, 3, 30]
    assert list(reversed(first)) == [30, 3, 20, 2, 10, 1]
    assert second.is_empty()


def test_merge_first_longer():
    first = DLList([1, 2, 3, 4])
    second = DLList([10])
    first.merge(second)
    assert list(first) == [1, 10, 2, 3, 4]
    assert list(reversed(first)) == [4, 3, 2, 10, 1]


def test_merge_second_longer():
    first = DLList([1])
    second = DLList([10, 20, 30])
    first.merge(second)
    assert list(first) == [1, 10, 20, 30]
    assert list(reversed(first)) == [30, 20, 10, 1]
    first.push_back(40)
    assert list(first)[-1] == 40


def test_merge_with_empty_raises():
    with pytest.raises(ValueError):
        DLList([1]).merge(DLList())
    with pytest.raises(ValueError):
        DLList().merge(DLList([1]))


def test_copy_is_independent():
    original = DLList([1, 2])
    clone = copy.copy(original)
    clone.append(3)
    assert list(original) == [1, 2]
    assert list(clone) == [1, 2, 3]
    assert 3 in clone and 3 not in original
    assert len(clone) == 3