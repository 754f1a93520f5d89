import copy

import pytest

from structlab.bst import BST

INTS = [12, 10, 8, 11, 14, 13, 16, 15, 17, 7, 9]
SONG = ["Send", "A", "Volley", "Cheer", "On", "High"]


def test_in_order_is_sorted():
    tree = BST(INTS)
    assert tree.in_order() == sorted(INTS)
    assert len(tree) == len(INTS)


def test_remove_cases_from_example():
    tree = BST(INTS)
    assert tree.remove(12) is True
    assert tree.remove(17) is True
    assert tree.remove(8) is True
    assert tree.remove(188) is False
    expected = sorted(set(INTS) - {12, 17, 8})
    assert tree.in_order() == expected
    assert 12 not in tree and 9 in tree


def test_string_tree():
    tree = BST(SONG)
    assert tree.in_order() == sorted(SONG)
    assert tree.remove("High")
    assert tree.in_order() == sorted(set(SONG) - {"High"})
    assert str(tree) == "".join(f"{word} " for word in sorted(set(SONG) - {"High"}))


def test_duplicate_insert_rejected():
    tree = BST([5, 3, 8])
    assert tree.insert(3) is False
    assert tree.insert(4) is True
    assert tree.in_order() == [3, 4, 5, 8]


def test_min_and_max():
    tree = BST(INTS)
    assert tree.find_min() == min(INTS)
    assert tree.find_max() == max(INTS)
    right_heavy = BST([5, 10, 7])
    assert right_heavy.find_max() == 10


def test_empty_tree_errors():
    tree = BST()
    assert tree.is_empty()
    with pytest.raises(ValueError):
        tree.find_min()
    with pytest.raises(ValueError):
        tree.find_max()
    assert tree.remove(1) is False


def test_remove_root_until_empty():
    tree = BST(INTS)
    for value in INTS:
        assert tree.remove(value)
        assert tree.in_order() == sorted(INTS[INTS.index(value) + 1 :])
    assert tree.is_empty()


def test_chars_worst_case_tree():
    letters = [chr(code) for code in range(65, 91)]
    tree = BST(letters)
    assert tree.in_order() == letters
    assert tree.find_min() == "A"
    assert tree.find_max() == "Z"


def test_copy_is_independent():
    tree = BST(INTS)
    clone = copy.copy(tree)
    clone.remove(12)
    assert 12 in tree
    assert 12 not in clone
    assert tree.in_order() == sorted(INTS)