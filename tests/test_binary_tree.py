import pytest

from practicum.binary_tree import BinaryTree


def test_new_tree_is_empty():
    tree = BinaryTree()
    assert len(tree) == 0
    assert list(tree) == []


def test_find_in_empty_tree():
    assert BinaryTree().find(5) is False


def test_insert_into_empty_tree():
    tree = BinaryTree()
    tree.insert(5)
    assert tree.find(5) is True
    assert len(tree) == 1


def test_insert_into_non_empty_tree():
    tree = BinaryTree()
    tree.insert(5)
    tree.insert(10)
    assert list(tree) == [5, 10]


def test_build_from_values():
    data = [1, 5, 4, -3, 7, -4]
    tree = BinaryTree(data)
    assert list(tree) == sorted(data)
    assert len(tree) == len(data)


def test_delete_from_empty_tree():
    tree = BinaryTree()
    tree.delete(10)
    assert len(tree) == 0


def test_delete_missing_value_keeps_tree():
    tree = BinaryTree()
    tree.insert(5)
    tree.delete(10)
    assert list(tree) == [5]


def test_insert_new_value_changes_size():
    tree = BinaryTree()
    start = len(tree)
    tree.insert(5)
    assert start == len(tree) - 1


def test_insert_existing_value_keeps_size():
    tree = BinaryTree()
    tree.insert(5)
    start = len(tree)
    tree.insert(5)
    assert start == len(tree)


def test_delete_existing_value_changes_size():
    tree = BinaryTree()
    tree.insert(5)
    tree.delete(5)
    assert len(tree) == 0
    assert not tree.find(5)


@pytest.mark.parametrize(
    "data, value",
    [
        ([1, 5, 4, -3, 7, -4], 7),  # no descendants
        ([1, 5, 4, -3, 7, -4], -3),  # left descendant
        ([1, 5, 4, -3, 7, -2], -3),  # right descendant
        ([1, 5, 4, -3, 7, -2], 5),  # two descendants
        ([1, 5, 4, -3, 7, -2], 1),  # root
    ],
)
def test_delete_keeps_remaining_values(data, value):
    tree = BinaryTree(data)
    tree.delete(value)
    assert value not in tree
    assert list(tree) == sorted(set(data) - {value})
    assert len(tree) == len(data) - 1


def test_delete_successor_deep_in_right_subtree():
    data = [10, 5, 20, 15, 25, 12, 13]
    tree = BinaryTree(data)
    tree.delete(10)
    assert list(tree) == sorted(set(data) - {10})
    for value in data:
        assert tree.find(value) == (value != 10)


def test_delete_everything():
    data = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    tree = BinaryTree(data)
    for value in data:
        tree.delete(value)
    assert len(tree) == 0
    assert list(tree) == []


def test_contains():
    tree = BinaryTree([3, 1, 2])
    assert 2 in tree
    assert 4 not in tree