import pytest
from hypothesis import given
from hypothesis import strategies as st

from rankboard.rbcore import Color, RBNode, RedBlackTreeBase


def _build(values):
    tree = RedBlackTreeBase()
    for value in values:
        tree.insert_data(value)
    return tree


def _parents_consistent(node):
    if node is None:
        return True
    for child in (node.left, node.right):
        if child is not None and child.parent is not node:
            return False
    return _parents_consistent(node.left) and _parents_consistent(node.right)


def test_empty_tree():
    tree = RedBlackTreeBase()
    assert tree.root is None
    assert len(tree) == 0
    assert tree.to_list() == []
    assert tree.validate() is True


def test_first_node_becomes_black_root():
    tree = RedBlackTreeBase()
    node = tree.insert_data(7)
    assert tree.root is node
    assert node.color is Color.BLACK
    assert node.parent is None


def test_ascending_inserts_rebalance():
    tree = _build([1, 2, 3])
    root = tree.root
    assert root.data == 2
    assert root.color is Color.BLACK
    assert root.left.data == 1 and root.left.color is Color.RED
    assert root.right.data == 3 and root.right.color is Color.RED
    assert tree.validate()


def test_left_right_case_rebalance():
    tree = _build([3, 1, 2])
    assert tree.root.data == 2
    assert tree.to_list() == [1, 2, 3]
    assert tree.validate()


def test_insert_none_is_ignored():
    tree = _build([4])
    tree.insert(None)
    assert tree.to_list() == [4]


def test_insert_resets_node_links():
    tree = _build([10, 5])
    stale = RBNode(20, Color.BLACK)
    stale.left = RBNode(99)
    tree.insert(stale)
    assert stale.left is None
    assert tree.to_list() == [5, 10, 20]
    assert tree.validate()


def test_duplicates_kept():
    tree = _build([5, 5, 5, 5])
    assert tree.to_list() == [5, 5, 5, 5]
    assert len(tree) == 4
    assert tree.validate()


def test_contains_and_get_node():
    tree = _build([8, 3, 11, 1, 6])
    assert 6 in tree
    assert 7 not in tree
    assert "6" not in tree
    assert tree.get_node(11).data == 11
    assert tree.get_node(42) is None


def test_rotate_left_preserves_order():
    tree = _build([1, 2, 3])
    old_root = tree.root
    tree.rotate_left(old_root)
    assert tree.root.data == 3
    assert tree.root.parent is None
    assert tree.to_list() == [1, 2, 3]
    assert _parents_consistent(tree.root)


def test_rotate_right_preserves_order():
    tree = _build([1, 2, 3])
    tree.rotate_right(tree.root)
    assert tree.root.data == 1
    assert tree.to_list() == [1, 2, 3]
    assert _parents_consistent(tree.root)


def test_rotate_without_child_is_noop():
    tree = _build([1, 2, 3])
    leaf = tree.get_node(1)
    tree.rotate_left(leaf)
    tree.rotate_right(leaf)
    tree.rotate_left(None)
    assert tree.root.data == 2
    assert tree.to_list() == [1, 2, 3]


def test_validate_detects_red_root():
    tree = _build([1, 2, 3])
    tree.root.color = Color.RED
    assert tree.validate() is False


def test_validate_detects_red_red():
    tree = _build([1, 2, 3])
    red = tree.root.left
    red.left = RBNode(0, Color.RED, parent=red)
    assert tree.validate() is False


def test_validate_detects_black_height_mismatch():
    tree = _build([1, 2, 3])
    red = tree.root.left
    red.left = RBNode(0, Color.BLACK, parent=red)
    assert tree.validate() is False


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_random_inserts_stay_valid(values):
    tree = _build(values)
    assert tree.validate()
    assert tree.to_list() == sorted(values)
    assert len(tree) == len(values)
    assert _parents_consistent(tree.root)
    if tree.root is not None:
        assert tree.root.parent is None


@pytest.mark.parametrize("count", [16, 100, 500])
def test_sequential_inserts_stay_valid(count):
    tree = _build(range(count))
    assert tree.validate()
    assert tree.to_list() == list(range(count))
    assert all(value in tree for value in range(count))