import pytest

from dsakit.trees import TreeNode, inorder, preorder


@pytest.fixture
def numbered_tree():
    return TreeNode(
        1,
        left=TreeNode(2, TreeNode(4), TreeNode(5)),
        right=TreeNode(3, right=TreeNode(6)),
    )


@pytest.fixture
def small_tree():
    return TreeNode(4, left=TreeNode(1, TreeNode(5), TreeNode(2)), right=TreeNode(6))


def _insert(root, value):
    if root is None:
        return TreeNode(value)
    if value < root.value:
        root.left = _insert(root.left, value)
    else:
        root.right = _insert(root.right, value)
    return root


def test_inorder_numbered_tree(numbered_tree):
    assert list(inorder(numbered_tree)) == [4, 2, 5, 1, 3, 6]


def test_preorder_small_tree(small_tree):
    assert list(preorder(small_tree)) == [4, 1, 5, 2, 6]


def test_empty_tree():
    assert list(inorder(None)) == []
    assert list(preorder(None)) == []


def test_single_node():
    node = TreeNode(9)
    assert list(inorder(node)) == list(preorder(node)) == [9]


def test_traversals_visit_same_values(numbered_tree):
    assert sorted(inorder(numbered_tree)) == sorted(preorder(numbered_tree))


def test_preorder_starts_at_root(numbered_tree):
    assert next(preorder(numbered_tree)) == numbered_tree.value


@pytest.mark.parametrize("values", [[5, 3, 8, 1, 4, 9], [10, 20, 30], [7, 7, 2]])
def test_inorder_of_search_tree_is_sorted(values):
    root = None
    for value in values:
        root = _insert(root, value)
    assert list(inorder(root)) == sorted(values)


def test_node_defaults():
    node = TreeNode(3)
    assert node.left is None and node.right is None
    assert node.value == 3