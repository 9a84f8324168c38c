import pytest

from drillbook.trees import (
    TreeNode,
    build_tree,
    build_tree_from_postorder,
    level_order,
    max_depth,
)


def _preorder(node):
    if node is None:
        return []
    return [node.val, *_preorder(node.left), *_preorder(node.right)]


def _inorder(node):
    if node is None:
        return []
    return [*_inorder(node.left), node.val, *_inorder(node.right)]


def _postorder(node):
    if node is None:
        return []
    return [*_postorder(node.left), *_postorder(node.right), node.val]


def _sample_tree():
    return TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))


def _lopsided_tree():
    return TreeNode(1, TreeNode(2, TreeNode(4, None, TreeNode(8))), TreeNode(3))


def test_level_order_sample():
    assert level_order(_sample_tree()) == [[3], [9, 20], [15, 7]]


def test_level_order_empty():
    assert level_order(None) == []


def test_level_order_flattens_to_all_nodes():
    tree = _lopsided_tree()
    flat = [v for level in level_order(tree) for v in level]
    assert sorted(flat) == sorted(_preorder(tree))
    assert flat[0] == tree.val


def test_max_depth_basic():
    assert max_depth(None) == 0
    assert max_depth(TreeNode(5)) == 1


@pytest.mark.parametrize("factory", [_sample_tree, _lopsided_tree])
def test_max_depth_matches_number_of_levels(factory):
    tree = factory()
    assert max_depth(tree) == len(level_order(tree))


def test_build_tree_source_example():
    root = build_tree([1, 2, 4, 7, 3, 5, 6, 8], [4, 7, 2, 1, 5, 3, 8, 6])
    assert (root.val, root.left.val, root.right.val) == (1, 2, 3)


@pytest.mark.parametrize("factory", [_sample_tree, _lopsided_tree])
def test_build_tree_round_trip(factory):
    tree = factory()
    rebuilt = build_tree(_preorder(tree), _inorder(tree))
    assert rebuilt == tree


def test_build_tree_empty():
    assert build_tree([], []) is None


def test_build_tree_rejects_mismatched_traversals():
    with pytest.raises(ValueError):
        build_tree([1, 2], [1])
    with pytest.raises(ValueError):
        build_tree([1, 2], [3, 1])


def test_build_tree_from_postorder_source_example():
    root = build_tree_from_postorder([9, 3, 15, 20, 7], [9, 15, 7, 20, 3])
    assert (root.val, root.left.val, root.right.val) == (3, 9, 20)


@pytest.mark.parametrize("factory", [_sample_tree, _lopsided_tree])
def test_build_tree_from_postorder_round_trip(factory):
    tree = factory()
    rebuilt = build_tree_from_postorder(_inorder(tree), _postorder(tree))
    assert rebuilt == tree


def test_both_builders_agree():
    tree = _lopsided_tree()
    assert build_tree(_preorder(tree), _inorder(tree)) == build_tree_from_postorder(
        _inorder(tree), _postorder(tree)
    )


def test_build_tree_from_postorder_empty_and_errors():
    assert build_tree_from_postorder([], []) is None
    with pytest.raises(ValueError):
        build_tree_from_postorder([1, 2], [2])
    with pytest.raises(ValueError):
        build_tree_from_postorder([1, 2], [2, 5])