import pytest

from algolab.binary_tree import (
    TreeNode,
    build_from_inorder_postorder,
    build_from_preorder_inorder,
    postorder,
    preorder,
)

IN = [10, 1, 3, 7, 0, 5, 9, 6, 4, 8, 2]
POST = [10, 1, 7, 5, 0, 6, 9, 3, 8, 2, 4]
PRE = [4, 3, 1, 10, 9, 0, 7, 5, 6, 2, 8]


def test_inorder_postorder_gives_expected_preorder():
    root = build_from_inorder_postorder(IN, POST)
    assert list(preorder(root)) == PRE


def test_preorder_inorder_gives_expected_postorder():
    root = build_from_preorder_inorder(PRE, IN)
    assert list(postorder(root)) == POST


def test_both_builds_agree():
    assert build_from_inorder_postorder(IN, POST) == build_from_preorder_inorder(PRE, IN)


def test_root_is_last_of_postorder():
    root = build_from_inorder_postorder(IN, POST)
    assert root.val == POST[-1]
    assert root.val == PRE[0]


def test_traversals_round_trip_on_rebuilt_tree():
    root = build_from_preorder_inorder(PRE, IN)
    assert list(preorder(root)) == PRE
    rebuilt = build_from_inorder_postorder(IN, list(postorder(root)))
    assert rebuilt == root


def test_empty_traversals_give_no_tree():
    assert build_from_inorder_postorder([], []) is None
    assert build_from_preorder_inorder([], []) is None
    assert list(preorder(None)) == []
    assert list(postorder(None)) == []


def test_single_node():
    assert build_from_preorder_inorder([5], [5]) == TreeNode(5)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        build_from_inorder_postorder([1, 2], [1])


def test_inconsistent_values_raise():
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [3, 4])