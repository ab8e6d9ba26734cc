"""Rebuilding binary trees from pairs of traversal orders."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """Binary tree node."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _locate(inorder: Sequence, value: Any, lo: int, hi: int) -> int:
    for index in range(lo, hi):
        if inorder[index] == value:
            return index
    raise ValueError(f"value {value!r} is missing from the inorder traversal")


def _check_lengths(first: Sequence, second: Sequence) -> None:
    if len(first) != len(second):
        raise ValueError("traversals must have the same length")


def build_from_inorder_postorder(inorder: Sequence, postorder: Sequence) -> Optional[TreeNode]:
    """Rebuild the tree whose inorder and postorder traversals are given."""
    _check_lengths(inorder, postorder)

    def build(i_lo: int, i_hi: int, p_lo: int, p_hi: int) -> Optional[TreeNode]:
        if i_lo == i_hi or p_lo == p_hi:
            return None
        value = postorder[p_hi - 1]
        pos = _locate(inorder, value, i_lo, i_hi)
        left_size = pos - i_lo
        return TreeNode(
            value,
            build(i_lo, pos, p_lo, p_lo + left_size),
            build(pos + 1, i_hi, p_lo + left_size, p_hi - 1),
        )

    return build(0, len(inorder), 0, len(postorder))


def build_from_preorder_inorder(preorder: Sequence, inorder: Sequence) -> Optional[TreeNode]:
    """Rebuild the tree whose preorder and inorder traversals are given."""
    _check_lengths(preorder, inorder)

    def build(p_lo: int, p_hi: int, i_lo: int, i_hi: int) -> Optional[TreeNode]:
        if p_lo == p_hi or i_lo == i_hi:
            return None
        value = preorder[p_lo]
        pos = _locate(inorder, value, i_lo, i_hi)
        left_size = pos - i_lo
        return TreeNode(
            value,
            build(p_lo + 1, p_lo + 1 + left_size, i_lo, pos),
            build(p_lo + 1 + left_size, p_hi, pos + 1, i_hi),
        )

    return build(0, len(preorder), 0, len(inorder))


def preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values root first, then the left and right subtrees."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.val
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values of the left and right subtrees, then the root."""
    reversed_order = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        reversed_order.append(current.val)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    yield from reversed(reversed_order)