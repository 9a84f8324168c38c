"""Binary tree puzzles: traversal, depth and reconstruction from traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the node values level by level, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    depth = 0
    pending: deque[TreeNode] = deque([root] if root is not None else [])
    while pending:
        depth += 1
        for _ in range(len(pending)):
            node = pending.popleft()
            pending.extend(c for c in (node.left, node.right) if c is not None)
    return depth


def _first_positions(values: Sequence[int]) -> dict[int, int]:
    positions: dict[int, int] = {}
    for index, value in enumerate(values):
        positions.setdefault(value, index)
    return positions


def build_tree(preorder: Sequence[int], inorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals differ in length")
    positions = _first_positions(inorder)
    roots = iter(preorder)

    def build(lo: int, hi: int) -> TreeNode | None:
        if lo >= hi:
            return None
        value = next(roots)
        mid = positions.get(value)
        if mid is None or not lo <= mid < hi:
            raise ValueError(f"traversals do not describe one tree at value {value!r}")
        node = TreeNode(value)
        node.left = build(lo, mid)
        node.right = build(mid + 1, hi)
        return node

    return build(0, len(inorder))


def build_tree_from_postorder(
    inorder: Sequence[int], postorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree from its inorder and postorder traversals."""
    if len(inorder) != len(postorder):
        raise ValueError("traversals differ in length")
    positions = _first_positions(inorder)
    roots = reversed(postorder)

    def build(lo: int, hi: int) -> TreeNode | None:
        if lo >= hi:
            return None
        value = next(roots)
        mid = positions.get(value)
        if mid is None or not lo <= mid < hi:
            raise ValueError(f"traversals do not describe one tree at value {value!r}")
        node = TreeNode(value)
        node.right = build(mid + 1, hi)
        node.left = build(lo, mid)
        return node

    return build(0, len(inorder))