"""Binary trees and the puzzles played on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """Node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


_END = object()


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    queue = deque([root])
    rest = iter(items[1:])
    while queue:
        node = queue.popleft()
        left = next(rest, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(rest, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order values of a tree, ``None`` marking a missing child."""
    values: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.extend((node.left, node.right))
    while values and values[-1] is None:
        values.pop()
    return values


def _postorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [(root, False)] if root is not None else []
    while stack:
        node, children_done = stack.pop()
        if children_done:
            yield node
            continue
        stack.append((node, True))
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, False))


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree."""
    level = 0
    queue = deque([root] if root is not None else [])
    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            queue.extend(child for child in (node.left, node.right) if child is not None)
        level += 1
    return level


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    heights: dict[Optional[TreeNode], int] = {None: 0}
    for node in _postorder(root):
        left, right = heights[node.left], heights[node.right]
        if abs(left - right) > 1:
            return False
        heights[node] = 1 + max(left, right)
    return True


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    heights: dict[Optional[TreeNode], int] = {None: 0}
    best = 0
    for node in _postorder(root):
        left, right = heights[node.left], heights[node.right]
        best = max(best, left + right)
        heights[node] = 1 + max(left, right)
    return best