"""Binary tree nodes, traversals and lowest common ancestor."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def pre_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values root first, then left subtree, then right subtree."""
    if root is not None:
        yield root.data
        yield from pre_order(root.left)
        yield from pre_order(root.right)


def in_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then root, then right subtree."""
    if root is not None:
        yield from in_order(root.left)
        yield root.data
        yield from in_order(root.right)


def post_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of both subtrees before the root."""
    if root is not None:
        yield from post_order(root.left)
        yield from post_order(root.right)
        yield root.data


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values breadth first, left to right within each level."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.data
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node having both ``p`` and ``q`` as descendants.

    A node counts as its own descendant. If only one of the two nodes is in
    the tree, that node is returned; if neither is, None.
    """
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def _demo_tree() -> TreeNode:
    n4 = TreeNode(40, right=TreeNode(80))
    n2 = TreeNode(20, n4, TreeNode(50))
    n7 = TreeNode(70, left=TreeNode(90))
    n3 = TreeNode(30, TreeNode(60), n7)
    return TreeNode(10, n2, n3)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the four traversals of the demonstration tree."""
    parser = argparse.ArgumentParser(description="Traverse a sample binary tree.")
    parser.parse_args(argv)
    root = _demo_tree()
    for traversal in (pre_order, in_order, post_order, level_order):
        print("".join(f"{value} " for value in traversal(root)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())