"""Binary tree utilities."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; after list conversion left/right act as prev/next."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def min_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    queue = deque([(root, 1)])
    while queue:
        node, depth = queue.popleft()
        if node.left is None and node.right is None:
            return depth
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, depth + 1))
    return 0


def to_doubly_linked_list(root: TreeNode | None) -> TreeNode | None:
    """Rewire the tree in place into an in-order doubly linked list.

    Returns the head; ``left`` points to the previous node and ``right`` to
    the next.
    """
    head: TreeNode | None = None
    previous: TreeNode | None = None
    stack: list[TreeNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        following = node.right
        if previous is None:
            head = node
        else:
            previous.right = node
        node.left = previous
        previous = node
        current = following
    return head


def iter_list(head: TreeNode | None) -> Iterator[Any]:
    """Yield the data of each node from *head* along the ``right`` links."""
    node = head
    while node is not None:
        yield node.data
        node = node.right