"""BinaryNode for OrderedTreeLib.

A node is a plain data container: one value and two owned child slots.
All search and ordering logic lives in the search core, so the node knows
nothing about how its value compares to anything else.
"""

from typing import Any, Iterator, List, Optional, Tuple


class BinaryNode:
    """A node in a binary tree.

    Each node exclusively owns its ``left`` and ``right`` children. A node is
    never linked from two parents; the tree facade and the search core keep
    that invariant by only ever moving child links, never sharing them.
    """

    __slots__ = ('value', 'left', 'right')

    def __init__(self,
                 value: Any,
                 left: Optional['BinaryNode'] = None,
                 right: Optional['BinaryNode'] = None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['BinaryNode']:
        """Yield the present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def copy(self) -> 'BinaryNode':
        """Create a deep copy of the subtree rooted at this node.

        Values are shared, links are not. Uses an explicit stack so that
        degenerate (list-shaped) subtrees copy without recursion.

        Returns:
            Root of the duplicated subtree
        """
        root = BinaryNode(self.value)
        stack: List[Tuple['BinaryNode', 'BinaryNode']] = [(self, root)]

        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = BinaryNode(source.left.value)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = BinaryNode(source.right.value)
                stack.append((source.right, target.right))

        return root

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"


def release(node: Optional[BinaryNode]) -> int:
    """Detach every link below ``node`` so each node is released once.

    Walks the subtree with an explicit stack instead of leaving a long chain
    of references for the garbage collector to unwind recursively.

    Args:
        node: Root of the subtree to release (may be None)

    Returns:
        Number of nodes released
    """
    if node is None:
        return 0

    released = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
        current.left = None
        current.right = None
        released += 1

    return released
