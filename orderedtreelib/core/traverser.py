"""Tree traversal strategies for OrderedTreeLib.

Traversers implement the six depth-first orders over a binary node graph.
Every order is an arrangement of the same three parts (the node itself, its
left subtree, its right subtree), so a single stack-driven engine serves all
of them; each traverser only declares its arrangement.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Tuple

from .node import BinaryNode

NODE = "node"
LEFT = "left"
RIGHT = "right"


class TreeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies.

    Traversal is lazy and uses an explicit stack, so a degenerate tree is
    walked without touching the interpreter recursion limit. Traversers never
    modify the nodes they visit.
    """

    def __init__(self, include_empty: bool = False):
        """Initialize traverser.

        Args:
            include_empty: Also yield ``(None, depth)`` for every absent
                child, in the position the child would occupy. The codec
                relies on this to record shape.
        """
        self.include_empty = include_empty

    @property
    @abstractmethod
    def sequence(self) -> Tuple[str, str, str]:
        """Visiting arrangement of NODE, LEFT and RIGHT."""
        pass

    def traverse(self,
                 root: Optional[BinaryNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Optional[BinaryNode], int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None for an empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        if root is None:
            if self.include_empty and self._should_yield(0, min_depth, max_depth):
                yield (None, 0)
            return

        # Entries are (node, depth, expanded); an expanded entry is the
        # node's own visit, an unexpanded one still has to be laid out.
        stack: List[Tuple[Optional[BinaryNode], int, bool]] = [(root, 0, False)]
        parts = tuple(reversed(self.sequence))

        while stack:
            node, depth, expanded = stack.pop()

            if node is None or expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            explore = self._should_explore(depth, max_depth)
            for part in parts:
                if part == NODE:
                    stack.append((node, depth, True))
                elif explore:
                    child = node.left if part == LEFT else node.right
                    if child is not None or self.include_empty:
                        stack.append((child, depth + 1, False))

    def values(self, root: Optional[BinaryNode]) -> Iterator[Any]:
        """Yield just the values of present nodes, in this order."""
        for node, _ in self.traverse(root):
            if node is not None:
                yield node.value

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class PreOrderTraverser(TreeTraverser):
    """Node, then left subtree, then right subtree.

    Good for copying trees: re-inserting values in this order rebuilds the
    same shape.
    """
    sequence = (NODE, LEFT, RIGHT)


class ReversePreOrderTraverser(TreeTraverser):
    """Node, then right subtree, then left subtree (mirrored pre-order)."""
    sequence = (NODE, RIGHT, LEFT)


class InOrderTraverser(TreeTraverser):
    """Left subtree, node, right subtree.

    On a binary search tree this yields values in ascending order.
    """
    sequence = (LEFT, NODE, RIGHT)


class ReverseInOrderTraverser(TreeTraverser):
    """Right subtree, node, left subtree: descending order on a BST."""
    sequence = (RIGHT, NODE, LEFT)


class PostOrderTraverser(TreeTraverser):
    """Left subtree, right subtree, then node.

    Children are finished before their parent, which suits deletion and
    bottom-up aggregation.
    """
    sequence = (LEFT, RIGHT, NODE)


class ReversePostOrderTraverser(TreeTraverser):
    """Right subtree, left subtree, then node (mirrored post-order)."""
    sequence = (RIGHT, LEFT, NODE)


# Factory function for creating traversers by name
def create_traverser(order: Any, include_empty: bool = False) -> TreeTraverser:
    """Create a traverser instance by order name.

    Args:
        order: A TraversalOrder member or its name (pre, reverse_pre, in,
            reverse_in, post, reverse_post, plus *_order aliases)
        include_empty: Yield placeholders for absent children

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If order name is not recognized
    """
    strategies = {
        'pre': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'reverse_pre': ReversePreOrderTraverser,
        'reverse_pre_order': ReversePreOrderTraverser,
        'in': InOrderTraverser,
        'in_order': InOrderTraverser,
        'reverse_in': ReverseInOrderTraverser,
        'reverse_in_order': ReverseInOrderTraverser,
        'post': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'reverse_post': ReversePostOrderTraverser,
        'reverse_post_order': ReversePostOrderTraverser,
    }

    name = getattr(order, 'value', order)
    if not isinstance(name, str) or name.lower() not in strategies:
        raise ValueError(
            f"Unknown traversal order: {order!r}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[name.lower()](include_empty=include_empty)
