"""Test fixtures for OrderedTreeLib consumers.

These helpers give tests a stable view of a tree's internal shape without
making node links part of anyone's assertions by hand.
"""

from typing import Any, List, Optional, Tuple

from ..config import TraversalOrder
from ..core.node import BinaryNode
from ..tree import BinarySearchTree


class TreeTestHelper:
    """Public test fixture for shape and invariant verification.

    Example:
        tree = BinarySearchTree.from_values([10, 5, 15])
        helper = TreeTestHelper(tree)

        assert helper.shape() == (10, (5, None, None), (15, None, None))
        assert helper.is_valid_bst()
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree under test.

        Args:
            tree: Tree to inspect (never modified)
        """
        self._tree = tree

    def shape(self) -> Optional[Tuple]:
        """Returns the tree as nested ``(value, left, right)`` tuples.

        Absent children are None, so two trees with equal snapshots have the
        same shape and the same values at the same positions.
        """
        root = self._tree.root
        if root is None:
            return None

        # Build bottom-up so deep trees do not recurse
        built = {}
        for node, _ in self._tree.nodes(TraversalOrder.POST):
            built[id(node)] = (
                node.value,
                built.pop(id(node.left)) if node.left is not None else None,
                built.pop(id(node.right)) if node.right is not None else None,
            )
        return built[id(root)]

    def is_valid_bst(self) -> bool:
        """Check the ordering invariant for every node.

        In-order values must be strictly increasing under the tree's
        ordering, which holds exactly when every left subtree is smaller
        and every right subtree is larger than its parent.
        """
        ordering = self._tree.config.ordering
        previous: Any = None
        first = True
        for value in self._tree.values(TraversalOrder.IN):
            if not first and ordering.compare(previous, value) >= 0:
                return False
            previous = value
            first = False
        return True

    def node_count(self) -> int:
        """Count nodes by walking the graph directly."""
        return sum(1 for _ in self._tree.nodes(TraversalOrder.PRE))

    def depths(self) -> List[Tuple[Any, int]]:
        """Returns ``(value, depth)`` pairs in pre-order."""
        return [(node.value, depth) for node, depth in self._tree.nodes(TraversalOrder.PRE)]

    def find_node(self, value: Any) -> Optional[BinaryNode]:
        """Return the node object holding ``value`` (identity checks in tests)."""
        ordering = self._tree.config.ordering
        for node, _ in self._tree.nodes(TraversalOrder.PRE):
            if ordering.equal(node.value, value):
                return node
        return None
