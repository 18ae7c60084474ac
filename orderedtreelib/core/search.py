"""Search and mutation primitives over a BinaryNode graph.

These functions operate on bare node graphs and return the (possibly new)
root, so the tree facade stays a thin owner. All of them descend with a loop
rather than recursion; their cost is O(depth).
"""

from typing import Any, Optional

from .node import BinaryNode
from .ordering import Ordering
from ..exceptions import DuplicateValueError, NodeNotFound, TreeException


def new_node(value: Any) -> BinaryNode:
    """Allocate a node, reporting memory exhaustion as a TreeException."""
    try:
        return BinaryNode(value)
    except MemoryError as exc:
        raise TreeException("Memory allocation failed for new node") from exc


def find_node(root: Optional[BinaryNode],
              value: Any,
              ordering: Ordering) -> Optional[BinaryNode]:
    """Locate the node holding ``value``.

    Args:
        root: Subtree to search
        value: Value to look for
        ordering: Order the tree was built with

    Returns:
        The matching node, or None when the search path runs out
    """
    node = root
    while node is not None:
        cmp = ordering.compare(value, node.value)
        if cmp == 0:
            return node
        node = node.left if cmp < 0 else node.right
    return None


def find_min(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
    """Return the leftmost node of a subtree (its smallest value)."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def find_max(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
    """Return the rightmost node of a subtree (its largest value)."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def insert_value(root: Optional[BinaryNode],
                 value: Any,
                 ordering: Ordering) -> BinaryNode:
    """Insert ``value`` below ``root`` at the slot the order dictates.

    Args:
        root: Current root (None for an empty tree)
        value: Value to insert
        ordering: Order the tree was built with

    Returns:
        The root after insertion (the new node when the tree was empty)

    Raises:
        DuplicateValueError: If an equal value is already present; the tree
            is left unchanged
    """
    if root is None:
        return new_node(value)

    current = root
    while True:
        cmp = ordering.compare(value, current.value)
        if cmp == 0:
            raise DuplicateValueError(value)
        if cmp < 0:
            if current.left is None:
                current.left = new_node(value)
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = new_node(value)
                return root
            current = current.right


def remove_value(root: Optional[BinaryNode],
                 value: Any,
                 ordering: Ordering) -> Optional[BinaryNode]:
    """Remove ``value`` from the subtree and return the new root.

    A node with one child is replaced by that child. A node with two
    children takes the value of its in-order successor (the minimum of the
    right subtree), and the successor node is spliced out instead.

    Raises:
        NodeNotFound: If the value is absent; the tree is left unchanged
    """
    parent = None
    node = root
    while node is not None:
        cmp = ordering.compare(value, node.value)
        if cmp == 0:
            break
        parent = node
        node = node.left if cmp < 0 else node.right

    if node is None:
        raise NodeNotFound(f"cannot remove {value!r}, value is not in the tree")

    if node.left is not None and node.right is not None:
        successor = find_min(node.right)
        # The successor has no left child, so this removal takes the
        # single-child branch and does not recurse further
        node.right = remove_value(node.right, successor.value, ordering)
        node.value = successor.value
        return root

    replacement = node.left if node.left is not None else node.right
    node.left = None
    node.right = None

    if parent is None:
        return replacement
    if parent.left is node:
        parent.left = replacement
    else:
        parent.right = replacement
    return root


def subtrees_match(ours: Optional[BinaryNode],
                   pattern: Optional[BinaryNode],
                   ordering: Ordering) -> bool:
    """Compare two subtrees position for position.

    Both shape and values must agree: absent matches absent, absent never
    matches present.
    """
    stack = [(ours, pattern)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None:
            return False
        if not ordering.equal(a.value, b.value):
            return False
        stack.append((a.right, b.right))
        stack.append((a.left, b.left))
    return True
