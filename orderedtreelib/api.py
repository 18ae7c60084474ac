"""High-level API for OrderedTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the BinarySearchTree class for ease of use
in scripts and one-liners.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .config import TraversalOrder, TreeConfig
from .tree import BinarySearchTree


def build_tree(values: Iterable[Any], config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Build a tree by inserting ``values`` in order.

    Args:
        values: Values to insert (must be unique under the ordering)
        config: Optional tree configuration

    Returns:
        The populated tree

    Example:
        >>> tree = build_tree([10, 5, 15])
        >>> collect_values(tree)
        [5, 10, 15]
    """
    return BinarySearchTree.from_values(values, config=config)


def traverse_tree(tree: BinarySearchTree,
                  order: Union[TraversalOrder, str] = TraversalOrder.IN) -> Iterator[Any]:
    """Lazily iterate over a tree's values in the given order.

    Args:
        tree: Tree to traverse
        order: Traversal order (pre, reverse_pre, in, reverse_in, post,
            reverse_post)

    Yields:
        Values in traversal order
    """
    return tree.values(order)


def collect_values(tree: BinarySearchTree,
                   order: Union[TraversalOrder, str] = TraversalOrder.IN) -> List[Any]:
    """Return a tree's values as a list, in the given order."""
    return list(tree.values(order))


def count_nodes(tree: BinarySearchTree) -> int:
    """Count nodes in a tree."""
    return tree.size()


def get_leaf_values(tree: BinarySearchTree) -> List[Any]:
    """Return the values of all leaf nodes, in ascending order."""
    return [node.value for node, _ in tree.nodes(TraversalOrder.IN) if node.is_leaf()]


def get_tree_height(tree: BinarySearchTree) -> int:
    """Return the height of a tree (-1 if empty, 0 for a single node)."""
    return tree.height()


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to analyze

    Returns:
        Dictionary with statistics:
        - total_nodes: Total number of nodes
        - leaf_nodes: Number of leaf nodes
        - internal_nodes: Number of nodes with at least one child
        - height: Height of the tree (-1 if empty)
        - min_value: Smallest value (None if empty)
        - max_value: Largest value (None if empty)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'internal_nodes': 0,
        'height': -1,
        'min_value': None,
        'max_value': None,
    }

    for node, depth in tree.nodes(TraversalOrder.PRE):
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        else:
            stats['internal_nodes'] += 1
        stats['height'] = max(stats['height'], depth)

    if not tree.is_empty():
        stats['min_value'] = tree.min_value()
        stats['max_value'] = tree.max_value()

    return stats


def serialize_tree(tree: BinarySearchTree,
                   order: Union[TraversalOrder, str] = TraversalOrder.PRE) -> str:
    """Encode a tree as a token stream."""
    return tree.serialize(order)


def deserialize_tree(data: Union[str, Iterable[str]],
                     order: Union[TraversalOrder, str] = TraversalOrder.PRE,
                     config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Decode a token stream into a new tree.

    Args:
        data: Encoded text or token sequence
        order: Order the stream was written in
        config: Tree configuration; its value format parses the tokens

    Returns:
        The decoded tree

    Example:
        >>> tree = deserialize_tree("10 5 null null 15 null null ")
        >>> collect_values(tree, "pre")
        [10, 5, 15]
    """
    tree = BinarySearchTree(config=config)
    tree.deserialize(data, order)
    return tree
