"""Core building blocks for OrderedTreeLib.

This package holds the node type, the ordering strategies, the search and
mutation primitives, and the traversal engine. None of it knows about the
tree facade.
"""

from .node import BinaryNode, release
from .ordering import Ordering, NaturalOrdering, KeyOrdering, ValueFormat
from .search import (
    find_node,
    find_min,
    find_max,
    insert_value,
    remove_value,
    subtrees_match,
)
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    ReversePreOrderTraverser,
    InOrderTraverser,
    ReverseInOrderTraverser,
    PostOrderTraverser,
    ReversePostOrderTraverser,
    create_traverser,
)

__all__ = [
    "BinaryNode",
    "release",
    "Ordering",
    "NaturalOrdering",
    "KeyOrdering",
    "ValueFormat",
    "find_node",
    "find_min",
    "find_max",
    "insert_value",
    "remove_value",
    "subtrees_match",
    "TreeTraverser",
    "PreOrderTraverser",
    "ReversePreOrderTraverser",
    "InOrderTraverser",
    "ReverseInOrderTraverser",
    "PostOrderTraverser",
    "ReversePostOrderTraverser",
    "create_traverser",
]
