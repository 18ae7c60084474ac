"""OrderedTreeLib - Generic Ordered Binary Search Tree.

OrderedTreeLib provides a binary search tree container for any totally
ordered value type: insertion, removal, membership, six traversal orders,
functional map/where/merge, subtree extraction and containment, path
addressing, and a shape-complete text encoding.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import BinarySearchTree

    tree = BinarySearchTree.from_values([10, 5, 15, 3, 7])
    list(tree)              # [3, 5, 7, 10, 15]
    tree.serialize("pre")   # '10 5 3 null null 7 null null 15 null null '
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .exceptions import (
    TreeException,
    InvalidTreeOperation,
    DuplicateValueError,
    NodeNotFound,
    SerializationError,
    TraversalError,
)
from .config import (
    TraversalOrder,
    Direction,
    CodecConfig,
    PathConfig,
    TreeConfig,
)
from .core import (
    BinaryNode,
    Ordering,
    NaturalOrdering,
    KeyOrdering,
    ValueFormat,
    TreeTraverser,
    create_traverser,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .tree import BinarySearchTree
from .api import (
    build_tree,
    traverse_tree,
    collect_values,
    count_nodes,
    get_leaf_values,
    get_tree_height,
    get_tree_stats,
    serialize_tree,
    deserialize_tree,
)

__all__ = [
    "__version__",
    # Errors
    "TreeException",
    "InvalidTreeOperation",
    "DuplicateValueError",
    "NodeNotFound",
    "SerializationError",
    "TraversalError",
    # Config
    "TraversalOrder",
    "Direction",
    "CodecConfig",
    "PathConfig",
    "TreeConfig",
    # Core
    "BinaryNode",
    "Ordering",
    "NaturalOrdering",
    "KeyOrdering",
    "ValueFormat",
    "TreeTraverser",
    "create_traverser",
    # Policies
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
    # Tree
    "BinarySearchTree",
    # API
    "build_tree",
    "traverse_tree",
    "collect_values",
    "count_nodes",
    "get_leaf_values",
    "get_tree_height",
    "get_tree_stats",
    "serialize_tree",
    "deserialize_tree",
]
