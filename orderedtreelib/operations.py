"""Structural operations for OrderedTreeLib.

These build new trees out of existing ones (map, where, merge, subtree
extraction) or compare shapes (subtree containment). They are written
against the tree facade and the search core; the receiving tree is never
modified.
"""

from typing import TYPE_CHECKING, Any, Callable, Optional

from .config import TraversalOrder
from .core.search import find_node, subtrees_match
from .error_policies import ContinueOnErrorsPolicy, ErrorPolicy
from .exceptions import DuplicateValueError, InvalidTreeOperation, NodeNotFound, TreeException

if TYPE_CHECKING:
    from .tree import BinarySearchTree


def map_tree(tree: 'BinarySearchTree', mapper: Callable[[Any], Any]) -> 'BinarySearchTree':
    """Build a tree holding ``mapper(value)`` for every value.

    Values are visited in pre-order so that an order-preserving mapper
    reproduces the original shape. The result's shape otherwise depends only
    on how the mapped values sort.

    Raises:
        InvalidTreeOperation: If mapper is missing or not callable
        DuplicateValueError: If two values map to equal results
        TreeException: If the mapper itself raises
    """
    if mapper is None or not callable(mapper):
        raise InvalidTreeOperation("mapper function cannot be null")

    result = tree.empty_like()
    for value in tree.values(TraversalOrder.PRE):
        try:
            mapped = mapper(value)
        except Exception as exc:
            raise TreeException(f"Mapper function execution failed for {value!r}: {exc}") from exc
        result.insert(mapped)
    return result


def filter_tree(tree: 'BinarySearchTree', predicate: Callable[[Any], bool]) -> 'BinarySearchTree':
    """Build a tree holding the values for which ``predicate`` holds.

    Matching values are inserted in ascending order.

    Raises:
        InvalidTreeOperation: If predicate is missing or not callable
        TreeException: If the predicate itself raises
    """
    if predicate is None or not callable(predicate):
        raise InvalidTreeOperation("predicate function cannot be null")

    result = tree.empty_like()
    for value in tree.values(TraversalOrder.IN):
        try:
            keep = predicate(value)
        except Exception as exc:
            raise TreeException(f"Predicate function execution failed for {value!r}: {exc}") from exc
        if keep:
            result.insert(value)
    return result


def merge_trees(tree: 'BinarySearchTree',
                other: 'BinarySearchTree',
                policy: Optional[ErrorPolicy] = None) -> 'BinarySearchTree':
    """Build a copy of ``tree`` with every value of ``other`` added.

    Values of ``other`` are inserted in ascending order. A value already
    present is handed to ``policy``, which either skips it (the default
    ContinueOnErrorsPolicy warns and continues) or raises. Any other
    failure aborts the merge.

    Args:
        tree: Receiving tree (copied, never modified)
        other: Tree whose values are added
        policy: Duplicate handling policy

    Returns:
        The merged tree
    """
    policy = policy or ContinueOnErrorsPolicy()

    result = tree.copy()
    for value in other.values(TraversalOrder.IN):
        try:
            result.insert(value)
        except DuplicateValueError as exc:
            policy.handle(exc, 'merge', value)
    return result


def extract_subtree(tree: 'BinarySearchTree', value: Any) -> 'BinarySearchTree':
    """Return a deep copy of the subtree rooted at ``value``.

    Raises:
        NodeNotFound: If the value is not in the tree
    """
    node = find_node(tree.root, value, tree.config.ordering)
    if node is None:
        raise NodeNotFound(f"value {value!r} not found in tree, cannot extract subtree")

    try:
        copied = node.copy()
    except MemoryError as exc:
        raise TreeException("Memory allocation failed during subtree extraction") from exc
    return tree.empty_like(root=copied)


def contains_subtree(tree: 'BinarySearchTree', candidate: 'BinarySearchTree') -> bool:
    """Check whether ``candidate`` occurs in ``tree`` with the same shape.

    The anchor is the node whose value equals the candidate's root value;
    from there both trees must agree node for node, including which
    children are absent.

    Raises:
        InvalidTreeOperation: If candidate is empty
    """
    if candidate.is_empty():
        raise InvalidTreeOperation("cannot search for an empty subtree")

    ordering = tree.config.ordering
    anchor = find_node(tree.root, candidate.root.value, ordering)
    if anchor is None:
        return False
    return subtrees_match(anchor, candidate.root, ordering)
