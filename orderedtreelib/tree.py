"""BinarySearchTree facade for OrderedTreeLib.

The tree owns the root node and exposes the public contract. The work is
delegated: searching and mutation to ``core.search``, visiting to
``core.traverser``, shape-building operations to ``operations``, path lookup
to ``paths`` and text encoding to ``codec``.
"""

import copy as _copy
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

from .codec import deserialize_nodes, serialize_nodes
from .config import TraversalOrder, TreeConfig
from .core.node import BinaryNode, release
from .core.search import (
    find_max,
    find_min,
    find_node,
    insert_value,
    remove_value,
    subtrees_match,
)
from .core.traverser import create_traverser
from .error_policies import ErrorPolicy
from .exceptions import InvalidTreeOperation, NodeNotFound, TraversalError, TreeException
from . import operations
from .paths import resolve_path

OrderLike = Union[TraversalOrder, str]

_NO_VALUE = object()


class BinarySearchTree:
    """An ordered binary search tree of unique values.

    For every node, values in its left subtree compare strictly less and
    values in its right subtree strictly greater, under the configured
    ordering. Duplicates are rejected. The tree is not self-balancing.

    Example:
        >>> tree = BinarySearchTree.from_values([10, 5, 15, 3, 7])
        >>> list(tree)
        [3, 5, 7, 10, 15]
        >>> tree.serialize()
        '10 5 3 null null 7 null null 15 null null '
    """

    def __init__(self, root_value: Any = _NO_VALUE, config: Optional[TreeConfig] = None):
        """Create an empty tree, or a tree holding a single root value.

        Args:
            root_value: Optional value for the root node
            config: Ordering, codec and path settings (defaults apply)

        Raises:
            InvalidTreeOperation: If the configuration is invalid
        """
        config = config if config is not None else TreeConfig()
        config_errors = config.validate()
        if config_errors:
            raise InvalidTreeOperation(
                f"invalid configuration: {'; '.join(config_errors)}"
            )

        self._config = config
        self._root: Optional[BinaryNode] = None
        if root_value is not _NO_VALUE:
            self._root = insert_value(None, root_value, config.ordering)

    @classmethod
    def from_values(cls, values: Iterable[Any], config: Optional[TreeConfig] = None) -> 'BinarySearchTree':
        """Build a tree by inserting values in iteration order."""
        tree = cls(config=config)
        for value in values:
            tree.insert(value)
        return tree

    @classmethod
    def from_tree(cls, other: 'BinarySearchTree') -> 'BinarySearchTree':
        """Copy-construct a tree from another one."""
        return other.copy()

    # Properties

    @property
    def root(self) -> Optional[BinaryNode]:
        """Root node, or None if the tree is empty. Read-only."""
        return self._root

    @property
    def config(self) -> TreeConfig:
        return self._config

    def empty_like(self, root: Optional[BinaryNode] = None) -> 'BinarySearchTree':
        """Create a tree sharing this tree's configuration.

        Args:
            root: Node graph the new tree takes ownership of
        """
        result = self.__class__.__new__(self.__class__)
        result._config = self._config
        result._root = root
        return result

    # Lifecycle

    def copy(self) -> 'BinarySearchTree':
        """Deep-copy the node graph into a new tree (values are shared)."""
        if self._root is None:
            return self.empty_like()
        try:
            copied = self._root.copy()
        except MemoryError as exc:
            raise TreeException("Memory allocation failed in tree copy") from exc
        return self.empty_like(root=copied)

    def __copy__(self) -> 'BinarySearchTree':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'BinarySearchTree':
        result = self.copy()
        for node, _ in create_traverser(TraversalOrder.PRE).traverse(result._root):
            node.value = _copy.deepcopy(node.value, memo)
        return result

    def take(self) -> 'BinarySearchTree':
        """Move the node graph into a new tree, leaving this one empty.

        Constant time; never raises.
        """
        result = self.empty_like(root=self._root)
        self._root = None
        return result

    def assign(self, other: 'BinarySearchTree') -> 'BinarySearchTree':
        """Replace this tree's contents with a deep copy of ``other``.

        The current nodes are released first. If copying fails the tree is
        left empty. Assigning a tree to itself does nothing.
        """
        if other is self:
            return self
        self.clear()
        self._config = other._config
        if other._root is not None:
            try:
                self._root = other._root.copy()
            except MemoryError as exc:
                self._root = None
                raise TreeException("Memory allocation failed in assignment") from exc
        return self

    def move_from(self, other: 'BinarySearchTree') -> 'BinarySearchTree':
        """Replace this tree's contents with ``other``'s graph, emptying ``other``."""
        if other is self:
            return self
        self.clear()
        self._config = other._config
        self._root, other._root = other._root, None
        return self

    def clear(self) -> None:
        """Release every node and leave the tree empty. Idempotent."""
        root, self._root = self._root, None
        release(root)

    # Search and mutation

    def insert(self, value: Any) -> None:
        """Insert a value.

        Raises:
            DuplicateValueError: If an equal value is already present
        """
        self._root = insert_value(self._root, value, self._config.ordering)

    def contains(self, value: Any) -> bool:
        """Check whether a value is present. Never raises for absent values."""
        return find_node(self._root, value, self._config.ordering) is not None

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def remove(self, value: Any) -> None:
        """Remove a value.

        Raises:
            NodeNotFound: If the value is not present
        """
        self._root = remove_value(self._root, value, self._config.ordering)

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        """Count the nodes (O(n))."""
        return sum(1 for _ in self.values(TraversalOrder.IN))

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self._root is not None

    def min_value(self) -> Any:
        """Smallest value in the tree.

        Raises:
            NodeNotFound: If the tree is empty
        """
        node = find_min(self._root)
        if node is None:
            raise NodeNotFound("tree is empty, no minimum value")
        return node.value

    def max_value(self) -> Any:
        """Largest value in the tree.

        Raises:
            NodeNotFound: If the tree is empty
        """
        node = find_max(self._root)
        if node is None:
            raise NodeNotFound("tree is empty, no maximum value")
        return node.value

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path (-1 if empty)."""
        deepest = -1
        for _, depth in self.nodes(TraversalOrder.PRE):
            deepest = max(deepest, depth)
        return deepest

    # Traversal

    def traverse(self, order: OrderLike, action: Callable[[Any], Any]) -> None:
        """Apply ``action`` to every value in the given order.

        Args:
            order: Traversal order (member or name)
            action: Called once per value

        Raises:
            InvalidTreeOperation: If action is missing or the order unknown
            TraversalError: If the action raises; traversal stops at once
        """
        if action is None or not callable(action):
            raise InvalidTreeOperation("action function cannot be null")
        order = self._resolve_order(order)

        for value in create_traverser(order).values(self._root):
            try:
                action(value)
            except Exception as exc:
                raise TraversalError(
                    f"Action failed during {order.label} traversal: {exc}",
                    order=order,
                ) from exc

    def values(self, order: OrderLike = TraversalOrder.IN) -> Iterator[Any]:
        """Lazily yield values in the given order.

        Raises:
            InvalidTreeOperation: If the order is unknown (raised immediately)
        """
        order = self._resolve_order(order)
        return create_traverser(order).values(self._root)

    def nodes(self,
              order: OrderLike = TraversalOrder.IN,
              max_depth: Optional[int] = None,
              min_depth: int = 0) -> Iterator[Tuple[BinaryNode, int]]:
        """Lazily yield ``(node, depth)`` pairs in the given order.

        Args:
            order: Traversal order (member or name)
            max_depth: Do not descend below this depth (None = unlimited)
            min_depth: Skip nodes shallower than this depth
        """
        order = self._resolve_order(order)
        return create_traverser(order).traverse(self._root, max_depth=max_depth, min_depth=min_depth)

    def __iter__(self) -> Iterator[Any]:
        return self.values(TraversalOrder.IN)

    def __reversed__(self) -> Iterator[Any]:
        return self.values(TraversalOrder.REVERSE_IN)

    # Structural operations

    def map(self, mapper: Callable[[Any], Any]) -> 'BinarySearchTree':
        """New tree of ``mapper(value)`` for each value (see operations.map_tree)."""
        return operations.map_tree(self, mapper)

    def where(self, predicate: Callable[[Any], bool]) -> 'BinarySearchTree':
        """New tree of the values satisfying ``predicate``."""
        return operations.filter_tree(self, predicate)

    def merge(self, other: 'BinarySearchTree', policy: Optional[ErrorPolicy] = None) -> 'BinarySearchTree':
        """New tree holding the values of both trees; duplicates are skipped."""
        return operations.merge_trees(self, other, policy)

    def extract_subtree(self, value: Any) -> 'BinarySearchTree':
        """Deep copy of the subtree rooted at ``value``."""
        return operations.extract_subtree(self, value)

    def contains_subtree(self, candidate: 'BinarySearchTree') -> bool:
        """Whether ``candidate`` occurs here with identical shape and values."""
        return operations.contains_subtree(self, candidate)

    # Paths

    def get_by_path(self, directions: Iterable[Any]) -> Any:
        """Value reached by following left/right steps from the root."""
        return resolve_path(self._root, directions, self._config.paths).value

    def get_by_relative_path(self, base: Any, directions: Iterable[Any]) -> Any:
        """Value reached by following left/right steps from ``base``.

        Raises:
            NodeNotFound: If ``base`` is absent or the path leaves the tree
        """
        start = find_node(self._root, base, self._config.ordering)
        if start is None:
            raise NodeNotFound(f"base node with value {base!r} not found")
        return resolve_path(start, directions, self._config.paths).value

    # Codec

    def serialize(self, order: Optional[OrderLike] = None) -> str:
        """Encode the tree as a token stream (default: configured order)."""
        if order is None:
            order = self._config.default_order
        return serialize_nodes(self._root, order, self._config.codec)

    def deserialize(self, data: Union[str, Iterable[str]], order: Optional[OrderLike] = None) -> None:
        """Replace the contents with the tree encoded in ``data``.

        The tree is cleared first and stays empty if decoding fails.
        """
        self.clear()
        if order is None:
            order = self._config.default_order
        self._root = deserialize_nodes(data, order, self._config.codec)

    # Comparison and display

    def __eq__(self, other: object) -> bool:
        """Trees are equal if they have the same shape and values."""
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        return subtrees_match(self._root, other._root, self._config.ordering)

    __hash__ = None  # mutable container

    def __repr__(self) -> str:
        preview = list(islice(self.values(TraversalOrder.IN), 11))
        body = ", ".join(repr(value) for value in preview[:10])
        if len(preview) > 10:
            body += ", ..."
        return f"{self.__class__.__name__}([{body}])"

    def _resolve_order(self, order: OrderLike) -> TraversalOrder:
        try:
            return TraversalOrder.parse(order)
        except ValueError as exc:
            raise InvalidTreeOperation(str(exc)) from exc
