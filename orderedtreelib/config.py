"""Configuration system for OrderedTreeLib.

This module defines how users tell a tree how its values compare, how they
are written out by the codec, and which tokens address children by path.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .core.ordering import KeyOrdering, NaturalOrdering, Ordering, ValueFormat


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes.

    Each order is a fixed arrangement of (node, left subtree, right subtree).
    """
    PRE = "pre"                     # node, left, right
    REVERSE_PRE = "reverse_pre"     # node, right, left
    IN = "in"                       # left, node, right (ascending)
    REVERSE_IN = "reverse_in"       # right, node, left (descending)
    POST = "post"                   # left, right, node
    REVERSE_POST = "reverse_post"   # right, left, node

    @classmethod
    def parse(cls, order: Union['TraversalOrder', str]) -> 'TraversalOrder':
        """Resolve an order given as a member or a name.

        Accepts the enum value ("reverse_pre"), the member name
        ("REVERSE_PRE") and the spelled-out forms ("reverse-pre-order",
        "in_order").

        Raises:
            ValueError: If the order is not recognized
        """
        if isinstance(order, cls):
            return order
        if not isinstance(order, str):
            raise ValueError(f"Unknown traversal order: {order!r}")

        name = order.strip().lower().replace('-', '_').replace(' ', '_')
        if name.endswith('_order'):
            name = name[:-len('_order')]
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown traversal order: {order!r}. "
                f"Choose from: {', '.join(member.value for member in cls)}"
            ) from None

    @property
    def is_shape_complete(self) -> bool:
        """Whether a null-marked token stream in this order fixes the shape.

        Sorted orders lose the shape: many trees share one in-order sequence.
        """
        return self not in (TraversalOrder.IN, TraversalOrder.REVERSE_IN)

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.name.replace('_', '-').lower() + "-order"


class Direction(Enum):
    """One step of a path through the tree."""
    LEFT = "left"
    RIGHT = "right"


@dataclass
class CodecConfig:
    """Configuration for the text codec."""

    null_token: str = "null"        # Marker for an absent child
    separator: str = " "            # Written after every token
    value_format: ValueFormat = field(default_factory=ValueFormat)

    def validate(self) -> List[str]:
        """Validate codec settings.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not self.null_token or any(ch.isspace() for ch in self.null_token):
            errors.append("null_token must be a non-empty token without whitespace")
        if not self.separator or not self.separator.isspace():
            errors.append("separator must be non-empty whitespace")
        if not callable(getattr(self.value_format, 'parse', None)):
            errors.append("value_format.parse must be callable")
        if not callable(getattr(self.value_format, 'format', None)):
            errors.append("value_format.format must be callable")
        return errors


@dataclass
class PathConfig:
    """Tokens accepted as path directions."""

    left_token: str = Direction.LEFT.value
    right_token: str = Direction.RIGHT.value

    def resolve(self, token: Any) -> Optional[Direction]:
        """Map a path token to a Direction.

        Args:
            token: A Direction member or one of the configured strings

        Returns:
            The direction, or None if the token is not recognized
        """
        if isinstance(token, Direction):
            return token
        if token == self.left_token:
            return Direction.LEFT
        if token == self.right_token:
            return Direction.RIGHT
        return None

    def validate(self) -> List[str]:
        errors = []
        if self.left_token == self.right_token:
            errors.append("left_token and right_token must differ")
        return errors


@dataclass
class TreeConfig:
    """Complete configuration for a BinarySearchTree.

    Trees produced from another tree (copies, map/where/merge results,
    extracted subtrees) share its configuration.
    """

    ordering: Ordering = field(default_factory=NaturalOrdering)
    codec: CodecConfig = field(default_factory=CodecConfig)
    paths: PathConfig = field(default_factory=PathConfig)
    default_order: TraversalOrder = TraversalOrder.PRE

    @classmethod
    def for_type(cls, value_type: type) -> 'TreeConfig':
        """Create config for a builtin element type.

        Args:
            value_type: int, float, str or complex

        Returns:
            TreeConfig whose codec parses that type
        """
        ordering: Ordering = NaturalOrdering()
        if value_type is complex:
            # complex has no natural order; compare real part, then imaginary
            ordering = KeyOrdering(lambda c: (c.real, c.imag))
        return cls(
            ordering=ordering,
            codec=CodecConfig(value_format=ValueFormat.for_type(value_type)),
        )

    @classmethod
    def with_key(cls,
                 key: Callable[[Any], Any],
                 value_format: Optional[ValueFormat] = None) -> 'TreeConfig':
        """Create config that orders values by a key function.

        Args:
            key: Function returning a naturally ordered key for each value
            value_format: Codec format for the values (default int/str)

        Returns:
            TreeConfig using a KeyOrdering
        """
        return cls(
            ordering=KeyOrdering(key),
            codec=CodecConfig(value_format=value_format or ValueFormat()),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.ordering, Ordering):
            errors.append("ordering must be an Ordering instance")

        if not isinstance(self.default_order, TraversalOrder):
            errors.append("default_order must be a TraversalOrder")
        elif not self.default_order.is_shape_complete:
            errors.append(
                f"default_order {self.default_order.label} cannot be used for serialization"
            )

        errors.extend(self.codec.validate())
        errors.extend(self.paths.validate())
        return errors
