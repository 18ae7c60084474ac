"""Path addressing for OrderedTreeLib.

A path is a sequence of left/right steps. Resolution walks child links
directly instead of traversing, so a path of length k costs O(k).
"""

from typing import Any, Iterable, Optional

from .config import Direction, PathConfig
from .core.node import BinaryNode
from .exceptions import InvalidTreeOperation, NodeNotFound


def resolve_path(start: Optional[BinaryNode],
                 directions: Iterable[Any],
                 config: PathConfig) -> BinaryNode:
    """Follow ``directions`` from ``start`` and return the node reached.

    Args:
        start: Node to start from
        directions: Direction members or configured direction strings
        config: Tokens accepted for left and right

    Returns:
        The node at the end of the path (``start`` for an empty path)

    Raises:
        NodeNotFound: If ``start`` is None or a step leads to an absent child
        InvalidTreeOperation: If a token is not a recognized direction
    """
    if start is None:
        raise NodeNotFound("tree is empty, path cannot be traversed")

    if isinstance(directions, (str, Direction)):
        # A bare "left" would otherwise be walked one character at a time
        directions = [directions]

    current = start
    for step, token in enumerate(directions):
        direction = config.resolve(token)
        if direction is None:
            raise InvalidTreeOperation(f"invalid path direction {token!r}")

        current = current.left if direction is Direction.LEFT else current.right
        if current is None:
            raise NodeNotFound(
                f"path leads to a non-existent node at step {step + 1} ({token!r})"
            )

    return current
