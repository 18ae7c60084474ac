"""Exception hierarchy for OrderedTreeLib.

Every error raised by the container derives from TreeException, so callers
can catch the whole family at once or pick out the specific kind they care
about.
"""

from typing import Any, Optional


class TreeException(Exception):
    """Base class for all tree errors.

    Also raised directly for failures that have no more specific kind,
    such as running out of memory while building nodes.
    """
    pass


class InvalidTreeOperation(TreeException):
    """Raised when an operation is called with unusable arguments.

    Examples: an unknown traversal order, a missing action or predicate,
    an unrecognized path direction, or an empty subtree pattern.
    """

    def __init__(self, message: str):
        super().__init__(f"Invalid tree operation: {message}")


class DuplicateValueError(InvalidTreeOperation):
    """Raised when inserting a value that is already present."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"value {value!r} is already in the tree")


class NodeNotFound(TreeException):
    """Raised when a searched, removed or addressed value is absent."""

    def __init__(self, message: str):
        super().__init__(f"Node not found: {message}")


class SerializationError(TreeException):
    """Raised when a token stream cannot be encoded or decoded."""

    def __init__(self, message: str):
        super().__init__(f"Serialization error: {message}")


class TraversalError(TreeException):
    """Raised when a caller-supplied action fails during traversal.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str, order: Optional[Any] = None):
        self.order = order
        super().__init__(message)
