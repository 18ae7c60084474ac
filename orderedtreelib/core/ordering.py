"""Ordering and value-format strategies for OrderedTreeLib.

The container never decides how values compare or how they are written as
text. An Ordering tells the search core how two values relate, and a
ValueFormat tells the codec how to turn a value into a token and back.
Element types without a natural order (complex numbers, records) are handled
by supplying a KeyOrdering rather than patching the type itself.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class Ordering(ABC):
    """Abstract total order over tree values."""

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Compare two values.

        Args:
            a: Left operand
            b: Right operand

        Returns:
            Negative if a < b, zero if equal, positive if a > b
        """
        pass

    def equal(self, a: Any, b: Any) -> bool:
        """Check whether two values are equal under this order."""
        return self.compare(a, b) == 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NaturalOrdering(Ordering):
    """Order values by their own ``<`` and ``==`` operators."""

    def compare(self, a: Any, b: Any) -> int:
        if a == b:
            return 0
        if a < b:
            return -1
        return 1


class KeyOrdering(Ordering):
    """Order values by a key function, like ``sorted(key=...)``.

    Example:
        >>> ordering = KeyOrdering(lambda c: (c.real, c.imag))
        >>> ordering.compare(1 + 2j, 1 + 3j)
        -1
    """

    def __init__(self, key: Callable[[Any], Any]):
        if not callable(key):
            raise TypeError("KeyOrdering requires a callable key")
        self.key = key

    def compare(self, a: Any, b: Any) -> int:
        ka, kb = self.key(a), self.key(b)
        if ka == kb:
            return 0
        if ka < kb:
            return -1
        return 1

    def __repr__(self) -> str:
        return f"KeyOrdering(key={self.key!r})"


class ValueFormat:
    """Pair of functions converting values to tokens and back.

    Args:
        parse: Turns a token into a value (may raise ValueError/TypeError)
        format: Turns a value into its canonical token
    """

    def __init__(self,
                 parse: Callable[[str], Any] = int,
                 format: Callable[[Any], str] = str):
        self.parse = parse
        self.format = format

    @classmethod
    def for_type(cls, value_type: type) -> 'ValueFormat':
        """Create a format for a builtin type such as int, float or str."""
        if value_type is complex:
            return cls(parse=_parse_complex, format=_format_complex)
        return cls(parse=value_type, format=str)

    def __repr__(self) -> str:
        parse_name = getattr(self.parse, '__name__', repr(self.parse))
        format_name = getattr(self.format, '__name__', repr(self.format))
        return f"ValueFormat(parse={parse_name}, format={format_name})"


def _format_complex(value: complex) -> str:
    # str(1+2j) is "(1+2j)" which complex() cannot read back
    return str(value).strip("()")


def _parse_complex(token: str) -> complex:
    return complex(token.strip("()"))
