"""
Error handling policies for OrderedTreeLib.

Bulk operations that may hit recoverable errors part way through (merging
one tree into another is the main one) delegate the decision to a policy:
stop immediately, or record the problem and carry on.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .exceptions import DuplicateValueError, TreeException


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors that
    occur while a bulk operation processes one value at a time.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, value: Any) -> None:
        """
        Handle an error raised while processing a single value.

        Args:
            error: The exception that was raised
            operation: Name of the operation that failed (e.g., 'merge')
            value: The value being processed when the error occurred

        Returns:
            None to skip the value and continue, or re-raises the exception
            to stop the operation.
        """
        pass

    @staticmethod
    def _record(error: Exception, operation: str, value: Any) -> Dict[str, Any]:
        return {
            'value': value,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the operation.

    Useful when a partial result is not acceptable, e.g. a merge that must
    not silently drop values.
    """

    def handle(self, error: Exception, operation: str, value: Any) -> None:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors as warnings and continues.

    This is the default for merge: a value already present in the target is
    skipped with a warning on stderr and the merge goes on.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_values: List[Any] = []
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, value: Any) -> None:
        """Record the error, warn if verbose, and skip the value."""
        self.errors.append(self._record(error, operation, value))
        self.skipped_values.append(value)

        if self.verbose:
            if isinstance(error, DuplicateValueError):
                print(f"WARNING: {operation} skipped duplicate value {value!r}", file=sys.stderr)
            else:
                print(f"WARNING: Error in {operation} for {value!r}: {error}", file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'duplicate_errors': sum(1 for e in self.errors if e['error_type'] == 'DuplicateValueError'),
            'skipped_values': len(self.skipped_values),
            'errors': self.errors,
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without printing, for batch processing.

    Useful for collecting every skipped value and presenting them at the end.
    """

    def __init__(self):
        super().__init__(verbose=False)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when a few collisions are expected but many indicate that the
    two inputs were not meant to be combined.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    def handle(self, error: Exception, operation: str, value: Any) -> None:
        """Skip the value if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise TreeException(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"WARNING [{self.error_count}/{self.max_errors}]: Error in {operation} for {value!r}: {error}",
                  file=sys.stderr)
