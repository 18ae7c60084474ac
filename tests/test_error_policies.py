"""
Test error handling policies.

Policies decide whether a bulk operation stops or carries on when a single
value fails; merge is the operation that consults them.
"""

import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import (
    BinarySearchTree,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    DuplicateValueError,
    ErrorPolicy,
    FailFastPolicy,
    ThresholdPolicy,
    TreeException,
)


class TestFailFastPolicy(unittest.TestCase):
    """Test FailFastPolicy behavior."""

    def test_reraises(self):
        policy = FailFastPolicy()
        error = DuplicateValueError(5)
        with self.assertRaises(DuplicateValueError) as ctx:
            policy.handle(error, 'merge', 5)
        self.assertIs(ctx.exception, error)

    def test_is_error_policy(self):
        self.assertIsInstance(FailFastPolicy(), ErrorPolicy)


class TestContinueOnErrorsPolicy:
    """Test ContinueOnErrorsPolicy behavior."""

    def test_records_and_warns(self, capsys):
        policy = ContinueOnErrorsPolicy()
        policy.handle(DuplicateValueError(5), 'merge', 5)

        assert policy.skipped_values == [5]
        assert policy.errors[0]['error_type'] == 'DuplicateValueError'
        assert policy.errors[0]['operation'] == 'merge'
        assert capsys.readouterr().err.strip() == "WARNING: merge skipped duplicate value 5"

    def test_other_errors_are_reported_generically(self, capsys):
        policy = ContinueOnErrorsPolicy()
        policy.handle(ValueError("bad"), 'merge', 'x')
        assert "WARNING: Error in merge for 'x': bad" in capsys.readouterr().err

    def test_quiet_mode(self, capsys):
        policy = ContinueOnErrorsPolicy(verbose=False)
        policy.handle(DuplicateValueError(1), 'merge', 1)
        assert capsys.readouterr().err == ""
        assert policy.skipped_values == [1]

    def test_statistics(self):
        policy = CollectErrorsPolicy()
        policy.handle(DuplicateValueError(1), 'merge', 1)
        policy.handle(DuplicateValueError(2), 'merge', 2)
        policy.handle(KeyError(3), 'merge', 3)

        stats = policy.get_statistics()
        assert stats['total_errors'] == 3
        assert stats['duplicate_errors'] == 2
        assert stats['skipped_values'] == 3
        assert len(stats['errors']) == 3

    def test_collect_errors_is_quiet(self, capsys):
        policy = CollectErrorsPolicy()
        assert policy.verbose is False
        policy.handle(DuplicateValueError(1), 'merge', 1)
        assert capsys.readouterr().err == ""


class TestThresholdPolicy:
    """Test ThresholdPolicy behavior."""

    def test_tolerates_up_to_limit(self, capsys):
        policy = ThresholdPolicy(max_errors=2)
        policy.handle(DuplicateValueError(1), 'merge', 1)
        policy.handle(DuplicateValueError(2), 'merge', 2)

        assert policy.error_count == 2
        err = capsys.readouterr().err
        assert "WARNING [1/2]" in err
        assert "WARNING [2/2]" in err

    def test_raises_past_limit(self):
        policy = ThresholdPolicy(max_errors=1, verbose=False)
        policy.handle(DuplicateValueError(1), 'merge', 1)

        with pytest.raises(TreeException, match="threshold exceeded") as excinfo:
            policy.handle(DuplicateValueError(2), 'merge', 2)
        assert isinstance(excinfo.value.__cause__, DuplicateValueError)

    def test_merge_under_threshold(self):
        tree = BinarySearchTree.from_values([1, 2, 3])
        policy = ThresholdPolicy(max_errors=5, verbose=False)
        merged = tree.merge(BinarySearchTree.from_values([2, 3, 4]), policy=policy)

        assert list(merged) == [1, 2, 3, 4]
        assert policy.error_count == 2


class TestCustomPolicy:
    """A user-defined policy sees every duplicate merge hits."""

    def test_custom_policy(self):
        class RecordingPolicy(ErrorPolicy):
            def __init__(self):
                self.seen = []

            def handle(self, error, operation, value):
                self.seen.append((operation, value))

        policy = RecordingPolicy()
        tree = BinarySearchTree.from_values([10, 5, 15])
        tree.merge(BinarySearchTree.from_values([15, 5, 1]), policy=policy)

        # Values of the other tree are offered in ascending order
        assert policy.seen == [('merge', 5), ('merge', 15)]

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            ErrorPolicy()
