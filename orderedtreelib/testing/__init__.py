"""Testing utilities for OrderedTreeLib consumers.

This module provides helpers for verifying tree shape and invariants
in tests.
"""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
