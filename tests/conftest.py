"""Shared pytest configuration and fixtures for OrderedTreeLib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import BinarySearchTree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running scale tests (deselect with -m 'not slow')")


@pytest.fixture
def sample_tree():
    """The reference tree used throughout the suite.

    Structure:
            10
           /  \\
          5    15
         / \\
        3   7
    """
    return BinarySearchTree.from_values([10, 5, 15, 3, 7])


@pytest.fixture
def wide_tree():
    """A full three-level tree.

    Structure:
               10
            /      \\
           5        15
          / \\      /  \\
         3   7    12    20
    """
    return BinarySearchTree.from_values([10, 5, 15, 3, 7, 12, 20])
