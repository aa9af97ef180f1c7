"""
Shared pytest fixtures for red-black multiset tests.
"""

import pytest

from rbmultiset.models.ordering import natural_order
from rbmultiset.models.sortedcontainers import RedBlackTree


@pytest.fixture
def tree():
    """Provide a fresh empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def seven_tree():
    """Provide a tree built from 1..7 inserted in ascending order."""
    return RedBlackTree.from_iterable(range(1, 8))


@pytest.fixture
def counting_compare():
    """Provide natural_order wrapped with a call counter."""

    class CountingCompare:
        def __init__(self):
            self.calls = 0

        def __call__(self, a, b):
            self.calls += 1
            return natural_order(a, b)

    return CountingCompare()


@pytest.fixture
def sample_elements():
    """Provide a shuffled batch with repeated values."""
    return [41, 7, 19, 7, 88, 3, 41, 56, 23, 7, 64, 12, 95, 3, 30]
