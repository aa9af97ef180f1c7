"""
Ordered multiset backed by a red-black tree.

This package provides a self-balancing container where:
- insert(element) - O(log N), equal elements share one node with a count
- remove(element) - O(log N), drops one occurrence at a time
- get_predecessor / get_successor - strict neighbours of a stored element
- iterator(start, end) - ascending range walks, duplicates repeated
"""

from rbmultiset.models.exceptions import (
    ElementNotFoundError,
    MissingElementError,
    RedBlackTreeError,
    TreeInvariantError,
)
from rbmultiset.models.sortedcontainers import RedBlackTree

__all__ = [
    "RedBlackTree",
    "RedBlackTreeError",
    "MissingElementError",
    "ElementNotFoundError",
    "TreeInvariantError",
]
