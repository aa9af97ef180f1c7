"""
Sorted container implementations.
"""

from rbmultiset.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree"]
