"""
Abstract base classes for the ordered containers.
"""

from rbmultiset.interfaces.range_iterable import RangeIterable
from rbmultiset.interfaces.sorted_multiset import SortedMultiset

__all__ = ["RangeIterable", "SortedMultiset"]
