"""
SortedMultiset abstract base class for ordered bag data structures.
"""

from abc import abstractmethod
from typing import Any

from rbmultiset.interfaces.range_iterable import RangeIterable


class SortedMultiset(RangeIterable):
    """
    Abstract base class for ordered containers that count duplicates.

    Equal elements share a single entry whose multiplicity grows with
    every insertion. Inherits range iteration from RangeIterable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def insert(self, element: Any) -> int:
        """
        Add one occurrence of an element.

        Args:
            element: The element to insert. Must not be None.

        Returns:
            The number of order comparisons performed.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, element: Any) -> bool:
        """
        Remove one occurrence of an element.

        Args:
            element: The element to remove. Must not be None.

        Returns:
            True if an occurrence was removed, False if it was not stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, element: Any) -> bool:
        """
        Check if an element is stored.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get_count(self, element: Any) -> int:
        """
        Return the multiplicity of an element, 0 if absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get_size(self) -> int:
        """
        Return the total number of occurrences stored.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def get_number_of_nodes(self) -> int:
        """Return the number of distinct elements stored."""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass
