"""
RangeIterable protocol for ordered containers that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for containers that can be walked in ascending order.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)

    Every call returns a fresh iterator; none of them is a live view.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all elements in ascending order."""
        pass

    @abstractmethod
    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        """
        Return an iterator over the elements in the specified range.

        Args:
            start: Lower bound (inclusive). If None, starts from the minimum.
            end: Upper bound (exclusive). If None, iterates to the maximum.

        Returns:
            Iterator yielding elements in ascending order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all elements in ascending order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: Any = None, end: Any = None
    ) -> AsyncIterator[Any]:
        """
        Return an async iterator over the elements in the specified range.

        Args:
            start: Lower bound (inclusive). If None, starts from the minimum.
            end: Upper bound (exclusive). If None, iterates to the maximum.

        Returns:
            AsyncIterator yielding elements in ascending order.
        """
        pass
