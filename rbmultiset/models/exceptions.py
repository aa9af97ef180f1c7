"""
Custom exceptions for the red-black multiset.
"""

from typing import Any


class RedBlackTreeError(Exception):
    """Base class for every error raised by the tree."""


class MissingElementError(RedBlackTreeError, ValueError):
    """
    Raised when an operation that requires an element receives None.

    Raised before any mutation takes place.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() requires an element, got None")


class ElementNotFoundError(RedBlackTreeError, ValueError):
    """
    Raised when a neighbour of an element that is not stored is requested.

    Distinct from "no neighbour exists", which is a valid None result.
    """

    def __init__(self, element: Any):
        """
        Initialize not-found error.

        Args:
            element: The element that was looked up.
        """
        self.element = element
        super().__init__(f"Element {element!r} is not stored in this tree")


class TreeInvariantError(RedBlackTreeError, RuntimeError):
    """
    Raised when the tree detects a broken internal invariant.

    This indicates a bug in the balancing logic, not a caller error.
    """
