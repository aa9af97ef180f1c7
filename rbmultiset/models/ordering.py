"""
Three-way comparators used to place and merge elements.
"""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """
    Compare two elements using only ``<``.

    Equality is "neither is less than the other", so placement and
    duplicate merging always come from the same relation.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if they are equivalent.
    """
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    """Descending variant of natural_order."""
    return natural_order(b, a)
