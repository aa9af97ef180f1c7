"""
Data models for the ordered multiset.
"""

from rbmultiset.models.exceptions import (
    ElementNotFoundError,
    MissingElementError,
    RedBlackTreeError,
    TreeInvariantError,
)
from rbmultiset.models.node import NIL, Color, Node, Sentinel
from rbmultiset.models.ordering import natural_order, reverse_order

__all__ = [
    "Color",
    "Node",
    "Sentinel",
    "NIL",
    "natural_order",
    "reverse_order",
    "RedBlackTreeError",
    "MissingElementError",
    "ElementNotFoundError",
    "TreeInvariantError",
]
