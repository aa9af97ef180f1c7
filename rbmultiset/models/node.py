"""
Node and sentinel model shared by the balancing algorithms.
"""

from dataclasses import FrozenInstanceError, dataclass
from enum import IntEnum
from typing import Any, Final

from rbmultiset.models.exceptions import MissingElementError, TreeInvariantError


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


class Sentinel:
    """
    The shared black leaf.

    Stands in for every absent child and for the parent of the root.
    It holds no element and its links are never followed. There is only
    ever one instance: constructing, copying or unpickling returns NIL.
    """

    __slots__ = ()

    _instance: "Sentinel | None" = None

    element = None
    count = 0
    color = Color.BLACK
    left = None
    right = None
    parent = None

    def __new__(cls) -> "Sentinel":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise TreeInvariantError(f"attempted to set {name!r} on the sentinel")

    def __reduce__(self) -> str:
        return "NIL"

    def __copy__(self) -> "Sentinel":
        return self

    def __deepcopy__(self, memo: dict) -> "Sentinel":
        return self

    def __repr__(self) -> str:
        return "NIL"


NIL: Final = Sentinel()


@dataclass(eq=False)
class Node:
    """One distinct element of the tree and its multiplicity."""

    element: Any
    color: Color = Color.RED
    count: int = 1
    left: "Node | Sentinel" = NIL
    right: "Node | Sentinel" = NIL
    parent: "Node | Sentinel" = NIL

    def __post_init__(self) -> None:
        if self.element is None:
            raise MissingElementError("Node")

    def __setattr__(self, name: str, value: Any) -> None:
        # element is fixed once set; rebalancing moves nodes instead
        if name == "element" and "element" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'element'")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        col = "R" if self.color == Color.RED else "B"
        return f"<{col} {self.element!r} x{self.count}>"


Link = Node | Sentinel


def is_red(link: Link) -> bool:
    return link.color == Color.RED


def is_black(link: Link) -> bool:
    return link.color == Color.BLACK
