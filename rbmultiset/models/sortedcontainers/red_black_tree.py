"""
Red-Black Tree implementation of an ordered multiset.

Equal elements share one node whose count records how many times they
were inserted. Every absent child, and the parent of the root, is the
shared NIL sentinel, so color and link queries never need a None check.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any, NoReturn

from rbmultiset.interfaces.sorted_multiset import SortedMultiset
from rbmultiset.models.exceptions import (
    ElementNotFoundError,
    MissingElementError,
    TreeInvariantError,
)
from rbmultiset.models.node import NIL, Color, Link, Node, is_black, is_red
from rbmultiset.models.ordering import Comparator, natural_order

logger = logging.getLogger(__name__)

# Marks an omitted seed element
_NO_ELEMENT = object()


class RedBlackTree(SortedMultiset):
    """
    Red-Black Tree implementation of SortedMultiset.

    Properties maintained:
    1. Every node is either red or black, the sentinel is black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to sentinel has same number of black nodes
    5. No two nodes hold equal elements

    Two counters are kept in step with every change: the total number of
    occurrences (size) and the number of distinct nodes.
    """

    def __init__(
        self, element: Any = _NO_ELEMENT, *, compare: Comparator | None = None
    ) -> None:
        """
        Create an empty tree or one seeded with a single element.

        Args:
            element: Optional first element, stored as the black root.
                Passing None explicitly raises MissingElementError.
            compare: Three-way comparator used for both placement and
                duplicate merging. Defaults to natural_order.
        """
        if compare is None:
            compare = natural_order
        elif not callable(compare):
            raise TypeError(
                f"compare must be callable, got {type(compare).__name__}"
            )

        self._compare: Comparator = compare
        self._root: Link = NIL
        self._size: int = 0
        self._node_count: int = 0

        if element is not _NO_ELEMENT:
            self._require(element, "RedBlackTree")
            self._root = Node(element=element, color=Color.BLACK)
            self._size = 1
            self._node_count = 1

    @classmethod
    def from_iterable(
        cls, elements: Iterable[Any], *, compare: Comparator | None = None
    ) -> "RedBlackTree":
        """Build a tree by inserting each element in turn. O(N log N)"""
        tree = cls(compare=compare)
        for element in elements:
            tree.insert(element)
        return tree

    @property
    def root(self) -> Link:
        return self._root

    # Mutation

    def insert(self, element: Any) -> int:
        """Add one occurrence of element. O(log N)"""
        self._require(element, "insert")

        if self._root is NIL:
            self._root = Node(element=element, color=Color.BLACK)
            self._size += 1
            self._node_count += 1
            logger.debug(f"Created root node for {element!r}")
            return 0

        comparisons = 0
        parent: Link = NIL
        current = self._root

        while current is not NIL:
            parent = current
            cmp = self._compare(element, current.element)
            comparisons += 1
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                current.count += 1
                self._size += 1
                return comparisons

        new_node = Node(element=element, parent=parent)
        comparisons += 1
        if self._compare(element, parent.element) < 0:
            parent.left = new_node
        else:
            parent.right = new_node

        self._node_count += 1
        self._size += 1
        logger.debug(f"Created node for {element!r} under {parent.element!r}")

        self._fix_insert(new_node)
        return comparisons

    def remove(self, element: Any) -> bool:
        """Remove one occurrence of element. O(log N)"""
        self._require(element, "remove")

        node = self._find_node(element)
        if node is NIL:
            return False

        if node.count > 1:
            node.count -= 1
            self._size -= 1
            return True

        self._delete_node(node)
        self._node_count -= 1
        self._size -= 1
        logger.debug(f"Unlinked node for {element!r}")
        return True

    # Lookup

    def contains(self, element: Any) -> bool:
        self._require(element, "contains")
        return self._find_node(element) is not NIL

    def __contains__(self, element: object) -> bool:
        if element is None:
            return False
        return self._find_node(element) is not NIL

    def get_count(self, element: Any) -> int:
        """Return the multiplicity of element, 0 if absent. O(log N)"""
        self._require(element, "get_count")
        return self._find_node(element).count

    def get_minimum(self) -> Any | None:
        if self._root is NIL:
            return None
        return self._minimum_node(self._root).element

    def get_maximum(self) -> Any | None:
        if self._root is NIL:
            return None
        return self._maximum_node(self._root).element

    def get_successor(self, element: Any) -> Any | None:
        """
        Return the smallest stored element greater than element.

        Args:
            element: An element currently stored in the tree.

        Returns:
            The successor, or None if element is the maximum.

        Raises:
            MissingElementError: element is None.
            ElementNotFoundError: element is not stored.
        """
        self._require(element, "get_successor")
        node = self._find_node(element)
        if node is NIL:
            raise ElementNotFoundError(element)
        return self._successor_node(node).element

    def get_predecessor(self, element: Any) -> Any | None:
        """
        Return the largest stored element smaller than element.

        Args:
            element: An element currently stored in the tree.

        Returns:
            The predecessor, or None if element is the minimum.

        Raises:
            MissingElementError: element is None.
            ElementNotFoundError: element is not stored.
        """
        self._require(element, "get_predecessor")
        node = self._find_node(element)
        if node is NIL:
            raise ElementNotFoundError(element)
        return self._predecessor_node(node).element

    # Aggregates

    def get_black_height(self) -> int:
        """Count black nodes on the leftmost path, -1 if empty."""
        if self._root is NIL:
            return -1

        black_height = 0
        current = self._root
        while current is not NIL:
            if is_black(current):
                black_height += 1
            current = current.left
        return black_height

    def get_size(self) -> int:
        return self._size

    def get_number_of_nodes(self) -> int:
        return self._node_count

    def is_empty(self) -> bool:
        return self._root is NIL

    def __len__(self) -> int:
        return self._size

    # Traversal

    def in_order_visit(self) -> list[Any]:
        """Return every occurrence in ascending order."""
        return list(self)

    def counts(self) -> Iterator[tuple[Any, int]]:
        """Yield (element, multiplicity) pairs in ascending order."""
        walk = _RangeIterator(self._root, self._compare, None, None)
        for node in walk.nodes():
            yield node.element, node.count

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        return _RangeIterator(self._root, self._compare, start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any = None, end: Any = None
    ) -> AsyncIterator[Any]:
        return _AsyncRangeIterator(self.iterator(start, end))

    # Internal navigation

    def _require(self, element: Any, operation: str) -> None:
        if element is None:
            raise MissingElementError(operation)

    def _find_node(self, element: Any) -> Link:
        """Find node by element, NIL if not stored."""
        current = self._root
        while current is not NIL:
            cmp = self._compare(element, current.element)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return current
        return NIL

    def _minimum_node(self, node: Link) -> Node:
        if node is NIL:
            raise TreeInvariantError("minimum requested on an empty subtree")
        while node.left is not NIL:
            node = node.left
        return node

    def _maximum_node(self, node: Link) -> Node:
        if node is NIL:
            raise TreeInvariantError("maximum requested on an empty subtree")
        while node.right is not NIL:
            node = node.right
        return node

    def _successor_node(self, node: Node) -> Link:
        if node.right is not NIL:
            return self._minimum_node(node.right)

        # Climb until we arrive from a left child.
        parent = node.parent
        while parent is not NIL and node is parent.right:
            node = parent
            parent = parent.parent
        return parent

    def _predecessor_node(self, node: Node) -> Link:
        if node.left is not NIL:
            return self._maximum_node(node.left)

        parent = node.parent
        while parent is not NIL and node is parent.left:
            node = parent
            parent = parent.parent
        return parent

    # Rotations

    def _rotate_left(self, node: Node) -> None:
        """Left rotation."""
        right_child = node.right
        if right_child is NIL:
            raise TreeInvariantError(
                f"rotate_left on {node!r} whose right child is the sentinel"
            )

        node.right = right_child.left
        if right_child.left is not NIL:
            right_child.left.parent = node

        right_child.parent = node.parent

        if node.parent is NIL:
            self._root = right_child
        elif node is node.parent.left:
            node.parent.left = right_child
        else:
            node.parent.right = right_child

        right_child.left = node
        node.parent = right_child

    def _rotate_right(self, node: Node) -> None:
        """Right rotation."""
        left_child = node.left
        if left_child is NIL:
            raise TreeInvariantError(
                f"rotate_right on {node!r} whose left child is the sentinel"
            )

        node.left = left_child.right
        if left_child.right is not NIL:
            left_child.right.parent = node

        left_child.parent = node.parent

        if node.parent is NIL:
            self._root = left_child
        elif node is node.parent.right:
            node.parent.right = left_child
        else:
            node.parent.left = left_child

        left_child.right = node
        node.parent = left_child

    # Insertion fixup

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while is_red(node.parent):
            parent = node.parent
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right

                if is_red(uncle):
                    # Case 1: Uncle is red
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.right:
                    # Case 2: Node is an inner child
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent

                # Case 3: Node is an outer child
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left

                if is_red(uncle):
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent

                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)

        self._root.color = Color.BLACK

    # Deletion

    def _transplant(self, target: Node, replacement: Link) -> None:
        """Put replacement where target hangs. The sentinel is never relinked."""
        if target.parent is NIL:
            self._root = replacement
        elif target is target.parent.left:
            target.parent.left = replacement
        else:
            target.parent.right = replacement

        if replacement is not NIL:
            replacement.parent = target.parent

    def _delete_node(self, node: Node) -> None:
        """
        Unlink node from the tree and repair colors.

        A node with two children is replaced by its in-order successor,
        which is moved into place rather than having its element copied.
        Because the sentinel is immutable, the parent of the fixup cursor
        is tracked alongside it instead of being written onto NIL.
        """
        spliced = node
        spliced_color = spliced.color

        if node.left is NIL:
            cursor = node.right
            cursor_parent = node.parent
            self._transplant(node, node.right)
        elif node.right is NIL:
            cursor = node.left
            cursor_parent = node.parent
            self._transplant(node, node.left)
        else:
            spliced = self._minimum_node(node.right)
            spliced_color = spliced.color
            cursor = spliced.right

            if spliced.parent is node:
                cursor_parent = spliced
            else:
                cursor_parent = spliced.parent
                self._transplant(spliced, spliced.right)
                spliced.right = node.right
                spliced.right.parent = spliced

            self._transplant(node, spliced)
            spliced.left = node.left
            spliced.left.parent = spliced
            spliced.color = node.color

        node.left = node.right = node.parent = NIL

        if spliced_color == Color.BLACK:
            self._fix_delete(cursor, cursor_parent)

    def _fix_delete(self, node: Link, parent: Link) -> None:
        """Fix Red-Black Tree properties after removing a black node."""
        while node is not self._root and is_black(node):
            if node is parent.left:
                sibling = parent.right

                if is_red(sibling):
                    # Case 1: Sibling is red
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right

                if is_black(sibling.left) and is_black(sibling.right):
                    # Case 2: Both of sibling's children are black
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                    continue

                if is_black(sibling.right):
                    # Case 3: Far child black, near child red
                    sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                    sibling = parent.right

                # Case 4: Far child red
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
                node = self._root
            else:
                sibling = parent.left

                if is_red(sibling):
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left

                if is_black(sibling.left) and is_black(sibling.right):
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                    continue

                if is_black(sibling.left):
                    sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                    sibling = parent.left

                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
                node = self._root

        if node is not NIL:
            node.color = Color.BLACK

    # Diagnostics

    def validate(self) -> None:
        """
        Verify that the tree satisfies all red-black invariants.

        Recomputes the counters by traversal and checks them against the
        maintained ones. Meant for tests and debugging.

        Raises:
            TreeInvariantError: describing the first violation found.
        """
        if self._root is NIL:
            if self._size != 0 or self._node_count != 0:
                self._invariant_failed(
                    f"Empty tree reports size={self._size}, "
                    f"nodes={self._node_count}"
                )
            return

        if not is_black(self._root):
            self._invariant_failed("Root is not black")
        if self._root.parent is not NIL:
            self._invariant_failed("Root has a parent")

        totals = {"size": 0, "nodes": 0}

        def dfs(node: Link, low: Any, high: Any) -> int:
            """Return the black height of the subtree rooted at node."""
            if node is NIL:
                return 0

            if node.count < 1:
                self._invariant_failed(f"{node!r} has multiplicity {node.count}")
            if low is not None and self._compare(node.element, low) <= 0:
                self._invariant_failed(f"{node!r} is not greater than {low!r}")
            if high is not None and self._compare(node.element, high) >= 0:
                self._invariant_failed(f"{node!r} is not less than {high!r}")

            for child in (node.left, node.right):
                if child is not NIL and child.parent is not node:
                    self._invariant_failed(f"{child!r} has a stale parent link")

            if is_red(node) and (is_red(node.left) or is_red(node.right)):
                self._invariant_failed(f"Red node {node!r} has a red child")

            left_black = dfs(node.left, low, node.element)
            right_black = dfs(node.right, node.element, high)
            if left_black != right_black:
                self._invariant_failed(
                    f"Black-height mismatch under {node!r}: "
                    f"{left_black} != {right_black}"
                )

            totals["size"] += node.count
            totals["nodes"] += 1
            return left_black + (1 if is_black(node) else 0)

        black_height = dfs(self._root, None, None)

        if black_height != self.get_black_height():
            self._invariant_failed("Leftmost path disagrees with black height")
        if totals["size"] != self._size:
            self._invariant_failed(
                f"size counter {self._size} != recomputed {totals['size']}"
            )
        if totals["nodes"] != self._node_count:
            self._invariant_failed(
                f"node counter {self._node_count} != recomputed {totals['nodes']}"
            )

    def _invariant_failed(self, message: str) -> NoReturn:
        logger.error(f"Red-black invariant violated: {message}")
        raise TreeInvariantError(message)

    def dump(self) -> str:
        """Render the structure one node per line, children indented."""
        if self._root is NIL:
            return "NIL"

        lines: list[str] = []

        def walk(link: Link, depth: int, label: str) -> None:
            indent = "    " * depth
            lines.append(f"{indent}{label}: {link!r}")
            if link is not NIL:
                walk(link.left, depth + 1, "L")
                walk(link.right, depth + 1, "R")

        walk(self._root, 0, "root")
        return "\n".join(lines)

    def __repr__(self) -> str:
        elements = ", ".join(repr(element) for element in self)
        return (
            f"RedBlackTree([{elements}], size={self._size}, "
            f"nodes={self._node_count})"
        )


class _RangeIterator(Iterator[Any]):
    """Iterator for range queries, one element per unit of multiplicity."""

    def __init__(
        self, root: Link, compare: Comparator, start: Any, end: Any
    ) -> None:
        self._stack: list[Node] = []
        self._compare = compare
        self._end = end
        self._current: Node | None = None
        self._remaining = 0

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._remaining == 0:
            node = self._next_node()
            if node is None:
                raise StopIteration
            self._current = node
            self._remaining = node.count

        self._remaining -= 1
        return self._current.element

    def nodes(self) -> Iterator[Node]:
        """Yield the remaining distinct nodes instead of occurrences."""
        node = self._next_node()
        while node is not None:
            yield node
            node = self._next_node()

    def _next_node(self) -> Node | None:
        if not self._stack:
            return None

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and self._compare(node.element, self._end) >= 0:
            self._stack.clear()
            return None

        self._push_left_path(node.right, None)
        return node

    def _push_left_path(self, node: Link, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node is not NIL:
            if start is not None and self._compare(node.element, start) < 0:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async iterator over a range walk (in-memory, no I/O)."""

    def __init__(self, walk: _RangeIterator) -> None:
        self._walk = walk

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._walk)
        except StopIteration:
            raise StopAsyncIteration from None
