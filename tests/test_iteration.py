"""
Tests for ordered traversal: in-order visits, range walks and async iteration.
"""

from rbmultiset.models.ordering import reverse_order
from rbmultiset.models.sortedcontainers import RedBlackTree


class TestInOrderVisit:
    """Tests for full ascending walks."""

    def test_empty(self, tree):
        assert tree.in_order_visit() == []
        assert list(tree) == []

    def test_duplicates_repeated_consecutively(self, sample_elements):
        """Test each value appears get_count times in a row."""
        tree = RedBlackTree.from_iterable(sample_elements)
        visit = tree.in_order_visit()

        assert visit == sorted(sample_elements)
        for value in set(sample_elements):
            first = visit.index(value)
            count = tree.get_count(value)
            assert visit[first:first + count] == [value] * count

    def test_restartable(self, seven_tree):
        """Test every call walks the tree afresh."""
        assert list(seven_tree) == list(seven_tree)

        seven_tree.remove(4)
        assert list(seven_tree) == [1, 2, 3, 5, 6, 7]

    def test_counts(self, tree):
        """Test counts yields distinct values with their multiplicities."""
        for element in ("b", "a", "b", "c", "b"):
            tree.insert(element)

        assert list(tree.counts()) == [("a", 1), ("b", 3), ("c", 1)]


class TestRangeIteration:
    """Tests for bounded walks."""

    def test_range(self, seven_tree):
        """Test start is inclusive and end exclusive."""
        seven_tree.insert(4)
        assert list(seven_tree.iterator(3, 6)) == [3, 4, 4, 5]

    def test_open_bounds(self, seven_tree):
        assert list(seven_tree.iterator(start=5)) == [5, 6, 7]
        assert list(seven_tree.iterator(end=3)) == [1, 2]
        assert list(seven_tree.iterator()) == list(range(1, 8))

    def test_bounds_not_stored(self, seven_tree):
        """Test bounds between stored elements."""
        assert list(seven_tree.iterator(2.5, 5.5)) == [3, 4, 5]

    def test_empty_range(self, seven_tree):
        assert list(seven_tree.iterator(5, 5)) == []
        assert list(seven_tree.iterator(10, 20)) == []

    def test_range_follows_comparator(self):
        """Test bounds are interpreted under the tree's own order."""
        tree = RedBlackTree.from_iterable(range(10), compare=reverse_order)
        assert list(tree.iterator(7, 3)) == [7, 6, 5, 4]


class TestAsyncIteration:
    """Tests for async walks (in-memory, no suspension)."""

    async def test_async_full_walk(self, sample_elements):
        tree = RedBlackTree.from_iterable(sample_elements)
        result = [element async for element in tree]
        assert result == sorted(sample_elements)

    async def test_async_range(self, seven_tree):
        """Test async range walk matches the synchronous one."""
        result = [element async for element in seven_tree.async_iterator(2, 5)]
        assert result == list(seven_tree.iterator(2, 5))

    async def test_async_empty(self, tree):
        result = [element async for element in tree]
        assert result == []
