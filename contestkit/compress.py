"""Coordinate compression over a sorted set of distinct coordinates."""

from bisect import bisect_left
from itertools import groupby


class SparseIndex:
    """Maps each distinct coordinate to its rank among all coordinates."""

    def __init__(self, coords):
        self._coords = [key for key, _ in groupby(sorted(coords))]

    def __len__(self):
        return len(self._coords)

    def position(self, q):
        """Return the index where ``q`` is or would be inserted."""
        return bisect_left(self._coords, q)

    def compress(self, q):
        """Return the rank of ``q``; raise KeyError if it is not indexed."""
        index = self.position(q)
        if index < len(self._coords) and self._coords[index] == q:
            return index
        raise KeyError(q)

    def max(self):
        """Return the rank of the largest coordinate."""
        if not self._coords:
            raise ValueError("index is empty")
        return len(self._coords) - 1