"""Segment tree over a list of data items with point updates."""


class SegTree:
    """Segment tree whose nodes are built from data by caller-given functions.

    ``combine(left, right)`` merges two nodes, ``zero`` is the neutral node and
    ``leaf(item)`` turns one data item into a node. Nodes are all ``zero``
    until :meth:`build` is called or items are updated.
    """

    def __init__(self, data, combine, zero, leaf):
        self._data = list(data)
        self._size = len(self._data)
        self._combine = combine
        self._zero = zero
        self._leaf = leaf
        self._nodes = [zero] * (4 * self._size)

    def __len__(self):
        return self._size

    def _require_data(self):
        if not self._size:
            raise ValueError("segment tree has no data")

    def build(self):
        """Compute every node from the data."""
        self._require_data()
        self._build(1, 0, self._size - 1)

    def _build(self, node, lo, hi):
        if lo == hi:
            self._nodes[node] = self._leaf(self._data[lo])
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid)
        self._build(2 * node + 1, mid + 1, hi)
        self._nodes[node] = self._combine(self._nodes[2 * node], self._nodes[2 * node + 1])

    def query(self, start=None, stop=None):
        """Combine the nodes of items ``start`` up to, not including, ``stop``."""
        if stop == 0:
            return self._zero
        self._require_data()
        left = 0 if start is None else start
        right = self._size - 1 if stop is None else stop - 1
        return self._query(1, left, right, 0, self._size - 1)

    def _query(self, node, left, right, lo, hi):
        if lo >= left and hi <= right:
            return self._nodes[node]
        if hi < left or lo > right:
            return self._zero
        mid = (lo + hi) // 2
        return self._combine(
            self._query(2 * node, left, right, lo, mid),
            self._query(2 * node + 1, left, right, mid + 1, hi),
        )

    def update_data(self, index, update):
        """Replace item ``index`` by ``update(item)`` and refresh its path."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        self._update(1, index, 0, self._size - 1, update)

    def _update(self, node, index, lo, hi, update):
        if lo == hi:
            self._data[lo] = update(self._data[lo])
            self._nodes[node] = self._leaf(self._data[lo])
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, index, lo, mid, update)
        else:
            self._update(2 * node + 1, index, mid + 1, hi, update)
        self._nodes[node] = self._combine(self._nodes[2 * node], self._nodes[2 * node + 1])