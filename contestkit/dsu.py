"""Disjoint-set union with union by rank and component sizes."""


class DSU:
    """Disjoint sets over the elements ``0 .. size - 1``."""

    def __init__(self, size):
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size

    def __len__(self):
        return len(self._parent)

    def _check(self, index):
        if not 0 <= index < len(self._parent):
            raise IndexError(f"element {index} out of range")

    def find(self, index):
        """Return the representative of the set holding ``index``."""
        return self.find_with_size(index)[0]

    def find_with_size(self, index):
        """Return the representative and the size of the set holding ``index``."""
        self._check(index)
        node = index
        while self._parent[node] != node:
            node = self._parent[node]
        self._parent[index] = node
        return node, self._size[node]

    def union(self, lhs, rhs):
        """Merge the sets of ``lhs`` and ``rhs``; return the new representative."""
        left = self.find(lhs)
        right = self.find(rhs)
        if left == right:
            return left

        total = self._size[left] + self._size[right]
        self._size[right] = total
        self._size[left] = total

        if self._rank[left] > self._rank[right]:
            self._parent[right] = left
            return left
        if self._rank[left] == self._rank[right]:
            self._rank[right] += 1
        self._parent[left] = right
        return right