"""Disjoint-set union with a single level of save and restore."""

from dataclasses import dataclass


@dataclass(frozen=True)
class _Version:
    draft: bool
    number: int


class DSUR:
    """Disjoint sets whose changes after ``save`` can be undone by ``restore``.

    Every set is represented by its smallest element.
    """

    def __init__(self, size):
        self._init(list(range(size)))

    def _init(self, current):
        size = len(current)
        self._current = current
        self._draft = list(range(size))
        self._versions = [_Version(False, 0)] * size
        self._version = _Version(False, 0)

    def __len__(self):
        return len(self._current)

    def clone_current(self):
        """Return a new, unsaved structure holding the present partition."""
        clone = DSUR.__new__(DSUR)
        clone._init([self.find(x) for x in range(len(self))])
        return clone

    def save(self):
        """Start recording changes that ``restore`` can discard."""
        if self._version.draft:
            raise RuntimeError("DSU is already saved")
        self._version = _Version(True, self._version.number + 1)

    def restore(self):
        """Discard every change made since ``save``."""
        if not self._version.draft:
            raise RuntimeError("DSU isn't backed up")
        self._version = _Version(False, self._version.number)

    def _get(self, x):
        if self._version.draft and self._versions[x] == self._version:
            return self._draft[x]
        return self._current[x]

    def _set(self, x, value):
        if self._version.draft:
            self._versions[x] = self._version
            self._draft[x] = value
        else:
            self._current[x] = value
        return value

    def find(self, x):
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self):
            raise IndexError(f"element {x} out of range")
        node = x
        while True:
            parent = self._get(node)
            if parent == node:
                return self._set(x, parent)
            node = parent

    def union(self, a, b):
        """Merge the sets holding ``a`` and ``b``."""
        a = self.find(a)
        b = self.find(b)
        if a < b:
            self._set(b, a)
        elif a > b:
            self._set(a, b)