"""A small bit set of integers with whole-set XOR translation."""

_CAPACITY = 72 * 8
_MAX_VALUE = 512


class XorSet:
    """Set of integers in ``0 .. 575``; iteration covers ``0 .. 512`` in order."""

    def __init__(self, values=()):
        self._bits = 0
        for value in values:
            self.add(value)

    @classmethod
    def _from_bits(cls, bits):
        result = cls()
        result._bits = bits
        return result

    def union(self, other):
        """Return a new set holding the members of both sets."""
        return XorSet._from_bits(self._bits | other._bits)

    def range_add(self, value):
        """Return a new set of every iterated member XOR ``value``."""
        return XorSet(x ^ value for x in self)

    def add(self, value):
        """Insert ``value`` into the set."""
        if not 0 <= value < _CAPACITY:
            raise ValueError(f"value {value} outside 0..{_CAPACITY - 1}")
        self._bits |= 1 << value

    def __contains__(self, value):
        if not 0 <= value < _CAPACITY:
            raise ValueError(f"value {value} outside 0..{_CAPACITY - 1}")
        return bool(self._bits >> value & 1)

    def __iter__(self):
        bits = self._bits
        return (v for v in range(_MAX_VALUE + 1) if bits >> v & 1)

    def __eq__(self, other):
        if not isinstance(other, XorSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self):
        return hash(self._bits)

    def __repr__(self):
        return f"XorSet({list(self)})"