"""Integer plane geometry: orientation tests, convex hull and hull width."""

import math
import sys
from dataclasses import dataclass
from enum import Enum


class PointOrientation(Enum):
    """Which way a path turns at its middle point."""

    LEFT = "left"
    RIGHT = "right"
    STRAIGHT = "straight"


@dataclass(frozen=True, order=True, repr=False)
class Point:
    """A point with integer coordinates, ordered by ``x`` and then ``y``."""

    x: int
    y: int

    def __repr__(self):
        return f"({self.x}, {self.y})"

    @staticmethod
    def cross_product(a, b, c, d):
        """Return the cross product of the vectors AB and CD."""
        return (b.x - a.x) * (d.y - c.y) - (b.y - a.y) * (d.x - c.x)

    def distance_to_edge(self, edge_l, edge_r):
        """Return the distance from this point to the line through the edge."""
        area = abs(Point.cross_product(self, edge_l, self, edge_r))
        length = Point.distance(edge_l, edge_r)
        if length == 0:
            return math.nan if area == 0 else math.inf
        return area / length

    @staticmethod
    def orientation(a, b, c):
        """Return the turn made by the path ``a -> b -> c``."""
        turn = Point.cross_product(b, a, b, c)
        if turn < 0:
            return PointOrientation.LEFT
        if turn > 0:
            return PointOrientation.RIGHT
        return PointOrientation.STRAIGHT

    @staticmethod
    def distance_sqr(lhs, rhs):
        """Return the squared Euclidean distance between two points."""
        return (lhs.x - rhs.x) ** 2 + (lhs.y - rhs.y) ** 2

    @staticmethod
    def distance(lhs, rhs):
        """Return the Euclidean distance between two points."""
        return math.sqrt(Point.distance_sqr(lhs, rhs))


def _min_float(current, candidate):
    return candidate if candidate < current else current


def diameter(convex_hull):
    """Return the smallest width of a convex polygon given by its hull.

    Fewer than two points give 0.0, two points give their distance.
    """
    hull = list(convex_hull)
    size = len(hull)
    if size < 2:
        return 0.0
    if size == 2:
        return Point.distance(hull[0], hull[1])

    left = 0
    right = start_right = max(reversed(range(size)), key=hull.__getitem__)
    best = sys.float_info.max

    while True:
        next_left = (left + 1) % size
        next_right = (right + 1) % size
        turn = Point.cross_product(hull[left], hull[next_left], hull[right], hull[next_right])
        if turn < 0:
            best = _min_float(best, hull[right].distance_to_edge(hull[left], hull[next_left]))
            left = next_left
        else:
            best = _min_float(best, hull[left].distance_to_edge(hull[right], hull[next_right]))
            right = next_right
        if left == 0 and right == start_right:
            return best


def _chain(ordered, indices, discard):
    chain = []
    for nxt in indices:
        while (
            len(chain) >= 2
            and Point.orientation(ordered[chain[-2]], ordered[chain[-1]], ordered[nxt]) is discard
        ):
            chain.pop()
        chain.append(nxt)
    return chain


def convex_hull(points):
    """Return the convex hull of the points, collinear boundary points included.

    Three points or fewer are returned as given.
    """
    points = list(points)
    if len(points) <= 3:
        return points
    ordered = sorted(points)
    count = len(ordered)
    ends = (0, count - 1)

    side = {i: True for i in _chain(ordered, range(count), PointOrientation.RIGHT)}
    upper_candidates = [i for i in range(count) if i not in side or i in ends]
    for i in _chain(ordered, upper_candidates, PointOrientation.LEFT):
        side.setdefault(i, False)

    forward = [ordered[i] for i in range(count) if side.get(i) is True]
    backward = [ordered[i] for i in reversed(range(count)) if side.get(i) is False]
    return forward + backward