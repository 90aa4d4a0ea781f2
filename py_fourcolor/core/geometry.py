"""
Geometric primitives for the triangle mesh.

Points, segments and triangles plus the overlap and degeneracy tests the
mesh generator relies on. Vertices are compared with exact floating-point
equality: every coordinate is produced once by a construction formula and
then copied, never recomputed, so shared vertices are bit-identical.
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

# Segments whose direction cross product is below this are treated as parallel
PARALLEL_EPSILON = 1e-3

# Tolerance for interval overlap in the separating axis test
SAT_EPSILON = 1e-6


@dataclass(frozen=True)
class Point:
    """An immutable 2D point (or vector)."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, a: float) -> "Point":
        return Point(self.x * a, self.y * a)

    def __truediv__(self, a: float) -> "Point":
        # Dividing by zero raises ZeroDivisionError instead of yielding NaN
        return Point(self.x / a, self.y / a)

    def dot(self, other: "Point") -> float:
        """Inner product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Z component of the 3D cross product (twice the signed area)."""
        return self.x * other.y - self.y * other.x

    def rotate(self, theta: float) -> "Point":
        """Rotate counter-clockwise by ``theta`` radians."""
        c = math.cos(theta)
        s = math.sin(theta)
        return Point(c * self.x - s * self.y, s * self.x + c * self.y)

    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Point":
        return self / self.norm()

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class Line:
    """
    A segment between two points.

    Equality ignores direction, but the endpoint order is kept: ``end`` is
    the "far" endpoint used when ordering the reveal animation.
    """
    start: Point
    end: Point

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return (
            (self.start == other.start and self.end == other.end)
            or (self.start == other.end and self.end == other.start)
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.start, self.end)))

    def __iter__(self):
        yield self.start
        yield self.end

    @property
    def direction(self) -> Point:
        return self.end - self.start

    def cross(self, other: "Line") -> bool:
        """
        Check whether two segments intersect.

        Parallel or nearly parallel segments are reported as not crossing.
        Touching at an endpoint counts as crossing.
        """
        d1 = self.direction
        d2 = other.direction
        z = d1.cross(d2)
        if abs(z) < PARALLEL_EPSILON:
            return False

        v = other.start - self.start
        t1 = v.cross(d2) / z
        t2 = v.cross(d1) / z
        return 0 <= t1 <= 1 and 0 <= t2 <= 1

    def norm_sq(self) -> float:
        d = self.direction
        return d.x * d.x + d.y * d.y

    def distance_sq(self, p: Point) -> float:
        """Squared distance from ``p`` to the line through this segment."""
        d = self.direction
        z = d.x * (self.start.y - p.y) - d.y * (self.start.x - p.x)
        return z * z / self.norm_sq()


@dataclass(frozen=True, eq=False)
class Triangle:
    """
    Three points in order.

    Equality and hashing ignore vertex order. Edges are always taken
    consecutively: (a, b), (b, c), (c, a).
    """
    a: Point
    b: Point
    c: Point

    def __eq__(self, other) -> bool:
        if not isinstance(other, Triangle):
            return NotImplemented
        mine = self.vertices
        return all(v in mine for v in other.vertices) and all(
            v in other.vertices for v in mine
        )

    def __hash__(self) -> int:
        return hash(frozenset(self.vertices))

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, i: int) -> Point:
        return self.vertices[i]

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def edges(self) -> List[Line]:
        return [Line(self.a, self.b), Line(self.b, self.c), Line(self.c, self.a)]

    def has_vertex(self, p: Point) -> bool:
        return p == self.a or p == self.b or p == self.c

    def contains_line(self, line: Line) -> bool:
        """Check whether both endpoints of ``line`` are vertices of this triangle."""
        return self.has_vertex(line.start) and self.has_vertex(line.end)

    def shares_edge_with(self, other: "Triangle") -> bool:
        return any(self.contains_line(edge) for edge in other.edges())

    def opposite_vertex(self, line: Line) -> Point:
        """Return the vertex not on ``line``; ``line`` must be an edge of this triangle."""
        if not self.contains_line(line):
            raise ValueError("Line is not an edge of this triangle")
        for v in self.vertices:
            if v != line.start and v != line.end:
                return v
        raise ValueError("Triangle has repeated vertices")

    def signed_area(self) -> float:
        return (self.b - self.a).cross(self.c - self.a) / 2

    def covers(self, p: Point) -> bool:
        """
        Point-in-triangle test.

        True only when ``p`` is strictly on the same side of all three edges;
        points on an edge are not covered.
        """
        z0 = (self.a - self.b).cross(p - self.a)
        z1 = (self.b - self.c).cross(p - self.b)
        z2 = (self.c - self.a).cross(p - self.c)
        return (z0 > 0 and z1 > 0 and z2 > 0) or (z0 < 0 and z1 < 0 and z2 < 0)

    def separating_axes(self) -> List[Tuple[Point, Point]]:
        """Return (origin, normal) for each edge."""
        axes = []
        for edge in self.edges():
            d = edge.direction
            axes.append((edge.start, Point(-d.y, d.x)))
        return axes

    def collides_with(self, other: "Triangle") -> bool:
        """
        Separating axis test over the six edge normals.

        Projections are taken relative to the edge's start point so that
        both endpoints of the edge project to exactly zero; triangles that
        only touch along an edge or at a vertex do not collide.
        """
        for origin, normal in self.separating_axes() + other.separating_axes():
            p = [(v.x - origin.x) * normal.x + (v.y - origin.y) * normal.y for v in self.vertices]
            q = [(v.x - origin.x) * normal.x + (v.y - origin.y) * normal.y for v in other.vertices]
            if max(p) <= min(q) + SAT_EPSILON or max(q) <= min(p) + SAT_EPSILON:
                return False
        return True

    def is_degenerate(self) -> bool:
        return self.a == self.b or self.b == self.c or self.c == self.a or self.signed_area() == 0

    def has_min_angle(self, min_angle: float = math.pi / 6) -> bool:
        """Check that every interior angle is at least ``min_angle`` radians."""
        if self.is_degenerate():
            return False
        limit = math.cos(min_angle)
        vs = self.vertices
        for i in range(3):
            v1 = vs[(i + 1) % 3] - vs[i]
            v2 = vs[(i + 2) % 3] - vs[i]
            cos = v1.dot(v2) / v1.norm() / v2.norm()
            if cos > limit:
                return False
        return True
