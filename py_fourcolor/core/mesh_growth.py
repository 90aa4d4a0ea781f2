"""
Mesh growth engine.

Grows a mesh of non-overlapping triangles outward from a single seed
triangle. Each round extends the frontier edge nearest to the region
centre with a randomly angled new vertex, then fills the concave pockets
that extension left behind. Rounds that cannot make progress restart from
the seed, within a bounded backtrack budget.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import structlog

from .collision import collision_mask, collides_with_any, triangles_to_array
from .geometry import Line, Point, Triangle
from .mesh import Mesh, unique_edges

logger = structlog.get_logger()


@dataclass
class GrowthConfig:
    """
    Constants of the growth engine.

    Attributes:
        width: Region width
        height: Region height
        margin: Inset from every side that frontier edges must respect
        bottom_inset: Extra inset at the bottom, reserved for other UI
        clamp_margin: New vertices are clamped this far inside the region
        extension_length: Distance of a new vertex from the extended edge's start
        extension_retries: Random angles tried per frontier edge
        mean_angle: Mean rotation of a new vertex, radians
        angle_deviation: Standard deviation of that rotation, radians
        min_angle_degrees: Smallest interior angle any triangle may have
        max_triangles: Hard cap on the mesh size
        min_triangles: A mesh this large is accepted instead of backtracking
        max_backtracks: Restarts from the seed before giving up
    """
    width: float = 640.0
    height: float = 480.0
    margin: float = 50.0
    bottom_inset: float = 100.0
    clamp_margin: float = 5.0
    extension_length: float = 100.0
    extension_retries: int = 3
    mean_angle: float = math.pi / 3
    angle_deviation: float = math.pi / 4
    min_angle_degrees: float = 30.0
    max_triangles: int = 30
    min_triangles: int = 10
    max_backtracks: int = 200

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError("Invalid growth configuration: " + "; ".join(errors))

    @classmethod
    def from_settings(cls, settings) -> "GrowthConfig":
        return cls(
            width=float(settings.screen_width),
            height=float(settings.screen_height),
            max_triangles=settings.max_triangles,
            min_triangles=settings.min_triangles,
            max_backtracks=settings.max_backtracks,
        )

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.width <= 0 or self.height <= 0:
            errors.append(f"region must have positive size, got {self.width}x{self.height}")
        elif (self.width - 2 * self.margin <= 0
              or self.height - 2 * self.margin - self.bottom_inset <= 0):
            errors.append("region is smaller than its margins")

        if self.clamp_margin < 0:
            errors.append(f"clamp_margin cannot be negative, got {self.clamp_margin}")
        if self.extension_length <= 0:
            errors.append(f"extension_length must be positive, got {self.extension_length}")
        if self.extension_retries < 1:
            errors.append(f"extension_retries must be >= 1, got {self.extension_retries}")
        if not 0 < self.min_angle_degrees <= 60:
            errors.append(f"min_angle_degrees must be in (0, 60], got {self.min_angle_degrees}")
        if self.max_triangles < 1:
            errors.append(f"max_triangles must be >= 1, got {self.max_triangles}")
        if self.min_triangles > self.max_triangles:
            errors.append(
                f"min_triangles ({self.min_triangles}) exceeds max_triangles ({self.max_triangles})"
            )
        if self.max_backtracks < 0:
            errors.append(f"max_backtracks cannot be negative, got {self.max_backtracks}")

        return errors

    @property
    def min_angle(self) -> float:
        return math.radians(self.min_angle_degrees)

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    def contains(self, p: Point) -> bool:
        return 0 <= p.x <= self.width and 0 <= p.y <= self.height

    def in_growth_area(self, p: Point) -> bool:
        """Check whether an edge endpoint is far enough from the region border."""
        return (
            self.margin <= p.x <= self.width - self.margin
            and self.margin <= p.y <= self.height - self.margin - self.bottom_inset
        )

    def clamp(self, p: Point) -> Point:
        x = min(max(p.x, self.clamp_margin), self.width - self.clamp_margin)
        y = min(max(p.y, self.clamp_margin), self.height - self.clamp_margin)
        return Point(x, y)


def default_seed_triangle(width: float, height: float) -> Triangle:
    """The centred starting triangle used by the puzzle."""
    return Triangle(
        Point(width / 2, 2 * height / 5),
        Point(2 * width / 5, 3 * height / 5),
        Point(3 * width / 5, 3 * height / 5),
    )


def validate_seed_triangle(seed: Triangle, config: GrowthConfig) -> None:
    """Reject a seed the engine cannot grow from."""
    if seed.is_degenerate():
        raise ValueError(f"Seed triangle is degenerate: {seed}")
    if not seed.has_min_angle(config.min_angle):
        raise ValueError(
            f"Seed triangle has an interior angle below {config.min_angle_degrees} degrees"
        )
    for v in seed.vertices:
        if not config.contains(v):
            raise ValueError(f"Seed vertex {v} lies outside the {config.width}x{config.height} region")


class MeshGrower:
    """
    Grows a triangle mesh from a seed triangle.

    The random generator is owned by the caller and consumed sequentially,
    so a given seed always yields the same mesh.
    """

    def __init__(self, config: GrowthConfig, rng: np.random.Generator):
        """
        Initialize the grower.

        Args:
            config: Growth constants
            rng: Seeded random generator, shared with the caller
        """
        self.config = config
        self.rng = rng
        self.backtracks = 0

    def find_frontier_edges(self, triangles: List[Triangle]) -> List[Tuple[Line, Triangle]]:
        """
        Find edges that can be extended outward.

        An edge qualifies when exactly one triangle owns it and both of its
        endpoints are inside the growth area.

        Returns:
            (edge, owning triangle) pairs, nearest to the region centre first
        """
        candidates = []
        for edge in unique_edges(triangles):
            owners = [t for t in triangles if t.contains_line(edge)]
            if len(owners) != 1:
                continue
            if not (self.config.in_growth_area(edge.start) and self.config.in_growth_area(edge.end)):
                continue
            candidates.append((edge, owners[0]))

        center = self.config.center
        candidates.sort(key=lambda c: c[0].distance_sq(center))
        return candidates

    def extend_edge(self, triangles: List[Triangle], line: Line, pair: Triangle) -> Optional[Triangle]:
        """
        Propose a new triangle on the far side of a frontier edge.

        Draws one random angle. The new vertex is placed on the side of
        ``line`` opposite to ``pair``.

        Returns:
            The new triangle, or None if it overlaps the mesh or is a sliver
        """
        cfg = self.config
        v = line.direction
        opposite = pair.opposite_vertex(line)

        theta = cfg.mean_angle + cfg.angle_deviation * self.rng.standard_normal()
        if v.cross(opposite - line.start) > 0:
            theta = -theta

        new_point = cfg.clamp(line.start + v.rotate(theta) / v.norm() * cfg.extension_length)
        candidate = Triangle(line.start, line.end, new_point)

        if not candidate.has_min_angle(cfg.min_angle):
            return None
        if collides_with_any(candidate, triangles):
            return None
        return candidate

    def extend_frontier(self, triangles: List[Triangle]) -> Optional[Triangle]:
        """
        Try frontier edges in order until one can be extended.

        Returns:
            The new triangle, or None if every frontier edge failed
        """
        for line, pair in self.find_frontier_edges(triangles):
            for _ in range(self.config.extension_retries):
                triangle = self.extend_edge(triangles, line, pair)
                if triangle is not None:
                    return triangle
        return None

    @staticmethod
    def _pocket_candidate(e1: Line, e2: Line) -> Optional[Triangle]:
        """Triangle closing the wedge between two edges sharing one endpoint."""
        for s1, f1 in ((e1.start, e1.end), (e1.end, e1.start)):
            for s2, f2 in ((e2.start, e2.end), (e2.end, e2.start)):
                if s1 != s2 or f1 == f2:
                    continue
                # Only wedges of at most 90 degrees are closed
                if (f1 - s1).dot(f2 - s2) < 0:
                    return None
                return Triangle(s1, f1, f2)
        return None

    def fill_pockets(self, triangles: List[Triangle]) -> Optional[List[Triangle]]:
        """
        Close concave pockets using existing vertices only.

        Every pair of edges sharing exactly one vertex proposes the triangle
        that joins their free ends. Proposals duplicating or overlapping a
        mesh triangle (or an earlier proposal) are skipped.

        Returns:
            Proposed triangles in scan order, or None if a proposal was a
            sliver and this round's infill must be abandoned
        """
        min_angle = self.config.min_angle
        existing = set(triangles)
        considered = set()
        proposed: List[Triangle] = []
        occupied = triangles_to_array(triangles)

        edges = unique_edges(triangles)
        for i, e1 in enumerate(edges):
            for e2 in edges[i + 1:]:
                candidate = self._pocket_candidate(e1, e2)
                if candidate is None or candidate in considered:
                    continue
                considered.add(candidate)

                if candidate in existing:
                    continue
                if collision_mask(candidate, occupied).any():
                    continue
                if not candidate.has_min_angle(min_angle):
                    return None

                proposed.append(candidate)
                occupied = np.concatenate([occupied, triangles_to_array([candidate])])

        return proposed

    def grow(self, seed: Triangle) -> List[Triangle]:
        """
        Grow a mesh from ``seed``.

        Args:
            seed: Starting triangle, kept at index 0

        Returns:
            Triangles in insertion order, at most ``max_triangles`` of them
        """
        cfg = self.config
        validate_seed_triangle(seed, cfg)

        triangles = [seed]
        self.backtracks = 0

        while len(triangles) < cfg.max_triangles:
            if not self.find_frontier_edges(triangles):
                logger.info("No frontier edge left to extend", triangles=len(triangles))
                break

            extended = self.extend_frontier(triangles)
            if extended is not None:
                triangles.append(extended)
                pockets = self.fill_pockets(triangles)
                if pockets is not None:
                    room = cfg.max_triangles - len(triangles)
                    triangles.extend(pockets[:room])
                    continue

            if len(triangles) >= cfg.min_triangles:
                logger.debug("Growth stalled, accepting mesh", triangles=len(triangles))
                break
            if self.backtracks >= cfg.max_backtracks:
                logger.warning(
                    "Backtrack budget exhausted", triangles=len(triangles), backtracks=self.backtracks
                )
                break

            self.backtracks += 1
            logger.debug("Backtracking to seed triangle", discarded=len(triangles) - 1,
                         backtracks=self.backtracks)
            triangles = triangles[:1]

        return triangles


def generate_mesh(seed: Triangle, config: GrowthConfig, rng: np.random.Generator) -> Mesh:
    """
    Generate a mesh from a seed triangle.

    Args:
        seed: Starting triangle
        config: Growth constants
        rng: Seeded random generator

    Returns:
        Mesh whose first triangle is ``seed``
    """
    grower = MeshGrower(config, rng)
    triangles = grower.grow(seed)
    logger.info("Mesh generated", triangles=len(triangles), backtracks=grower.backtracks)
    return Mesh(triangles)
