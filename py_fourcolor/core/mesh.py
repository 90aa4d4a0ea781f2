"""Mesh container and edge/vertex bookkeeping."""

from dataclasses import dataclass
from typing import Dict, List, Sequence

import numpy as np

from .geometry import Line, Point, Triangle


def unique_edges(triangles: Sequence[Triangle]) -> List[Line]:
    """
    Collect every edge of the mesh once.

    Edges keep the orientation of the first triangle they were seen in,
    and are returned in first-seen order.
    """
    seen = set()
    edges = []
    for t in triangles:
        for edge in t.edges():
            if edge not in seen:
                seen.add(edge)
                edges.append(edge)
    return edges


def unique_vertices(triangles: Sequence[Triangle]) -> List[Point]:
    seen = set()
    vertices = []
    for t in triangles:
        for v in t.vertices:
            if v not in seen:
                seen.add(v)
                vertices.append(v)
    return vertices


@dataclass
class Mesh:
    """
    Ordered triangles produced by the growth engine.

    The first triangle is always the seed. Geometry never changes after
    construction.
    """
    triangles: List[Triangle]

    def __post_init__(self):
        if not self.triangles:
            raise ValueError("A mesh needs at least the seed triangle")

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self):
        return iter(self.triangles)

    def __getitem__(self, i: int) -> Triangle:
        return self.triangles[i]

    @property
    def seed(self) -> Triangle:
        return self.triangles[0]

    def edges(self) -> List[Line]:
        return unique_edges(self.triangles)

    def vertices(self) -> List[Point]:
        return unique_vertices(self.triangles)

    def vertex_array(self) -> np.ndarray:
        """Unique vertex coordinates, shape (V, 2), in first-seen order."""
        return np.array([v.to_tuple() for v in self.vertices()], dtype=np.float64)

    def face_indices(self) -> np.ndarray:
        """Vertex indices of each triangle, shape (T, 3), matching ``vertex_array``."""
        index: Dict[Point, int] = {v: i for i, v in enumerate(self.vertices())}
        return np.array(
            [[index[v] for v in t.vertices] for t in self.triangles], dtype=np.int64
        )
