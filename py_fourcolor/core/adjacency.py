"""Face adjacency of a triangle mesh."""

from typing import List, Sequence

from .geometry import Triangle


def build_adjacency(triangles: Sequence[Triangle]) -> List[List[int]]:
    """
    Find the neighbours of every triangle.

    Two triangles are adjacent when they share a full edge; sharing a
    single vertex is not enough. Neighbours are stored as indices into
    ``triangles`` so no face holds a reference to another.

    Args:
        triangles: Mesh triangles in order

    Returns:
        adjacency[i] = ascending indices of the triangles adjacent to i
    """
    adjacency: List[List[int]] = [[] for _ in triangles]
    for i, a in enumerate(triangles):
        for j, b in enumerate(triangles):
            if i == j or a == b:
                continue
            if a.shares_edge_with(b):
                adjacency[i].append(j)
    return adjacency
