"""
Vectorized overlap tests.

The growth engine checks every candidate triangle against the whole mesh,
so the separating axis test is batched with NumPy here. Results match
``Triangle.collides_with`` exactly: the same projection formula and the
same tolerance are used.
"""

from typing import Sequence

import numpy as np

from .geometry import SAT_EPSILON, Triangle


def triangles_to_array(triangles: Sequence[Triangle]) -> np.ndarray:
    """
    Convert triangles to an array of shape (n, 3, 2).

    Args:
        triangles: Triangles in mesh order

    Returns:
        float64 array of vertex coordinates
    """
    if len(triangles) == 0:
        return np.zeros((0, 3, 2), dtype=np.float64)
    return np.array(
        [[[v.x, v.y] for v in t.vertices] for t in triangles], dtype=np.float64
    )


def _edge_axes(tris: np.ndarray):
    """Return (origins, normals) of shape (..., 3, 2) for each edge."""
    origins = tris
    directions = np.roll(tris, -1, axis=-2) - tris
    normals = np.stack([-directions[..., 1], directions[..., 0]], axis=-1)
    return origins, normals


def _project(points: np.ndarray, origins: np.ndarray, normals: np.ndarray) -> np.ndarray:
    """Project points (..., 3 vertices, 2) onto axes (..., 3 axes, 2) -> (..., 3 axes, 3 vertices)."""
    rel = points[..., None, :, :] - origins[..., :, None, :]
    return rel[..., 0] * normals[..., :, None, 0] + rel[..., 1] * normals[..., :, None, 1]


def _separated(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    """Per-axis interval separation for projections shaped (..., axes, 3)."""
    return (p.max(axis=-1) <= q.min(axis=-1) + SAT_EPSILON) | (
        q.max(axis=-1) <= p.min(axis=-1) + SAT_EPSILON
    )


def collision_mask(candidate: Triangle, mesh: np.ndarray) -> np.ndarray:
    """
    Separating axis test of one triangle against many.

    Args:
        candidate: Triangle to test
        mesh: Array of shape (n, 3, 2) from ``triangles_to_array``

    Returns:
        Boolean array of shape (n,), True where the interiors overlap
    """
    n = mesh.shape[0]
    if n == 0:
        return np.zeros(0, dtype=bool)

    cand = triangles_to_array([candidate])[0]

    # Axes taken from the existing triangles' edges
    origins, normals = _edge_axes(mesh)
    p_mesh = _project(mesh, origins, normals)
    p_cand = _project(np.broadcast_to(cand, mesh.shape), origins, normals)
    sep_mesh_axes = _separated(p_cand, p_mesh).any(axis=-1)

    # Axes taken from the candidate's edges
    c_origins, c_normals = _edge_axes(cand)
    q_cand = _project(cand, c_origins, c_normals)
    q_mesh = _project(mesh, np.broadcast_to(c_origins, mesh.shape), np.broadcast_to(c_normals, mesh.shape))
    sep_cand_axes = _separated(np.broadcast_to(q_cand, q_mesh.shape), q_mesh).any(axis=-1)

    return ~(sep_mesh_axes | sep_cand_axes)


def collides_with_any(candidate: Triangle, triangles: Sequence[Triangle]) -> bool:
    """Check whether ``candidate`` overlaps any of ``triangles``."""
    return bool(collision_mask(candidate, triangles_to_array(triangles)).any())
