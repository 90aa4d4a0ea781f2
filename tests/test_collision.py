"""Tests for the vectorized separating axis test."""

import numpy as np
import pytest

from py_fourcolor.core.collision import collides_with_any, collision_mask, triangles_to_array
from py_fourcolor.core.geometry import Point, Triangle


def _random_triangles(rng, n):
    coords = rng.uniform(0, 100, size=(n, 3, 2))
    return [Triangle(*(Point(float(x), float(y)) for x, y in tri)) for tri in coords]


class TestTrianglesToArray:
    """Test conversion of triangles to arrays."""

    def test_shape(self):
        """Test array layout (n, 3, 2)."""
        t = Triangle(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 2.0))
        arr = triangles_to_array([t, t])

        assert arr.shape == (2, 3, 2)
        np.testing.assert_array_equal(arr[0], [[0, 0], [1, 0], [0, 2]])

    def test_empty(self):
        """Test that no triangles gives an empty array and no collisions."""
        t = Triangle(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 2.0))

        assert triangles_to_array([]).shape == (0, 3, 2)
        assert collision_mask(t, triangles_to_array([])).shape == (0,)
        assert not collides_with_any(t, [])


class TestCollisionMask:
    """Test agreement with the pairwise test."""

    def test_matches_pairwise_on_random_triangles(self):
        """Test the batched result against Triangle.collides_with."""
        rng = np.random.default_rng(1234)
        mesh = _random_triangles(rng, 60)
        arr = triangles_to_array(mesh)

        for candidate in _random_triangles(rng, 40):
            expected = [candidate.collides_with(t) for t in mesh]
            np.testing.assert_array_equal(collision_mask(candidate, arr), expected)

    def test_touching_triangles(self):
        """Test shared edges and vertices in a batch."""
        a, b, c = Point(0.0, 0.0), Point(10.0, 0.0), Point(0.0, 10.0)
        base = Triangle(a, b, c)
        mesh = [
            Triangle(c, b, Point(10.0, 10.0)),              # shares an edge
            Triangle(b, Point(20.0, 0.0), Point(15.0, -5.0)),  # shares a vertex
            Triangle(Point(2.0, 2.0), Point(12.0, 2.0), Point(2.0, 12.0)),  # overlaps
            Triangle(a, b, c),                              # identical
        ]

        mask = collision_mask(base, triangles_to_array(mesh))

        assert mask.tolist() == [False, False, True, True]
        assert collides_with_any(base, mesh)
        assert not collides_with_any(base, mesh[:2])
