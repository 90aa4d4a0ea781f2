"""Shared fixtures for mesh generation tests."""

import pytest

from py_fourcolor.core.geometry import Point, Triangle
from py_fourcolor.core.mesh_growth import GrowthConfig, default_seed_triangle, generate_mesh
from py_fourcolor.utils.random import create_rng

MESH_SEEDS = [1, 7, 42, 20230214]


@pytest.fixture
def growth_config():
    """Default 640x480 growth configuration."""
    return GrowthConfig()


@pytest.fixture
def seed_triangle():
    """Seed triangle of the default region."""
    return default_seed_triangle(640, 480)


@pytest.fixture
def two_triangles(seed_triangle):
    """The seed plus one triangle sharing its bottom edge."""
    a, b, c = seed_triangle.vertices
    return [seed_triangle, Triangle(b, c, Point(320.0, 384.0))]


@pytest.fixture(scope="session", params=MESH_SEEDS)
def generated_mesh(request):
    """A full-size mesh for each test seed, generated once per session."""
    config = GrowthConfig()
    return generate_mesh(default_seed_triangle(config.width, config.height), config,
                         create_rng(request.param))
