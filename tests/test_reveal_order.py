"""Tests for edge reveal ordering and its animation schedule."""

import pytest

from py_fourcolor.core.geometry import Line, Point
from py_fourcolor.core.reveal_order import RevealSchedule, build_reveal_layers


class TestBuildRevealLayers:
    """Test breadth-first edge layering."""

    def test_seed_only(self, seed_triangle):
        """Test that a lone seed gives exactly its three edges."""
        layers = build_reveal_layers([seed_triangle])

        assert layers == [seed_triangle.edges()]

    def test_empty(self):
        """Test that no triangles gives no layers."""
        assert build_reveal_layers([]) == []

    def test_two_triangles(self, two_triangles):
        """Test the second layer and the direction of its edges."""
        a, b, c = two_triangles[0].vertices
        d = two_triangles[1].c

        layers = build_reveal_layers(two_triangles)

        assert len(layers) == 2
        assert layers[1] == [Line(b, d), Line(c, d)]
        assert [line.end for line in layers[1]] == [d, d]

    def test_completeness_on_generated_mesh(self, generated_mesh):
        """Test that every mesh edge appears in exactly one layer."""
        layers = build_reveal_layers(generated_mesh.triangles)
        placed = [line for layer in layers for line in layer]

        assert layers[0] == generated_mesh.seed.edges()
        assert len(placed) == len(set(placed))
        assert set(placed) == set(generated_mesh.edges())
        assert all(layer for layer in layers)

    def test_deterministic(self, generated_mesh):
        """Test that layering twice gives the same order."""
        first = build_reveal_layers(generated_mesh.triangles)
        second = build_reveal_layers(generated_mesh.triangles)

        assert [[(l.start, l.end) for l in layer] for layer in first] == \
            [[(l.start, l.end) for l in layer] for layer in second]


class TestRevealSchedule:
    """Test tick-based reveal timing."""

    @pytest.fixture
    def schedule(self, two_triangles):
        return RevealSchedule(build_reveal_layers(two_triangles), ticks_per_layer=60)

    def test_total_ticks(self, schedule):
        """Test animation length."""
        assert schedule.total_ticks == 120
        assert not schedule.is_complete(119)
        assert schedule.is_complete(120)

    def test_start(self, schedule):
        """Test that nothing is drawn at tick zero."""
        segments = schedule.segments_at(0)

        assert len(segments) == 3
        assert all(not finished for _, finished in segments)
        assert all(line.start == line.end for line, _ in segments)

    def test_partial_layer(self, schedule, two_triangles):
        """Test half-drawn second layer."""
        b = two_triangles[0].b
        segments = schedule.segments_at(90)
        finished = [line for line, done in segments if done]
        partial = [line for line, done in segments if not done]

        assert len(finished) == 3
        assert len(partial) == 2
        assert partial[0].start == b
        assert partial[0].end.x == pytest.approx(288.0)
        assert partial[0].end.y == pytest.approx(336.0)

    def test_finished(self, schedule):
        """Test that every line is whole once the animation ends."""
        segments = schedule.segments_at(1000)

        assert len(segments) == 5
        assert all(finished for _, finished in segments)

    def test_invalid_ticks(self):
        """Test that a zero layer duration is rejected."""
        with pytest.raises(ValueError):
            RevealSchedule([], ticks_per_layer=0)
