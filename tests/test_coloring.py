"""Tests for coloring conflict detection."""

import pytest

from py_fourcolor.core.adjacency import build_adjacency
from py_fourcolor.core.coloring import Area, AreaStatus, is_solved, update_area_statuses


@pytest.fixture
def pair(two_triangles):
    """Two areas sharing one edge."""
    areas = [Area(triangle=t) for t in two_triangles]
    for area, adjacents in zip(areas, build_adjacency(two_triangles)):
        area.adjacents = adjacents
    return areas


class TestConflicts:
    """Test per-area conflict flags."""

    @pytest.mark.parametrize("color", [0, 1, 2, 3])
    def test_same_color_conflicts(self, pair, color):
        """Test that equal colors mark both areas."""
        pair[0].color = color
        pair[1].color = color

        assert not update_area_statuses(pair)
        assert pair[0].in_conflict and pair[1].in_conflict
        assert pair[0].status == AreaStatus.NG

    def test_different_colors(self, pair):
        """Test that distinct colors solve the pair."""
        pair[0].color = 0
        pair[1].color = 3

        assert update_area_statuses(pair)
        assert not pair[0].in_conflict and not pair[1].in_conflict
        assert pair[0].status == AreaStatus.OK
        assert is_solved(pair)

    @pytest.mark.parametrize("colors", [(-1, 2), (2, -1), (-1, -1)])
    def test_uncolored_never_conflicts(self, pair, colors):
        """Test that an uncolored area is neither in conflict nor solved."""
        pair[0].color, pair[1].color = colors

        assert not update_area_statuses(pair)
        assert not pair[0].in_conflict and not pair[1].in_conflict
        assert not is_solved(pair)

    def test_statuses_follow_changes(self, pair):
        """Test that statuses are recomputed after recoloring."""
        pair[0].color = 1
        pair[1].color = 1
        update_area_statuses(pair)
        pair[1].color = 2

        assert update_area_statuses(pair)
        assert [a.status for a in pair] == [AreaStatus.OK, AreaStatus.OK]

    def test_color_cycle(self, pair):
        """Test -1 -> 0 -> 1 -> 2 -> 3 -> 0."""
        area = pair[0]
        seen = []
        for _ in range(5):
            area.color = area.next_color()
            seen.append(area.color)

        assert seen == [0, 1, 2, 3, 0]
