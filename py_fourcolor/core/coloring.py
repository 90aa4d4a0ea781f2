"""Map coloring state and conflict detection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from .geometry import Triangle

UNCOLORED = -1
NUM_COLORS = 4


class AreaStatus(Enum):
    """Coloring state of one area."""
    INITIAL = 0  # Not colored yet
    OK = 1       # Colored, no neighbour shares the color
    NG = 2       # Colored the same as a neighbour


@dataclass
class Area:
    """A mesh face the player colors."""
    triangle: Triangle
    color: int = UNCOLORED
    adjacents: List[int] = field(default_factory=list)  # indices into the area list
    status: AreaStatus = AreaStatus.INITIAL

    @property
    def is_colored(self) -> bool:
        return self.color != UNCOLORED

    @property
    def in_conflict(self) -> bool:
        return self.status == AreaStatus.NG

    def next_color(self) -> int:
        """Color after this one in the cycle 0 -> 1 -> 2 -> 3 -> 0 (uncolored goes to 0)."""
        return (self.color + 1) % NUM_COLORS


def has_conflict(areas: Sequence[Area], index: int) -> bool:
    """Check whether area ``index`` shares its color with an adjacent area."""
    area = areas[index]
    if not area.is_colored:
        return False
    return any(areas[j].color == area.color for j in area.adjacents)


def update_area_statuses(areas: Sequence[Area]) -> bool:
    """
    Recompute every area's status from the current colors.

    Returns:
        True when every area is colored and none conflicts
    """
    solved = True
    for i, area in enumerate(areas):
        if not area.is_colored:
            area.status = AreaStatus.INITIAL
        elif has_conflict(areas, i):
            area.status = AreaStatus.NG
        else:
            area.status = AreaStatus.OK
        if area.status != AreaStatus.OK:
            solved = False
    return solved


def is_solved(areas: Sequence[Area]) -> bool:
    """Check the coloring without touching the stored statuses."""
    return all(area.is_colored and not has_conflict(areas, i) for i, area in enumerate(areas))
