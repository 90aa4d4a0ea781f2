"""
Edge reveal ordering.

Orders the mesh edges into breadth-first layers spreading out from the
seed triangle, and schedules those layers for a line-drawing animation
that reveals one layer per fixed number of ticks.
"""

from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

from .geometry import Line, Triangle


def build_reveal_layers(triangles: Sequence[Triangle]) -> List[List[Line]]:
    """
    Layer the mesh edges outward from the seed triangle.

    Layer 0 holds the seed's three edges. Each following layer holds, for
    every triangle vertex that is the far endpoint of an edge in the
    previous layer, the two triangle edges leaving that vertex which are
    not already placed. New edges start at that vertex, so their far
    endpoint is the other one.

    Args:
        triangles: Mesh triangles, seed first

    Returns:
        Edge layers; every mesh edge of a connected mesh appears exactly once
    """
    if not triangles:
        return []

    layers: List[List[Line]] = [list(triangles[0].edges())]
    placed: Set[Line] = set(layers[0])

    while True:
        previous = layers[-1]
        new_lines: List[Line] = []
        for t in triangles:
            vs = t.vertices
            for i in range(3):
                for line in previous:
                    if line.end != vs[i]:
                        continue
                    for edge in (Line(vs[i], vs[(i + 1) % 3]), Line(vs[i], vs[(i + 2) % 3])):
                        if edge not in placed:
                            placed.add(edge)
                            new_lines.append(edge)
        if not new_lines:
            break
        layers.append(new_lines)

    return layers


@dataclass
class RevealSchedule:
    """
    Timing of the progressive line reveal.

    Layer k is drawn during ticks [k * ticks_per_layer, (k + 1) * ticks_per_layer).
    """
    layers: List[List[Line]]
    ticks_per_layer: int = 60

    def __post_init__(self):
        if self.ticks_per_layer < 1:
            raise ValueError(f"ticks_per_layer must be >= 1, got {self.ticks_per_layer}")

    @property
    def total_ticks(self) -> int:
        return len(self.layers) * self.ticks_per_layer

    def is_complete(self, tick: int) -> bool:
        return tick >= self.total_ticks

    def segments_at(self, tick: int) -> List[Tuple[Line, bool]]:
        """
        Segments visible at ``tick``.

        Returns:
            (segment, finished) pairs. Lines of completed layers are returned
            whole; lines of the current layer are cut short, growing from
            their start point towards their far endpoint.
        """
        index = min(tick // self.ticks_per_layer, len(self.layers))
        segments = [(line, True) for layer in self.layers[:index] for line in layer]
        if index < len(self.layers):
            fraction = (tick % self.ticks_per_layer) / self.ticks_per_layer
            for line in self.layers[index]:
                tip = line.start + line.direction * fraction
                segments.append((Line(line.start, tip), False))
        return segments
