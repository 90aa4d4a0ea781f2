"""
Puzzle board.

Ties the generation pipeline together for one play session: grows the
mesh, turns every triangle into a colorable area with its neighbours,
orders the edges for the opening animation, and handles the per-step
operations (tap to cycle a color, check whether the map is solved).
"""

from typing import List, Optional, Sequence

import structlog

from ..config.settings import Settings
from ..logging_config import configure_logging
from ..utils.random import create_rng, resolve_seed
from .adjacency import build_adjacency
from .coloring import NUM_COLORS, UNCOLORED, Area, update_area_statuses
from .geometry import Line, Point, Triangle
from .mesh import Mesh
from .mesh_growth import GrowthConfig, default_seed_triangle, generate_mesh
from .reveal_order import RevealSchedule, build_reveal_layers

logger = structlog.get_logger()


class PuzzleBoard:
    """Areas, adjacency and reveal order of one generated map."""

    def __init__(self, triangles: Sequence[Triangle], seed: Optional[int] = None,
                 ticks_per_layer: int = 60):
        """
        Build a board from finished mesh triangles.

        Args:
            triangles: Mesh triangles, seed triangle first
            seed: Random seed the mesh was generated from, if any
            ticks_per_layer: Animation ticks spent on each reveal layer
        """
        self.mesh = Mesh(list(triangles))
        self.seed = seed
        self.areas: List[Area] = [Area(triangle=t) for t in self.mesh]
        for area, adjacents in zip(self.areas, build_adjacency(self.mesh.triangles)):
            area.adjacents = adjacents
        self.reveal_layers: List[List[Line]] = build_reveal_layers(self.mesh.triangles)
        self.reveal = RevealSchedule(self.reveal_layers, ticks_per_layer)
        self.solved = False

    @classmethod
    def generate(cls, settings: Optional[Settings] = None, seed: Optional[int] = None) -> "PuzzleBoard":
        """
        Generate a new board.

        Args:
            settings: Settings to use; read from the environment when omitted
            seed: Random seed overriding ``settings.random_seed``

        Returns:
            A freshly generated board with every area uncolored
        """
        if settings is None:
            settings = Settings()
        configure_logging(settings.log_level, settings.log_format)
        if seed is None:
            seed = resolve_seed(settings.random_seed)

        config = GrowthConfig.from_settings(settings)
        rng = create_rng(seed)
        logger.info("Generating board", seed=seed, width=config.width, height=config.height)

        mesh = generate_mesh(default_seed_triangle(config.width, config.height), config, rng)
        board = cls(mesh.triangles, seed=seed, ticks_per_layer=settings.reveal_ticks_per_layer)
        logger.info("Board ready", seed=seed, areas=len(board.areas), layers=len(board.reveal_layers))
        return board

    @property
    def triangles(self) -> List[Triangle]:
        return self.mesh.triangles

    def area_at(self, point: Point) -> Optional[int]:
        """Index of the first area covering ``point``, or None."""
        for i, area in enumerate(self.areas):
            if area.triangle.covers(point):
                return i
        return None

    def set_color(self, index: int, color: int) -> None:
        if not 0 <= index < len(self.areas):
            raise IndexError(f"No area with index {index}")
        if color != UNCOLORED and not 0 <= color < NUM_COLORS:
            raise ValueError(f"Color must be {UNCOLORED} or 0..{NUM_COLORS - 1}, got {color}")
        self.areas[index].color = color
        self.evaluate()

    def tap(self, point: Point) -> Optional[int]:
        """
        Advance the color of the area under ``point``.

        Returns:
            Index of the recolored area, or None if the tap hit nothing
        """
        index = self.area_at(point)
        if index is None:
            return None
        area = self.areas[index]
        area.color = area.next_color()
        self.evaluate()
        return index

    def evaluate(self) -> bool:
        """Refresh area statuses and return whether the map is solved."""
        solved = update_area_statuses(self.areas)
        if solved and not self.solved:
            logger.info("Board solved", seed=self.seed, areas=len(self.areas))
        self.solved = solved
        return solved

    def conflicts(self) -> List[bool]:
        """Per-area conflict flags."""
        return [area.in_conflict for area in self.areas]

    def reset_colors(self) -> None:
        for area in self.areas:
            area.color = UNCOLORED
        self.evaluate()
