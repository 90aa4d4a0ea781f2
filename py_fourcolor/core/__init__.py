"""
Core mesh generation functionality.
"""

from .geometry import Point, Line, Triangle
from .mesh import Mesh
from .mesh_growth import GrowthConfig, MeshGrower, generate_mesh, default_seed_triangle
from .adjacency import build_adjacency
from .reveal_order import build_reveal_layers, RevealSchedule
from .coloring import Area, AreaStatus, update_area_statuses, is_solved
from .board import PuzzleBoard

__all__ = ['Point', 'Line', 'Triangle', 'Mesh',
           'GrowthConfig', 'MeshGrower', 'generate_mesh', 'default_seed_triangle',
           'build_adjacency', 'build_reveal_layers', 'RevealSchedule',
           'Area', 'AreaStatus', 'update_area_statuses', 'is_solved',
           'PuzzleBoard']
