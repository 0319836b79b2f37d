"""
icomesh: Procedural polyhedron meshes and 4x4 matrix transforms for a spinning scene
"""

from .core import SpinningScene
from .utils import Mesh, build_cube, build_icosphere, build_mesh

__all__ = [
    "SpinningScene",
    "Mesh",
    "build_cube",
    "build_icosphere",
    "build_mesh",
]
