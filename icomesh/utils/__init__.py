"""
Geometry utilities: polyhedron meshes and matrix transforms.
"""

from .icosphere import IcoSphere, build_icosphere, generate_icosphere
from .mesh import Mesh
from .polyhedra import SHAPES, build_cube, build_mesh
from .transforms import (
    identity,
    perspective,
    rotate,
    rotate_x,
    rotate_y,
    rotate_z,
    translate,
)

__all__ = [
    "IcoSphere",
    "build_icosphere",
    "generate_icosphere",
    "Mesh",
    "SHAPES",
    "build_cube",
    "build_mesh",
    "identity",
    "perspective",
    "rotate",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "translate",
]
