"""
Fixed polyhedra and shape selection.
"""

import logging

import torch

from .icosphere import build_icosphere, check_quality
from .mesh import Mesh

logger = logging.getLogger(__name__)

# Face order of the cube's triangle pairs: triangles 2k and 2k + 1 form face k
CUBE_FACE_NAMES = ("front", "back", "top", "bottom", "right", "left")

CUBE_VERTICES = [
    # Front (z = +1)
    [-1.0, -1.0, 1.0],
    [1.0, -1.0, 1.0],
    [1.0, 1.0, 1.0],
    [-1.0, 1.0, 1.0],
    # Back (z = -1)
    [-1.0, -1.0, -1.0],
    [-1.0, 1.0, -1.0],
    [1.0, 1.0, -1.0],
    [1.0, -1.0, -1.0],
]

# Corners of each face in its local 0..3 numbering, counter-clockwise seen from outside
CUBE_FACE_CORNERS = [
    (0, 1, 2, 3),  # front
    (4, 5, 6, 7),  # back
    (3, 2, 6, 5),  # top
    (0, 4, 7, 1),  # bottom
    (1, 7, 6, 2),  # right
    (0, 3, 5, 4),  # left
]

# Local triangle split per face; the back face lists its two triangles swapped
CUBE_FACE_SPLITS = [
    ((0, 1, 2), (0, 2, 3)),
    ((0, 2, 3), (0, 1, 2)),
    ((0, 1, 2), (0, 2, 3)),
    ((0, 1, 2), (0, 2, 3)),
    ((0, 1, 2), (0, 2, 3)),
    ((0, 1, 2), (0, 2, 3)),
]


def _cube_faces():
    faces = []
    for corners, split in zip(CUBE_FACE_CORNERS, CUBE_FACE_SPLITS):
        for tri in split:
            faces.append([corners[i] for i in tri])
    return faces


def build_cube(device=None):
    """
    Build the 8-vertex, 12-triangle cube spanning [-1, 1] on every axis.

    Args:
        device: PyTorch device

    Returns:
        Mesh: Cube mesh with triangles grouped per face in CUBE_FACE_NAMES order
    """
    verts = torch.tensor(CUBE_VERTICES, dtype=torch.float32, device=device)
    faces = torch.tensor(_cube_faces(), dtype=torch.long, device=device)
    return Mesh(verts, faces)


def _build_cube_shape(quality, device=None):
    # The cube is never subdivided; quality is still validated
    check_quality(quality)
    return build_cube(device=device)


SHAPES = {
    "icosphere": build_icosphere,
    "cube": _build_cube_shape,
}


def build_mesh(shape, quality=0, device=None):
    """
    Build the mesh for a shape selection.

    Args:
        shape: Name of a registered shape (see SHAPES)
        quality: Subdivision depth, ignored by shapes that do not subdivide
        device: PyTorch device

    Returns:
        Mesh: A freshly built mesh

    Raises:
        ValueError: If shape is unknown or quality is negative
        TypeError: If quality is not an integer
    """
    if shape not in SHAPES:
        raise ValueError(f"Unknown shape {shape!r}, expected one of {sorted(SHAPES)}")
    mesh = SHAPES[shape](quality, device=device)
    logger.info(
        "Built %s (quality %s): %d vertices, %d triangles",
        shape,
        quality,
        mesh.num_verts(),
        mesh.num_faces(),
    )
    return mesh
