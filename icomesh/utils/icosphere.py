"""
Icosphere generation utilities implemented in pure PyTorch

This module provides functions to generate icospheres (subdivided
icosahedrons) whose vertices all lie on the unit sphere.
"""

import logging
import math
import numbers

import torch

from .mesh import Mesh

logger = logging.getLogger(__name__)


def check_quality(level):
    """
    Validate a subdivision level.

    Args:
        level: Requested subdivision depth

    Returns:
        The level as a plain int

    Raises:
        TypeError: If level is not an integer (floats, NaN and inf included)
        ValueError: If level is negative
    """
    if isinstance(level, bool) or not isinstance(level, numbers.Integral):
        raise TypeError(f"Quality must be an integer, got {level!r}")
    if level < 0:
        raise ValueError(f"Quality must be non-negative, got {level}")
    return int(level)


class IcoSphere:
    """
    A class for generating icosphere meshes with variable levels of detail.

    Vertices are accumulated in insertion order (insertion order is the
    vertex index) and only turned into a tensor once every subdivision
    pass has finished, so a half-built sphere is never exposed.
    """

    def __init__(self, level=3, device=None, dtype=torch.float32):
        """
        Initialize the icosphere.

        Args:
            level: Subdivision level (0 = icosahedron, each level subdivides faces)
            device: PyTorch device
            dtype: Floating point dtype of the final vertex tensor
        """
        self.level = check_quality(level)
        self.device = device

        # Points are kept in float64 until the mesh is complete
        self._points = []

        faces = self._create_base_icosahedron()

        # Subdivide mesh based on level
        for _ in range(self.level):
            faces = self._subdivide_mesh(faces)

        self.vertices = torch.stack(self._points).to(dtype=dtype)
        self.faces = torch.tensor(faces, dtype=torch.long)

        if device is not None:
            self.vertices = self.vertices.to(device)
            self.faces = self.faces.to(device)

        logger.debug(
            "Built icosphere level %d: %d vertices, %d faces",
            self.level,
            len(self.vertices),
            len(self.faces),
        )

    def _add_vertex(self, point):
        """Project a point onto the unit sphere and append it. Returns its index."""
        point = point / torch.linalg.norm(point)
        self._points.append(point)
        return len(self._points) - 1

    def _create_base_icosahedron(self):
        """
        Create the base icosahedron (level 0).

        Returns:
            faces: List of 20 (a, b, c) index triples
        """
        # Golden ratio for icosahedron construction
        t = (1 + math.sqrt(5)) / 2

        # Each vertex is divided by its own length on insertion
        for x, y, z in [
            (-1, t, 0),
            (1, t, 0),
            (-1, -t, 0),
            (1, -t, 0),
            (0, -1, t),
            (0, 1, t),
            (0, -1, -t),
            (0, 1, -t),
            (t, 0, -1),
            (t, 0, 1),
            (-t, 0, -1),
            (-t, 0, 1),
        ]:
            self._add_vertex(torch.tensor([x, y, z], dtype=torch.float64))

        # Icosahedron faces
        return [
            (0, 11, 5),
            (0, 5, 1),
            (0, 1, 7),
            (0, 7, 10),
            (0, 10, 11),
            (1, 5, 9),
            (5, 11, 4),
            (11, 10, 2),
            (10, 7, 6),
            (7, 1, 8),
            (3, 9, 4),
            (3, 4, 2),
            (3, 2, 6),
            (3, 6, 8),
            (3, 8, 9),
            (4, 9, 5),
            (2, 4, 11),
            (6, 2, 10),
            (8, 6, 7),
            (9, 8, 1),
        ]

    def _subdivide_mesh(self, faces):
        """
        Subdivide each triangle in the current mesh into 4 triangles.

        Only the faces passed in are split; the children produced during
        this pass are collected separately and never split again until
        the next pass.

        Args:
            faces: List of (a, b, c) index triples from the previous pass

        Returns:
            List of 4 * len(faces) index triples
        """
        # Create dict to track midpoints - key: (v1_idx, v2_idx), value: new_vertex_idx
        edge_midpoints = {}

        new_faces = []
        for v1, v2, v3 in faces:
            # Get midpoint indices (creating new vertices as needed)
            m1 = self._get_midpoint_index(edge_midpoints, v1, v2)
            m2 = self._get_midpoint_index(edge_midpoints, v2, v3)
            m3 = self._get_midpoint_index(edge_midpoints, v3, v1)

            # Children keep the parent's winding
            new_faces.append((v1, m1, m3))
            new_faces.append((v2, m2, m1))
            new_faces.append((v3, m3, m2))
            new_faces.append((m1, m2, m3))

        return new_faces

    def _get_midpoint_index(self, edge_midpoints, idx1, idx2):
        """
        Get the index of the midpoint between two vertices.
        If the midpoint doesn't exist, create it and add to the vertices.

        Args:
            edge_midpoints: Dict mapping edge keys to midpoint indices
            idx1, idx2: Indices of the two vertices

        Returns:
            Index of the midpoint vertex
        """
        # Ensure idx1 < idx2 for consistent edge keys
        if idx1 > idx2:
            idx1, idx2 = idx2, idx1

        edge_key = (idx1, idx2)
        if edge_key in edge_midpoints:
            return edge_midpoints[edge_key]

        # Average first, then push the average back onto the unit sphere
        midpoint = (self._points[idx1] + self._points[idx2]) / 2.0
        midpoint_idx = self._add_vertex(midpoint)

        edge_midpoints[edge_key] = midpoint_idx
        return midpoint_idx

    def to_mesh(self):
        """Wrap the finished vertices and faces in a Mesh."""
        return Mesh(self.vertices, self.faces)


def generate_icosphere(level=3, device=None):
    """
    Generate an icosphere mesh.

    Args:
        level: Subdivision level (0 = icosahedron, each level subdivides faces)
        device: PyTorch device

    Returns:
        vertices: Tensor of shape [V, 3]
        faces: Tensor of shape [F, 3]
    """
    icosphere = IcoSphere(level=level, device=device)
    return icosphere.vertices, icosphere.faces


def build_icosphere(quality, device=None):
    """Build the unit icosphere for a subdivision quality as a Mesh."""
    return IcoSphere(level=quality, device=device).to_mesh()
