"""
Mesh utilities implemented in pure PyTorch

This module provides a simple immutable mesh container and the flattened
buffers a rendering backend uploads.
"""

import numpy as np
import torch

# Largest vertex count whose indices all fit in an unsigned 16-bit buffer
UINT16_VERTEX_LIMIT = 1 << 16


class Mesh:
    """
    A lightweight triangle mesh: vertex positions plus triangle index triples.

    A mesh is built once and never mutated; operations that would change it
    return a new Mesh instead.
    """

    def __init__(self, verts, faces):
        """
        Initialize a mesh from vertices and faces.

        Args:
            verts: Tensor of shape [V, 3]
            faces: Tensor of shape [F, 3] with indices into verts

        Raises:
            ValueError: If a face references a vertex that does not exist
        """
        assert verts.ndim == 2 and verts.shape[1] == 3, (
            f"Vertices must have shape [V, 3], got {verts.shape}"
        )
        assert faces.ndim == 2 and faces.shape[1] == 3, (
            f"Faces must have shape [F, 3], got {faces.shape}"
        )

        if faces.numel() > 0:
            lo = int(faces.min())
            hi = int(faces.max())
            if lo < 0 or hi >= verts.shape[0]:
                raise ValueError(
                    f"Face indices must lie in [0, {verts.shape[0]}), got [{lo}, {hi}]"
                )

        self._verts = verts
        self._faces = faces

        # Cache device and dtype
        self.device = verts.device
        self.dtype = verts.dtype

    @property
    def verts(self):
        return self._verts

    @property
    def faces(self):
        return self._faces

    def num_verts(self):
        return self._verts.shape[0]

    def num_faces(self):
        return self._faces.shape[0]

    def vertex_buffer(self):
        """
        Return vertex positions flattened to x0, y0, z0, x1, ...

        Returns:
            np.ndarray: float32 array of length 3 * V
        """
        return self._verts.detach().cpu().numpy().astype(np.float32).reshape(-1)

    def index_buffer(self):
        """
        Return triangle indices flattened to a0, b0, c0, a1, ...

        The buffer is uint16 whenever every index fits in 16 bits and
        uint32 otherwise.

        Returns:
            np.ndarray: Index array of length 3 * F
        """
        dtype = np.uint16 if self.num_verts() <= UINT16_VERTEX_LIMIT else np.uint32
        return self._faces.detach().cpu().numpy().astype(dtype).reshape(-1)

    def edges(self):
        """
        Compute the unique undirected edges of the mesh.

        Returns:
            torch.Tensor: Tensor of shape [E, 2], each row (min, max), rows sorted
        """
        # Each triangle contributes (a, b), (b, c), (c, a)
        pairs = torch.cat(
            [self._faces[:, [0, 1]], self._faces[:, [1, 2]], self._faces[:, [2, 0]]],
            dim=0,
        )
        pairs, _ = torch.sort(pairs, dim=1)
        return torch.unique(pairs, dim=0)

    def to(self, device):
        """Return a copy of this mesh on another device."""
        return Mesh(self._verts.to(device), self._faces.to(device))

    def __repr__(self):
        return f"Mesh(verts={self.num_verts()}, faces={self.num_faces()}, device={self.device})"
