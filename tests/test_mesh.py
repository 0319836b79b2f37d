"""
Tests for the Mesh container.
"""

import numpy as np
import pytest
import torch

from icomesh.utils.icosphere import build_icosphere
from icomesh.utils.mesh import Mesh


def test_buffers_are_flat():
    mesh = build_icosphere(1)
    vertices = mesh.vertex_buffer()
    indices = mesh.index_buffer()
    assert vertices.dtype == np.float32
    assert vertices.shape == (42 * 3,)
    assert indices.shape == (80 * 3,)
    np.testing.assert_allclose(vertices[3:6], mesh.verts[1].numpy())
    assert indices[:3].tolist() == mesh.faces[0].tolist()


def test_index_buffer_widens_past_16_bits():
    assert build_icosphere(2).index_buffer().dtype == np.uint16

    verts = torch.zeros((70000, 3))
    faces = torch.tensor([[0, 1, 69999]])
    assert Mesh(verts, faces).index_buffer().dtype == np.uint32


def test_dangling_index_rejected():
    verts = torch.zeros((3, 3))
    with pytest.raises(ValueError):
        Mesh(verts, torch.tensor([[0, 1, 3]]))
    with pytest.raises(ValueError):
        Mesh(verts, torch.tensor([[-1, 1, 2]]))


def test_edges_unique_and_ordered():
    verts = torch.zeros((4, 3))
    faces = torch.tensor([[0, 1, 2], [0, 2, 3]])
    edges = Mesh(verts, faces).edges().tolist()
    assert edges == [[0, 1], [0, 2], [0, 3], [1, 2], [2, 3]]


def test_to_returns_new_mesh():
    mesh = build_icosphere(0)
    moved = mesh.to("cpu")
    assert moved is not mesh
    assert torch.equal(moved.verts, mesh.verts)
    assert "verts=12" in repr(moved)
