"""
Spinning scene driver.
Owns the current mesh and the projection/view/model matrices, and advances
the model rotation once per animation tick. Drawing is left to whoever
consumes frame().
"""

import logging

from ..config import (
    DEFAULT_ASPECT,
    DEFAULT_CAMERA_DISTANCE,
    DEFAULT_FOV,
    DEFAULT_QUALITY,
    DEFAULT_SHAPE,
    DEFAULT_SPIN_RATES,
    DEFAULT_Z_FAR,
    DEFAULT_Z_NEAR,
)
from ..utils.polyhedra import build_mesh
from ..utils.transforms import (
    identity,
    perspective,
    rotate,
    rotate_x,
    rotate_y,
    translate,
)

logger = logging.getLogger(__name__)


class SpinningScene:
    """
    A mesh viewed through a fixed camera, spinning about the X and Y axes.
    """

    def __init__(
        self,
        shape=DEFAULT_SHAPE,
        quality=DEFAULT_QUALITY,
        aspect=DEFAULT_ASPECT,
        fov=DEFAULT_FOV,
        z_near=DEFAULT_Z_NEAR,
        z_far=DEFAULT_Z_FAR,
        camera_distance=DEFAULT_CAMERA_DISTANCE,
        spin_rates=DEFAULT_SPIN_RATES,
        device=None,
    ):
        """
        Initialize the scene and build its first mesh.

        Args:
            shape: Registered shape name ("icosphere" or "cube")
            quality: Subdivision depth for shapes that subdivide
            aspect: Viewport width / height
            fov: Vertical field of view in degrees
            z_near, z_far: Clipping plane distances
            camera_distance: How far the camera sits back along -Z
            spin_rates: (x, y) spin in radians per millisecond
            device: PyTorch device for mesh tensors
        """
        self.device = device
        self.fov = fov
        self.z_near = z_near
        self.z_far = z_far
        self.spin_rates = tuple(spin_rates)

        self.proj_matrix = perspective(fov, aspect, z_near, z_far)
        self.view_matrix = identity()
        self.view_matrix[14] -= camera_distance
        self.mov_matrix = identity()

        self._time_old = 0.0

        self.shape = shape
        self.quality = quality
        self.mesh = build_mesh(shape, quality, device=device)

    def select(self, shape=None, quality=None):
        """
        Swap in the mesh for a new shape and/or quality.

        The replacement is built completely before it is published; if the
        build fails the current mesh stays in place.

        Returns:
            Mesh: The mesh now in use
        """
        shape = self.shape if shape is None else shape
        quality = self.quality if quality is None else quality

        mesh = build_mesh(shape, quality, device=self.device)

        self.mesh = mesh
        self.shape = shape
        self.quality = quality
        return mesh

    def tick(self, time):
        """
        Advance the model rotation to a new timestamp.

        Args:
            time: Timestamp in milliseconds

        Returns:
            dict: The frame for this tick (see frame())
        """
        dt = time - self._time_old
        rotate_x(self.mov_matrix, dt * self.spin_rates[0])
        rotate_y(self.mov_matrix, dt * self.spin_rates[1])
        self._time_old = time
        return self.frame()

    def zoom(self, delta):
        """Move the camera along its view axis; positive delta moves it closer."""
        translate(self.view_matrix, self.view_matrix, (0.0, 0.0, delta))

    def spin(self, radians, axis):
        """
        Rotate the model about an arbitrary axis.

        Returns:
            bool: False when the axis was too short and nothing was applied
        """
        if rotate(self.mov_matrix, self.mov_matrix, radians, axis) is None:
            logger.warning("Rotation about axis %s not applied", tuple(axis))
            return False
        return True

    def set_aspect(self, aspect):
        """Rebuild the projection for a resized viewport."""
        self.proj_matrix = perspective(self.fov, aspect, self.z_near, self.z_far)

    def frame(self):
        """
        Collect everything a renderer needs for one draw.

        Returns:
            dict with keys:
                vertices: Flat float32 vertex buffer
                indices: Flat index buffer
                proj_matrix, view_matrix, mov_matrix: Copies of the matrices
        """
        mesh = self.mesh
        return {
            "vertices": mesh.vertex_buffer(),
            "indices": mesh.index_buffer(),
            "proj_matrix": self.proj_matrix.copy(),
            "view_matrix": self.view_matrix.copy(),
            "mov_matrix": self.mov_matrix.copy(),
        }
