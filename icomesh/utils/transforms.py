"""
4x4 matrix transforms on flat column-major buffers

Every matrix is a numpy array of 16 elements where element
``column * 4 + row`` holds entry (row, column), the layout a GL uniform
upload expects. Functions write into the arrays they are given and keep
no state of their own.
"""

import logging
import math

import numpy as np

from ..config import AXIS_EPSILON

logger = logging.getLogger(__name__)


def _columns(m):
    """View a flat matrix as [column, row] without copying."""
    if not isinstance(m, np.ndarray) or m.size != 16:
        raise ValueError(f"Expected a 16 element numpy array, got {type(m).__name__}")
    return m.reshape(4, 4)


def identity(out=None):
    """
    Reset a matrix to the 4x4 identity.

    Args:
        out: Matrix to overwrite, or None to allocate a new float32 one

    Returns:
        out
    """
    if out is None:
        out = np.empty(16, dtype=np.float32)
    cols = _columns(out)
    cols[:] = 0
    np.fill_diagonal(cols, 1)
    return out


def perspective(fov, aspect, z_near, z_far):
    """
    Create a symmetric perspective projection.

    Args:
        fov: Vertical field of view in degrees, in (0, 180)
        aspect: Viewport width / height
        z_near: Distance to the near clipping plane
        z_far: Distance to the far clipping plane

    Returns:
        np.ndarray: float32 projection matrix of 16 elements

    Raises:
        ValueError: For parameters that give a degenerate projection
    """
    for name, value in (("fov", fov), ("aspect", aspect), ("z_near", z_near), ("z_far", z_far)):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
    if not 0 < fov < 180:
        raise ValueError(f"fov must lie in (0, 180) degrees, got {fov}")
    if aspect == 0:
        raise ValueError("aspect must be non-zero")
    if z_far == z_near:
        raise ValueError(f"z_near and z_far must differ, both are {z_near}")

    ang = math.tan(math.radians(fov * 0.5))
    depth = z_far - z_near
    return np.array(
        [
            0.5 / ang, 0, 0, 0,
            0, 0.5 * aspect / ang, 0, 0,
            0, 0, -(z_far + z_near) / depth, -1,
            0, 0, (-2 * z_far * z_near) / depth, 0,
        ],
        dtype=np.float32,
    )


def rotate_x(m, angle):
    """
    Rotate a matrix in place about the world X axis.

    Args:
        m: Matrix to modify
        angle: Rotation angle in radians (right-hand rule)

    Returns:
        m
    """
    c = math.cos(angle)
    s = math.sin(angle)
    cols = _columns(m)

    y = cols[:3, 1].copy()
    z = cols[:3, 2].copy()
    cols[:3, 1] = y * c - z * s
    cols[:3, 2] = z * c + y * s
    return m


def rotate_y(m, angle):
    """Rotate a matrix in place about the world Y axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    cols = _columns(m)

    x = cols[:3, 0].copy()
    z = cols[:3, 2].copy()
    cols[:3, 0] = c * x + s * z
    cols[:3, 2] = c * z - s * x
    return m


def rotate_z(m, angle):
    """Rotate a matrix in place about the world Z axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    cols = _columns(m)

    x = cols[:3, 0].copy()
    y = cols[:3, 1].copy()
    cols[:3, 0] = c * x - s * y
    cols[:3, 1] = c * y + s * x
    return m


def translate(out, a, v):
    """
    Translate matrix a by vector v, writing the result to out.

    out may be the same array as a. Only the translation column
    (elements 12-15) differs between a and the result.

    Args:
        out: Receiving matrix
        a: Matrix to translate
        v: Translation (x, y, z)

    Returns:
        out
    """
    x, y, z = v
    src = _columns(a)
    dst = _columns(out)

    moved = src[0] * x + src[1] * y + src[2] * z + src[3]
    if out is not a:
        dst[:3] = src[:3]
    dst[3] = moved
    return out


def rotate(out, a, rad, axis):
    """
    Rotate matrix a by rad radians around an arbitrary axis.

    Uses Rodrigues' rotation formula. out may be the same array as a.

    Args:
        out: Receiving matrix
        a: Matrix to rotate
        rad: Rotation angle in radians
        axis: Rotation axis (x, y, z); need not be normalized

    Returns:
        out, or None without touching out when the axis is shorter than
        AXIS_EPSILON
    """
    x, y, z = axis
    length = math.sqrt(x * x + y * y + z * z)
    if length < AXIS_EPSILON:
        logger.debug("Ignoring rotation about degenerate axis %s", (x, y, z))
        return None

    x, y, z = x / length, y / length, z / length
    s = math.sin(rad)
    c = math.cos(rad)
    t = 1 - c

    # Rows are the rotated basis vectors expressed in a's frame
    basis = np.array(
        [
            [x * x * t + c, y * x * t + z * s, z * x * t - y * s],
            [x * y * t - z * s, y * y * t + c, z * y * t + x * s],
            [x * z * t + y * s, y * z * t - x * s, z * z * t + c],
        ],
        dtype=np.float64,
    )

    src = _columns(a)
    dst = _columns(out)

    # Scratch copy so aliasing out and a is safe
    rotated = basis @ src[:3].astype(np.float64)
    if out is not a:
        dst[3] = src[3]
    dst[:3] = rotated
    return out
