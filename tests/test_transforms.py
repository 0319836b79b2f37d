"""
Tests for the column-major 4x4 matrix transforms.
"""

import math

import numpy as np
import pytest

from icomesh.utils.transforms import (
    identity,
    perspective,
    rotate,
    rotate_x,
    rotate_y,
    rotate_z,
    translate,
)


def as_rows(m):
    """Column-major flat buffer -> conventional [row, col] matrix."""
    return m.reshape(4, 4).T


def test_identity():
    m = np.full(16, 7.0, dtype=np.float32)
    assert identity(m) is m
    np.testing.assert_array_equal(as_rows(m), np.eye(4))
    np.testing.assert_array_equal(identity(), np.eye(4, dtype=np.float32).ravel())


def test_perspective_entries():
    p = perspective(40, 1.0, 1, 100)
    ang = math.tan(math.radians(20))
    assert p.shape == (16,)
    assert p[0] == pytest.approx(0.5 / ang, rel=1e-6)
    assert p[5] == pytest.approx(0.5 / ang, rel=1e-6)
    assert p[10] == pytest.approx(-101 / 99, rel=1e-6)
    assert p[11] == -1
    assert p[14] == pytest.approx(-200 / 99, rel=1e-6)
    assert p[15] == 0


@pytest.mark.parametrize(
    "args",
    [
        (40, 1.0, 5, 5),
        (0, 1.0, 1, 100),
        (180, 1.0, 1, 100),
        (40, 0.0, 1, 100),
        (40, 1.0, 1, float("inf")),
        (float("nan"), 1.0, 1, 100),
    ],
)
def test_perspective_rejects_degenerate(args):
    with pytest.raises(ValueError):
        perspective(*args)


def test_axis_rotations_follow_right_hand_rule():
    m = identity()
    rotate_x(m, math.pi / 2)
    # Y maps to Z
    np.testing.assert_allclose(as_rows(m) @ [0, 1, 0, 0], [0, 0, 1, 0], atol=1e-6)

    m = identity()
    rotate_y(m, math.pi / 2)
    # Z maps to X
    np.testing.assert_allclose(as_rows(m) @ [0, 0, 1, 0], [1, 0, 0, 0], atol=1e-6)

    m = identity()
    rotate_z(m, math.pi / 2)
    # X maps to Y
    np.testing.assert_allclose(as_rows(m) @ [1, 0, 0, 0], [0, 1, 0, 0], atol=1e-6)


def test_axis_rotation_leaves_translation():
    m = identity()
    m[12:15] = [1, 2, 3]
    rotate_x(m, 0.3)
    rotate_y(m, 0.2)
    rotate_z(m, 0.1)
    np.testing.assert_array_equal(m[12:16], [1, 2, 3, 1])


def test_translate_aliased_matches_copy():
    a = identity()
    rotate_y(a, 0.7)
    rotate_x(a, -0.4)

    out = np.zeros(16, dtype=np.float32)
    assert translate(out, a, (1.0, -2.0, 0.5)) is out

    aliased = a.copy()
    translate(aliased, aliased, (1.0, -2.0, 0.5))

    np.testing.assert_array_equal(out, aliased)
    np.testing.assert_array_equal(out[:12], a[:12])


def test_translate_identity():
    m = identity()
    translate(m, m, (1, 2, 3))
    np.testing.assert_array_equal(m[12:16], [1, 2, 3, 1])
    translate(m, m, (0, 0, -3))
    np.testing.assert_array_equal(m[12:16], [1, 2, 0, 1])


def test_rotate_matches_axis_rotations():
    for axis, axis_rotation in (
        ((1, 0, 0), rotate_x),
        ((0, 1, 0), rotate_y),
        ((0, 0, 1), rotate_z),
    ):
        expected = axis_rotation(identity(), 0.6)
        out = identity()
        assert rotate(out, out, 0.6, axis) is out
        np.testing.assert_allclose(out, expected, atol=1e-6)


def test_rotate_normalizes_axis_and_handles_aliasing():
    a = identity()
    translate(a, a, (0.5, 0.0, 0.0))
    rotate_z(a, 0.25)

    out = np.zeros(16, dtype=np.float32)
    rotate(out, a, 1.1, (0, 0, 10))

    aliased = a.copy()
    rotate(aliased, aliased, 1.1, (0, 0, 1))

    np.testing.assert_allclose(out, aliased, atol=1e-6)
    np.testing.assert_array_equal(out[12:16], a[12:16])


def test_rotate_preserves_orthonormality():
    m = identity()
    rotate(m, m, 2.0, (1, 2, 3))
    r = as_rows(m)[:3, :3].astype(np.float64)
    np.testing.assert_allclose(r @ r.T, np.eye(3), atol=1e-5)
    # The axis itself is fixed
    axis = np.array([1, 2, 3]) / math.sqrt(14)
    np.testing.assert_allclose(r @ axis, axis, atol=1e-5)


def test_rotate_degenerate_axis_is_noop():
    m = identity()
    rotate_x(m, 0.5)
    before = m.copy()
    assert rotate(m, m, 1.0, (1e-9, 0, 0)) is None
    np.testing.assert_array_equal(m, before)
    assert not np.isnan(m).any()


def test_rejects_wrong_size():
    with pytest.raises(ValueError):
        rotate_x(np.zeros(9), 0.1)
    with pytest.raises(ValueError):
        identity([0.0] * 16)


if __name__ == "__main__":
    test_identity()
    test_perspective_entries()
    test_axis_rotations_follow_right_hand_rule()
    test_translate_aliased_matches_copy()
    test_rotate_matches_axis_rotations()
    test_rotate_degenerate_axis_is_noop()
    print("All transform tests passed!")
