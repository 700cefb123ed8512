import math

import pytest

from innex.hmatrix import HMatrix, Position, Rotation


def matmul(a, b):
    return [[sum(a[i][k] * b[k][j] for k in range(4)) for j in range(4)] for i in range(4)]


def transpose(a):
    return [list(row) for row in zip(*a)]


def identity():
    m = HMatrix()
    m.set_position(0.0, 0.0, 0.0)
    return m.matrix


def assert_close(a, b):
    for row_a, row_b in zip(a, b):
        assert row_a == pytest.approx(row_b, abs=1e-12)


def test_new_matrix_is_zero():
    assert all(value == 0.0 for row in HMatrix().matrix for value in row)


def test_set_position_translation_column():
    m = HMatrix()
    m.set_position(1.5, -2.0, 3.25)
    assert [row[3] for row in m.matrix] == [1.5, -2.0, 3.25, 1.0]
    assert [row[:3] for row in m.matrix] == [row[:3] for row in identity()]


@pytest.mark.parametrize("setter", ["set_rot_x", "set_rot_y", "set_rot_z"])
def test_zero_rotation_is_identity(setter):
    m = HMatrix()
    getattr(m, setter)(0.0)
    assert m.matrix == identity()


@pytest.mark.parametrize("setter", ["set_rot_x", "set_rot_y", "set_rot_z"])
@pytest.mark.parametrize("angle", [0.3, 1.0, math.pi / 2, -2.4])
def test_rotation_is_orthonormal(setter, angle):
    m = HMatrix()
    getattr(m, setter)(angle)
    assert_close(matmul(m.matrix, transpose(m.matrix)), identity())


@pytest.mark.parametrize("setter", ["set_rot_x", "set_rot_y", "set_rot_z"])
def test_opposite_rotations_cancel(setter):
    forward, back = HMatrix(), HMatrix()
    getattr(forward, setter)(0.7)
    getattr(back, setter)(-0.7)
    assert_close(matmul(forward.matrix, back.matrix), identity())


def test_rotation_about_x_keeps_x_axis():
    m = HMatrix()
    m.set_rot_x(1.1)
    assert [row[0] for row in m.matrix] == [1.0, 0.0, 0.0, 0.0]


def test_translations_compose():
    a, b, total = HMatrix(), HMatrix(), HMatrix()
    a.set_position(1.0, 2.0, 3.0)
    b.set_position(4.0, 5.0, 6.0)
    total.set_position(5.0, 7.0, 9.0)
    assert matmul(a.matrix, b.matrix) == total.matrix


def test_position_builds_translation():
    p = Position(1.0, 2.0, 3.0)
    expected = HMatrix()
    expected.set_position(1.0, 2.0, 3.0)
    assert p.mat == expected
    assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)


def test_rotation_defaults_to_zero_matrix():
    r = Rotation(0.1, 0.2, 0.3)
    assert r.mat == HMatrix()
    assert (r.rox, r.roy, r.roz) == (0.1, 0.2, 0.3)