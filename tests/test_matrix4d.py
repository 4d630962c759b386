import math

import pytest

from nurbskit.matrix4d import Matrix4d
from nurbskit.xyz import XYZ
from nurbskit.xyzw import XYZW


def _coords(v: XYZ) -> list:
    return [v[0], v[1], v[2]]


def test_default_is_identity():
    m = Matrix4d()
    assert m.is_identity()
    assert m[0, 0] == 1.0
    assert m[0, 1] == 0.0


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4d([[1.0, 0.0], [0.0, 1.0]])


def test_from_basis_columns_round_trip():
    bx, by, bz, origin = XYZ(1, 2, 3), XYZ(4, 5, 6), XYZ(7, 8, 9), XYZ(10, 11, 12)
    m = Matrix4d.from_basis(bx, by, bz, origin)
    assert m.basis_x == bx
    assert m.basis_y == by
    assert m.basis_z == bz
    assert m.basis_w == origin
    assert m[3] == (0.0, 0.0, 0.0, 1.0)


def test_setitem_and_getitem():
    m = Matrix4d()
    m[1, 2] = 5.5
    assert m[1, 2] == 5.5
    assert not m.is_identity()


def test_translation_moves_point_not_vector():
    v = XYZ(1, -2, 3)
    p = XYZ(4, 5, 6)
    m = Matrix4d.create_translation(v)
    assert _coords(m.of_point(p)) == pytest.approx([5.0, 3.0, 9.0])
    assert _coords(m.of_vector(p)) == pytest.approx([4.0, 5.0, 6.0])
    assert m.is_translation()
    assert m.basis_w == v


def test_rotation_preserves_length_and_determinant():
    m = Matrix4d.create_rotation(XYZ(1, 1, 0), 0.7)
    p = XYZ(3, -1, 2)
    assert math.isclose(m.of_vector(p).length(), p.length(), rel_tol=1e-9)
    assert math.isclose(m.determinant(), 1.0, rel_tol=1e-9)
    assert not m.has_reflection()
    assert not m.is_translation()


def test_rotation_keeps_axis_fixed():
    axis = XYZ(0, 0, 2)
    m = Matrix4d.create_rotation(axis, 1.2)
    assert _coords(m.of_vector(axis)) == pytest.approx([0.0, 0.0, 2.0], abs=1e-9)


def test_rotation_and_inverse_rotation_compose_to_identity():
    axis = XYZ(0.3, -0.5, 0.8)
    forward = Matrix4d.create_rotation(axis, 0.9)
    backward = Matrix4d.create_rotation(axis, -0.9)
    assert (forward @ backward).is_identity()
    assert (forward * backward).is_identity()


def test_rotation_at_point_keeps_origin_fixed():
    origin = XYZ(2, 3, -1)
    m = Matrix4d.create_rotation_at_point(origin, XYZ(0, 1, 1), 1.1)
    assert _coords(m.of_point(origin)) == pytest.approx([2.0, 3.0, -1.0], abs=1e-9)
    other = XYZ(5, 0, 4)
    assert math.isclose(
        m.of_point(other).distance(origin), other.distance(origin), rel_tol=1e-9
    )


def test_reflection_is_involution_and_flips_orientation():
    m = Matrix4d.create_reflection(XYZ(1, 2, 2), 3.0)
    assert m.has_reflection()
    assert math.isclose(m.determinant(), -1.0, rel_tol=1e-9)
    assert (m @ m).is_identity()
    p = XYZ(1, -4, 7)
    assert _coords(m.of_point(m.of_point(p))) == pytest.approx([1.0, -4.0, 7.0], abs=1e-9)


def test_reflection_default_distance_fixes_origin():
    m = Matrix4d.create_reflection(XYZ(0, 1, 0))
    assert _coords(m.of_point(XYZ())) == pytest.approx([0.0, 0.0, 0.0], abs=1e-12)
    assert _coords(m.of_point(XYZ(1, 2, 3))) == pytest.approx([1.0, -2.0, 3.0], abs=1e-12)


def test_scale_factors_match_scale():
    s = XYZ(2, 3, 4)
    m = Matrix4d.create_scale(s)
    assert _coords(m.scale_factors()) == pytest.approx([2.0, 3.0, 4.0])
    p = XYZ(1, 1, 1)
    assert _coords(m.of_point(p)) == pytest.approx([2.0, 3.0, 4.0])


def test_inverse_times_matrix_is_identity():
    m = Matrix4d.create_rotation_at_point(XYZ(1, 2, 3), XYZ(1, 0, 1), 0.4) @ Matrix4d.create_scale(
        XYZ(2, 3, 5)
    )
    inv = m.inverse()
    assert (m @ inv).is_identity()
    assert (inv @ m).is_identity()


def test_singular_inverse_raises():
    m = Matrix4d([[0.0] * 4 for _ in range(4)])
    with pytest.raises(ValueError):
        m.inverse()


def test_transpose_twice_is_original():
    m = Matrix4d([[float(4 * i + j) for j in range(4)] for i in range(4)])
    t = m.transpose()
    assert t[1, 2] == m[2, 1]
    assert t.transpose() == m


def test_composition_applies_right_first():
    a = Matrix4d.create_rotation(XYZ(0, 0, 1), 0.5)
    b = Matrix4d.create_translation(XYZ(1, 2, 3))
    p = XYZ(-1, 4, 2)
    composed = _coords((a @ b).of_point(p))
    stepwise = _coords(a.of_point(b.of_point(p)))
    assert composed == pytest.approx(stepwise, abs=1e-9)
    assert composed[2] == pytest.approx(5.0, abs=1e-9)


def test_add_then_subtract_round_trip():
    a = Matrix4d.create_rotation(XYZ(1, 0, 0), 0.3)
    b = Matrix4d.create_scale(XYZ(2, 2, 2))
    assert ((a + b) - b - a).tolist() == pytest.approx(
        [[0.0] * 4 for _ in range(4)], abs=1e-12
    )


def test_of_weighted_point_keeps_weight():
    m = Matrix4d.create_translation(XYZ(1, 1, 1))
    p = XYZ(2, 3, 4)
    result = m.of_weighted_point(XYZW.from_xyz(p, 2.5))
    assert result.w == 2.5
    assert _coords(result.to_xyz(True)) == pytest.approx([3.0, 4.0, 5.0])


def test_equality_and_unhashable():
    assert Matrix4d() == Matrix4d()
    assert not (Matrix4d() == Matrix4d.create_scale(XYZ(2, 1, 1)))
    with pytest.raises(TypeError):
        hash(Matrix4d())