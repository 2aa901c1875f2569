import math

import pytest

from circuitos.vec import Quat, Vec3, Vec4


def test_indexing_matches_fields():
    v = Vec3(1.0, 2.0, 3.0)
    assert [v[0], v[1], v[2]] == [1.0, 2.0, 3.0]
    assert list(v) == [1.0, 2.0, 3.0]


def test_aliases_share_storage():
    v = Vec3(1.0, 2.0, 3.0)
    assert (v.pitch, v.yaw, v.roll) == (1.0, 2.0, 3.0)
    assert (v.r, v.g, v.b) == (1.0, 2.0, 3.0)
    v.yaw = 7.0
    assert v.y == 7.0
    v[2] = 4.0
    assert v.roll == 4.0


@pytest.mark.parametrize("index", [3, -1])
def test_vec3_index_out_of_range(index):
    with pytest.raises(IndexError):
        Vec3()[index]


def test_add_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert (a + 2.0) - 2.0 == a


def test_scalar_multiply_equals_repeated_add():
    a = Vec3(1.5, -2.0, 3.25)
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0


def test_componentwise_multiply():
    a = Vec3(2.0, 3.0, 4.0)
    ones = Vec3(1.0, 1.0, 1.0)
    assert a * ones == a
    assert a * Vec3() == Vec3()


def test_length_and_dot_invariant():
    v = Vec3(3.0, 4.0, 12.0)
    assert math.isclose(v.length() ** 2, v.dot(v))


def test_cross_of_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_cross_with_itself_is_zero():
    v = Vec3(1.0, 2.0, 3.0)
    assert v.cross(v) == Vec3(0.0, 0.0, 0.0)


def test_angle_cos_of_parallel_vectors():
    v = Vec3(1.0, 2.0, 3.0)
    assert math.isclose(v.angle_cos(v * 3.0), 1.0)
    assert math.isclose(v.angle_cos(v * -1.0), -1.0)


def test_vec4_indexing():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    assert [v[i] for i in range(4)] == [1.0, 2.0, 3.0, 4.0]
    v[3] = 9.0
    assert v.w == 9.0 and v.a == 9.0
    with pytest.raises(IndexError):
        v[4]


def test_identity_from_zero_euler():
    assert Quat.from_euler(Vec3()) == Quat(1.0, 0.0, 0.0, 0.0)


def test_identity_euler_is_zero():
    angles = Quat(1.0, 0.0, 0.0, 0.0).euler()
    assert (angles.pitch, angles.yaw, angles.roll) == (0.0, 0.0, 0.0)


def test_inverse_negates_vector_part_and_is_involution():
    q = Quat(0.5, 0.1, -0.2, 0.3)
    inv = q.inverse()
    assert (inv.w, inv.x, inv.y, inv.z) == (q.w, -q.x, -q.y, -q.z)
    assert inv.inverse() == q


def test_from_euler_is_unit():
    q = Quat.from_euler(Vec3(0.3, -0.7, 1.1))
    assert math.isclose(q.w ** 2 + q.x ** 2 + q.y ** 2 + q.z ** 2, 1.0)


def test_identity_rotation_keeps_point():
    p = Vec3(1.0, -2.0, 0.5)
    assert Quat(1.0, 0.0, 0.0, 0.0).rotate(p) == p


def test_rotate_does_not_modify_input():
    p = Vec3(1.0, 2.0, 3.0)
    Quat.from_euler(Vec3(0.2, 0.4, 0.6)).rotate(p)
    assert p == Vec3(1.0, 2.0, 3.0)