import pytest

from gameframe.ivector import IVec2, IVec3, IVec4, Rect
from gameframe.vector import Vec2, Vec3


def test_ivec2_defaults_to_zero():
    assert tuple(IVec2()) == (0, 0)


def test_ivec2_rejects_single_integer():
    with pytest.raises(TypeError):
        IVec2(3)


def test_ivec2_rejects_float_components():
    with pytest.raises(TypeError):
        IVec2(1.5, 2)


def test_from_vec2_truncates_toward_zero():
    v = IVec2.from_vec2(Vec2(2.9, -2.9))
    assert (v.x, v.y) == (2, -2)


def test_ivec2_equality_is_exact():
    assert IVec2(1, 2) == IVec2(1, 2)
    assert not (IVec2(1, 2) == IVec2(1, 3))


def test_ivec2_int_scalar_gives_ivec2():
    result = IVec2(3, 4) + 1
    assert isinstance(result, IVec2)
    assert result == IVec2(4, 5)


def test_ivec2_float_scalar_gives_vec2():
    result = IVec2(3, 4) * 0.5
    assert isinstance(result, Vec2)
    assert result == Vec2(1.5, 2.0)


def test_ivec2_with_vec2_gives_vec2():
    result = IVec2(3, 4) + Vec2(0.5, 0.25)
    assert result == Vec2(3.5, 4.25)


def test_ivec2_integer_division_truncates_toward_zero():
    assert IVec2(-7, 7) / 2 == IVec2(-3, 3)


def test_ivec2_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        IVec2(1, 1) / 0


def test_ivec2_reflected_int():
    assert 10 - IVec2(3, 4) == IVec2(7, 6)
    assert 2 * IVec2(3, 4) == IVec2(3, 4) * 2


def test_ivec2_reflected_float_not_supported():
    with pytest.raises(TypeError):
        2.5 * IVec2(1, 1)


def test_ivec2_inplace_keeps_identity():
    v = IVec2(1, 2)
    original = v
    v += IVec2(1, 1)
    v *= 3
    assert v is original
    assert v == IVec2(6, 9)


def test_ivec2_negation():
    assert -IVec2(1, -2) == IVec2(-1, 2)


def test_ivec2_clamp_xy():
    v = IVec2(-5, 50)
    v.clamp_xy(0, 10)
    assert (v.x, v.y) == (0, 10)


def test_ivec2_clamp_x_leaves_y():
    v = IVec2(-5, 50)
    v.clamp_x(0, 10)
    assert (v.x, v.y) == (0, 50)


def test_ivec2_clamp_y_leaves_x():
    v = IVec2(-5, 50)
    v.clamp_y(0, 10)
    assert (v.x, v.y) == (-5, 10)


def test_ivec2_length():
    assert IVec2(3, 4).length() == pytest.approx(5.0)


def test_ivec2_length_squared_matches_length():
    v = IVec2(-6, 11)
    assert v.length() ** 2 == pytest.approx(v.length_squared())


def test_ivec2_distance_is_symmetric_and_matches_difference():
    a, b = IVec2(1, 9), IVec2(-4, 2)
    assert a.distance_from(b) == pytest.approx(b.distance_from(a))
    assert a.distance_from(b) == pytest.approx((a - b).length())


def test_ivec2_indexing():
    v = IVec2(4, 8)
    v[1] = 5
    assert (v[0], v[1]) == (4, 5)
    with pytest.raises(IndexError):
        v[2]


def test_ivec2_with_components():
    v = IVec2(1, 2)
    assert v.with_x(9) == IVec2(9, 2)
    assert v.with_y(9) == IVec2(1, 9)
    assert v == IVec2(1, 2)


def test_ivec3_constructors():
    assert tuple(IVec3(7)) == (7, 7, 7)
    assert tuple(IVec3(1, 2)) == (1, 2, 0)
    assert tuple(IVec3(IVec2(1, 2))) == (1, 2, 0)
    assert tuple(IVec3(IVec2(1, 2), 3)) == (1, 2, 3)
    assert tuple(IVec3(1, IVec2(2, 3))) == (1, 2, 3)


def test_ivec3_too_many_components():
    with pytest.raises(TypeError):
        IVec3(1, 2, 3, 4)


def test_ivec3_length_squared_is_int():
    v = IVec3(1, 2, 2)
    assert v.length_squared() == 9
    assert isinstance(v.length_squared(), int)
    assert v.length() == pytest.approx(3.0)


def test_ivec3_multiply_components():
    v = IVec3(1, 2, 3)
    assert v.multiply_components(IVec3(2, 3, 4)) == IVec3(2, 6, 12)
    assert v.multiply_components(Vec3(0.5, 0.5, 0.5)) == Vec3(0.5, 1.0, 1.5)
    with pytest.raises(TypeError):
        v.multiply_components(5)


def test_ivec3_reflected_float_gives_vec3():
    assert 0.5 * IVec3(2, 4, 6) == Vec3(1.0, 2.0, 3.0)


def test_ivec3_reflected_int_gives_ivec3():
    result = 1 + IVec3(2, 4, 6)
    assert isinstance(result, IVec3)
    assert result == IVec3(3, 5, 7)


def test_ivec3_inplace_add_and_sub():
    v = IVec3(1, 2, 3)
    original = v
    v += IVec3(1, 1, 1)
    v -= IVec3(2, 2, 2)
    assert v is original
    assert v == IVec3(0, 1, 2)


def test_ivec3_division_truncates():
    assert IVec3(-5, 5, 4) / IVec3(2, 2, 2) == IVec3(-2, 2, 2)


def test_ivec3_with_components():
    v = IVec3(1, 2, 3)
    assert v.with_x(0) == IVec3(0, 2, 3)
    assert v.with_y(0) == IVec3(1, 0, 3)
    assert v.with_z(0) == IVec3(1, 2, 0)


def test_ivec4_constructors():
    assert tuple(IVec4(IVec3(1, 2, 3), 4)) == (1, 2, 3, 4)
    assert tuple(IVec4(1, IVec3(2, 3, 4))) == (1, 2, 3, 4)
    assert tuple(IVec4(IVec2(1, 2), IVec2(3, 4))) == (1, 2, 3, 4)
    assert tuple(IVec4(1, IVec2(2, 3), 4)) == (1, 2, 3, 4)
    assert tuple(IVec4(1, 2)) == (1, 2, 0, 0)


def test_ivec4_add_sub_round_trip():
    a, b = IVec4(1, 2, 3, 4), IVec4(5, -6, 7, -8)
    assert (a + b) - b == a


def test_ivec4_forward_scalar_multiply_unsupported():
    with pytest.raises(TypeError):
        IVec4(1, 2, 3, 4) * 2


def test_ivec4_reflected_int():
    assert 2 * IVec4(1, 2, 3, 4) == IVec4(2, 4, 6, 8)


def test_ivec4_length_squared_matches_dot():
    v = IVec4(1, -2, 3, -4)
    assert v.length_squared() == pytest.approx(sum(a * a for a in v))


def test_ivec4_with_w():
    assert IVec4(1, 2, 3, 4).with_w(0) == IVec4(1, 2, 3, 0)


def test_rect_defaults_and_fields():
    r = Rect()
    assert (r.x, r.y, r.w, r.h) == (0, 0, 0, 0)
    r = Rect(1, 2, 3, 4)
    assert (r.x, r.y, r.w, r.h) == (1, 2, 3, 4)