import math

import pytest

from minkgame.vectors import Vec2


def test_add_then_sub_round_trip():
    a = Vec2(1.5, -2.25)
    b = Vec2(0.75, 4.0)
    assert (a + b) - b == a


def test_mul_then_div_round_trip():
    v = Vec2(3.0, -6.0)
    assert (v * 4) / 4 == v
    assert (v * Vec2(2.0, 8.0)) / Vec2(2.0, 8.0) == v


def test_negation_cancels():
    v = Vec2(2.5, -7.0)
    assert -v + v == Vec2.ZERO


def test_length_of_three_four():
    assert Vec2(3, 4).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vec2(-3.0, 12.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.x * v.y == pytest.approx(n.y * v.x)


def test_normalized_zero_is_zero():
    assert Vec2(0, 0).normalized() == Vec2.ZERO


def test_string_form():
    assert str(Vec2(1, 2.5)) == "[1, 2.5]"
    assert repr(Vec2(-4, 0.25)) == "[-4, 0.25]"


def test_imul_mutates_in_place():
    v = Vec2(1.0, 2.0)
    alias = v
    v *= 3
    assert alias is v
    assert alias == Vec2(3.0, 6.0)


def test_itruediv_mutates_in_place():
    v = Vec2(8.0, 4.0)
    alias = v
    v /= Vec2(2.0, 4.0)
    assert alias is v
    assert alias == Vec2(4.0, 1.0)


def test_iadd_produces_new_object():
    original = Vec2(1.0, 1.0)
    v = original
    v += Vec2(2.0, 3.0)
    assert original == Vec2(1.0, 1.0)
    assert v == Vec2(3.0, 4.0)


def test_mul_by_string_raises():
    with pytest.raises(TypeError):
        Vec2(1, 1) * "x"


def test_division_by_zero_gives_infinity():
    result = Vec2(1.0, -1.0) / 0
    assert math.isinf(result.x) and result.x > 0
    assert math.isinf(result.y) and result.y < 0
    assert math.isnan((Vec2(0.0, 0.0) / 0).x)


def test_opposite_directions_cancel():
    assert (Vec2.UP + Vec2.DOWN).length() == pytest.approx(0.0)
    assert (Vec2.LEFT + Vec2.RIGHT).length() == pytest.approx(0.0)
    assert Vec2.UP.normalized() == Vec2(0.0, 1.0)
    assert Vec2.LEFT.normalized() == Vec2(-1.0, 0.0)


def test_components_are_settable_and_unpackable():
    v = Vec2(0, 0)
    v.x = 9
    v.y = -1
    x, y = v
    assert (x, y) == (9.0, -1.0)