import math

import pytest

from spacegame.datatypes import Color4, Vector2


def test_constants_match_definitions():
    assert Vector2.ZERO == Vector2(0.0, 0.0)
    assert Vector2.ONE == Vector2(1.0, 1.0)
    assert Vector2.UP == Vector2(0.0, 1.0)
    assert Vector2.DOWN == Vector2(0.0, -1.0)
    assert Vector2.LEFT == Vector2(-1.0, 0.0)
    assert Vector2.RIGHT == Vector2(1.0, 0.0)


def test_default_is_zero():
    assert Vector2() == Vector2.ZERO


def test_add_and_subtract_round_trip():
    a = Vector2(1.5, -2.25)
    b = Vector2(-0.5, 4.0)
    assert (a + b) - b == a


def test_scalar_multiplication_both_sides():
    v = Vector2(2.0, -3.0)
    assert v * 2.0 == 2.0 * v
    assert v * 1.0 == v
    assert v * 0.0 == Vector2.ZERO


def test_vector_is_immutable():
    v = Vector2(1.0, 2.0)
    with pytest.raises(AttributeError):
        setattr(v, "x", 5.0)
    assert (v.x, v.y) == (1.0, 2.0)


def test_iteration_unpacks():
    x, y = Vector2(7.0, 8.0)
    assert (x, y) == (7.0, 8.0)


def test_magnitude_pythagorean():
    assert Vector2(3.0, 4.0).magnitude() == pytest.approx(5.0)


def test_normalize_has_unit_length():
    v = Vector2(-12.0, 7.5)
    n = v.normalize()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.x * v.y == pytest.approx(n.y * v.x)


def test_normalize_zero_gives_nan():
    n = Vector2(0.0, 0.0).normalize()
    assert [math.isnan(component) for component in n] == [True, True]


def test_distance_is_symmetric_and_matches_difference():
    a = Vector2(1.0, 2.0)
    b = Vector2(-4.0, 9.0)
    assert a.distance_from(b) == pytest.approx(b.distance_from(a))
    assert a.distance_from(b) == pytest.approx((a - b).magnitude())
    assert a.distance_from(a) == 0.0


def test_rotate_around_preserves_distance_to_origin():
    origin = Vector2(10.0, -5.0)
    p = Vector2(13.0, 2.0)
    rotated = p.rotate_around(origin, 1.234)
    assert rotated.distance_from(origin) == pytest.approx(p.distance_from(origin))


def test_rotate_full_turn_is_identity():
    origin = Vector2(1.0, 1.0)
    p = Vector2(4.0, -2.0)
    r = p.rotate_around(origin, 2 * math.pi)
    assert r.x == pytest.approx(p.x)
    assert r.y == pytest.approx(p.y)


def test_rotate_zero_is_identity():
    p = Vector2(4.0, -2.0)
    assert p.rotate_around(Vector2(3.0, 3.0), 0.0) == p


def test_rotate_quarter_turn_maps_right_to_up():
    r = Vector2.RIGHT.rotate_around(Vector2.ZERO, math.pi / 2)
    assert r.x == pytest.approx(Vector2.UP.x, abs=1e-12)
    assert r.y == pytest.approx(Vector2.UP.y)


def test_lerp_endpoints():
    a = Vector2(1.0, 2.0)
    b = Vector2(5.0, -6.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_lerp_midpoint_is_equidistant():
    a = Vector2(1.0, 2.0)
    b = Vector2(5.0, -6.0)
    mid = a.lerp(b, 0.5)
    assert mid.distance_from(a) == pytest.approx(mid.distance_from(b))


def test_from_angle_zero_points_up():
    v = Vector2.from_angle(0.0)
    assert v.x == pytest.approx(Vector2.UP.x)
    assert v.y == pytest.approx(Vector2.UP.y)


def test_from_angle_is_unit_and_half_turn_points_down():
    assert Vector2.from_angle(0.7).magnitude() == pytest.approx(1.0)
    v = Vector2.from_angle(math.pi)
    assert v.x == pytest.approx(Vector2.DOWN.x, abs=1e-12)
    assert v.y == pytest.approx(Vector2.DOWN.y)


def test_color_constants():
    assert Color4(255, 0, 0, 255) == Color4.RED
    assert Color4(0, 255, 0, 255) == Color4.GREEN
    assert Color4(0, 0, 255, 255) == Color4.BLUE
    assert Color4(0, 0, 0, 255) == Color4.BLACK
    assert Color4(255, 255, 255, 255) == Color4.WHITE
    assert tuple(Color4(255, 255, 255, 255)) == (255, 255, 255, 255)


def test_color_default_alpha_is_opaque():
    assert Color4(255, 0, 0) == Color4.RED


@pytest.mark.parametrize("channels", [(256, 0, 0, 255), (0, -1, 0, 255), (0, 0, 0, 300)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color4(*channels)