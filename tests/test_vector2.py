import math

import pytest

from mobagen.vector2 import Vector2, Vector3


def test_direction_constructors():
    assert Vector2.up() == Vector2(0.0, -1.0)
    assert Vector2.down() == -Vector2.up()
    assert Vector2.left() == -Vector2.right()
    assert Vector2.zero() == Vector2()
    assert Vector2.identity() == Vector2.right() - Vector2.up()


def test_arithmetic_round_trips():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 4.0)
    assert (a + b) - b == a
    assert a * 2 == 2 * a
    assert (a * 3) / 3 == a
    assert (a * b) / b == a
    assert +a == a
    assert -(-a) == a


def test_approximate_equality():
    assert Vector2(0.0, 0.0) == Vector2(1e-4, 0.0)
    assert Vector2(0.0, 0.0) != Vector2(0.1, 0.0)


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Vector2())


def test_indexing():
    v = Vector2(3.0, 4.0)
    assert v[0] == 3.0
    assert v[1] == 4.0
    assert tuple(v) == (3.0, 4.0)
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(IndexError):
        v[-1]


def test_rotate_quarter_turn_maps_up_to_right():
    assert Vector2.up().rotate(90) == Vector2.right()


@pytest.mark.parametrize("degrees", [0, 360, -720])
def test_full_rotation_is_identity(degrees):
    v = Vector2(2.0, -7.0)
    assert v.rotate(degrees) == v


def test_rotate_preserves_magnitude():
    v = Vector2(3.0, 4.0)
    assert v.rotate(33).magnitude() == pytest.approx(v.magnitude())


def test_angles():
    assert Vector2.up().angle_degree() == pytest.approx(0.0)
    assert Vector2.right().angle_degree() == pytest.approx(90.0)
    assert Vector2.right().angle_radian() == pytest.approx(math.pi / 2)


def test_rotate_towards_uses_angle_of_up():
    v = Vector2(1.0, 2.0)
    assert v.rotate_towards(Vector2.right()) == v.rotate(90)
    assert v.rotate_towards(Vector2.up()) == v


def test_from_degree_matches_from_radian():
    assert Vector2.from_degree(0) == Vector2.right()
    assert Vector2.from_degree(45) == Vector2.from_radian(math.pi / 4)


def test_random_within_bounds_and_degenerate_range():
    for _ in range(100):
        v = Vector2.random(-1.0, 1.0)
        assert -1.0 <= v.x <= 1.0
        assert -1.0 <= v.y <= 1.0
    assert Vector2.random(2.0, 2.0) == Vector2(2.0, 2.0)


def test_magnitude_and_distance():
    a = Vector2(3.0, 4.0)
    b = Vector2(-1.0, 2.5)
    assert a.sqr_magnitude() == pytest.approx(a.magnitude() ** 2)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) ** 2 == pytest.approx(a.distance_squared(b))
    assert a.distance(Vector2.zero()) == pytest.approx(a.magnitude())


def test_normalized():
    v = Vector2(3.0, -4.0)
    n = v.normalized()
    assert n.magnitude() == pytest.approx(1.0)
    assert n * v.magnitude() == v
    assert Vector2.zero().normalized() == Vector2.zero()


def test_vector3_defaults_and_values():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)
    v = Vector3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)