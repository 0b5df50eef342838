"""Tests for the vector helpers."""

import math

import pytest


def test_vector_str():
    from geomkit import vec
    assert str(vec(1, 2)) == "Vector (1, 2)"


def test_arithmetic_with_single_value():
    from geomkit.vector import vec, vec_add, vec_sub, vec_mult, vec_div, vec_set
    v = vec(1, 2)
    vec_add(v, 1)
    assert (v.x, v.y) == (2, 3)
    vec_sub(v, 1, 2)
    assert (v.x, v.y) == (1, 1)
    vec_mult(v, 4)
    assert (v.x, v.y) == (4, 4)
    vec_div(v, 2, 4)
    assert (v.x, v.y) == (2, 1)
    vec_set(v, 7)
    assert (v.x, v.y) == (7, 7)


def test_copy_is_independent():
    from geomkit.vector import vec, vec_copy
    a = vec(1, 2)
    b = vec_copy(a)
    b.x = 5
    assert a.x == 1


def test_rotation_preserves_magnitude():
    from geomkit.vector import vec, vec_rot, vec_mag
    v = vec(3, 4)
    vec_rot(v, math.pi / 2)
    assert v.x == pytest.approx(-4)
    assert v.y == pytest.approx(3)
    assert vec_mag(v) == pytest.approx(5)


def test_norm():
    from geomkit.vector import vec, vec_norm, vec_mag
    v = vec(3, 4)
    n = vec_norm(v, copy=True)
    assert vec_mag(n) == pytest.approx(1)
    assert (v.x, v.y) == (3, 4)
    assert vec_norm(v) is v
    assert v.x == pytest.approx(0.6)

    zero = vec()
    assert vec_norm(zero) is zero
    assert (zero.x, zero.y) == (0, 0)


def test_limit():
    from geomkit.vector import vec, vec_limit, vec_mag
    v = vec_limit(vec(30, 40), 10)
    assert vec_mag(v) == pytest.approx(10)
    assert v.x == pytest.approx(6)
    small = vec_limit(vec(1, 1), 10)
    assert (small.x, small.y) == (1, 1)


def test_distances_and_products():
    from geomkit.vector import vec, vec_dist, vec_dist2, vec_dot, vec_cross, vec_dir, vec_mag2
    a = vec(1, 1)
    b = vec(4, 5)
    assert vec_dist(a, b) == 5
    assert vec_dist2(a, b) == 25
    assert vec_dot(a, b) == 9
    assert vec_cross(a, b) == 1
    assert vec_dir(vec(0, 2)) == pytest.approx(math.pi / 2)
    assert vec_mag2(b) == 41


def test_lerp():
    from geomkit.vector import vec, vec_lerp
    a = vec(0, 10)
    vec_lerp(a, vec(10, 20), 0.5)
    assert (a.x, a.y) == (5, 15)


def test_rand_uses_configured_source(monkeypatch):
    from geomkit import vector
    draws = iter([0.25, 0.5])
    monkeypatch.setattr(vector.vecconfig, "random", lambda: next(draws))
    v = vector.vec_rand(2, 4)
    # angle = pi / 2, radius = 3
    assert v.x == pytest.approx(0, abs=1e-12)
    assert v.y == pytest.approx(3)


def test_rand_default_length():
    from geomkit.vector import vec_rand, vec_mag
    assert vec_mag(vec_rand()) == pytest.approx(1)
    assert vec_mag(vec_rand(2.5)) == pytest.approx(2.5)


def test_lerp_ignores_nan_steps():
    from geomkit.vector import vec, vec_lerp
    a = vec(1, 1)
    vec_lerp(a, vec(math.inf, 3), 0)
    assert (a.x, a.y) == (1, 1)
    vec_lerp(a, vec(math.inf, 3), 1)
    assert a.x == math.inf
    assert a.y == 3
