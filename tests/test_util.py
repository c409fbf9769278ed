import math

import pytest

from noradsched import util


def test_mod_is_always_positive_for_positive_divisor():
    assert util.mod(-3, 4) == 1
    assert math.fmod(-3, 4) == -3


def test_mod_with_zero_divisor_returns_x():
    assert util.mod(7.5, 0.0) == 7.5


@pytest.mark.parametrize("x", [-1000.3, -7.0, -0.1, 0.0, 0.2, 9.9, 12345.6])
def test_mod_range(x):
    r = util.mod(x, 4.0)
    assert 0.0 <= r < 4.0
    assert math.isclose(r, x % 4.0, abs_tol=1e-9)


@pytest.mark.parametrize("a", [-20.0, -math.pi, -1.0, 0.0, 1.0, 3.5, 7.0, 40.0])
def test_wrap_two_pi_range_and_equivalence(a):
    w = util.wrap_two_pi(a)
    assert 0.0 <= w < util.TWOPI
    assert math.isclose(math.sin(w), math.sin(a), abs_tol=1e-9)
    assert math.isclose(math.cos(w), math.cos(a), abs_tol=1e-9)


@pytest.mark.parametrize("a", [-20.0, -1.0, 0.0, 1.0, 3.5, 7.0, 40.0])
def test_wrap_neg_pos_pi_range(a):
    w = util.wrap_neg_pos_pi(a)
    assert -util.PI <= w < util.PI
    assert math.isclose(math.cos(w), math.cos(a), abs_tol=1e-9)


@pytest.mark.parametrize("a", [-725.0, -180.0, -10.0, 0.0, 179.0, 540.0])
def test_wrap_degrees(a):
    w360 = util.wrap_360(a)
    w180 = util.wrap_neg_pos_180(a)
    assert 0.0 <= w360 < 360.0
    assert -180.0 <= w180 < 180.0
    assert math.isclose(util.mod(w360 - w180, 360.0), 0.0, abs_tol=1e-9)


def test_degrees_to_radians_half_turn():
    assert util.degrees_to_radians(180.0) == pytest.approx(util.PI)
    assert util.radians_to_degrees(util.PI) == pytest.approx(180.0)


@pytest.mark.parametrize("deg", [-270.0, -45.5, 0.0, 12.25, 359.0])
def test_degree_radian_round_trip(deg):
    assert util.radians_to_degrees(util.degrees_to_radians(deg)) == pytest.approx(deg)


def test_ac_tan_with_zero_cosine():
    assert util.ac_tan(1.0, 0.0) == pytest.approx(util.PI / 2.0)
    assert util.ac_tan(-1.0, 0.0) == pytest.approx(3.0 * util.PI / 2.0)
    assert util.ac_tan(0.0, 0.0) == pytest.approx(3.0 * util.PI / 2.0)


@pytest.mark.parametrize("t", [-1.2, -0.5, 0.0, 0.7, 1.5, 2.0, 3.0, 4.0, 4.6])
def test_ac_tan_recovers_angle(t):
    assert util.ac_tan(math.sin(t), math.cos(t)) == pytest.approx(t)


def test_derived_constants_are_consistent():
    assert util.degrees_to_radians(360.0) == pytest.approx(util.TWOPI)
    assert util.wrap_two_pi(util.TWOPI + 1.0) == pytest.approx(1.0)
    assert util.TWOPI == pytest.approx(2.0 * math.pi)
    assert util.XKE == pytest.approx(60.0 / math.sqrt(util.XKMPER ** 3 / util.MU))
    assert util.CK2 == pytest.approx(util.XJ2 / 2.0)