import pytest

from bgengine.fixed import Scalar
from bgengine.fixmath import distance, length, normalize_approx, sqrt
from bgengine.vec2 import Vec2


def vec(x, y):
    return Vec2(Scalar.from_int(x), Scalar.from_int(y))


@pytest.mark.parametrize("n", [0, 1, 2, 7, 100, 1000])
def test_sqrt_of_square_returns_root(n):
    root = Scalar.from_int(n)
    assert sqrt(root * root) == root


def test_sqrt_of_one_is_one():
    assert sqrt(Scalar.one()) == Scalar.one()


def test_sqrt_of_non_positive_is_zero():
    assert sqrt(Scalar.zero()) == Scalar.zero()
    assert sqrt(Scalar.from_int(-9)) == Scalar.zero()


def test_sqrt_is_floor():
    value = Scalar.from_raw(Scalar.ONE_RAW * 2)
    root = sqrt(value)
    assert root * root <= value
    bigger = Scalar.from_raw(root.raw + 1)
    assert (bigger.raw * bigger.raw) > (value.raw << 16)


def test_sqrt_rejects_oversized_input():
    with pytest.raises(OverflowError):
        sqrt(Scalar.from_raw(1 << 50))


def test_length_of_three_four_vector():
    assert length(vec(3, 4)) == Scalar.from_int(5)


def test_length_of_axis_vector_equals_component():
    assert length(vec(0, -6)) == Scalar.from_int(6)


def test_distance_is_symmetric_and_matches_length():
    a = vec(1, 2)
    b = vec(-5, 10)
    assert distance(a, b) == distance(b, a)
    assert distance(a, b) == length(a - b)
    assert distance(a, a) == Scalar.zero()


def test_normalize_zero_vector_stays_zero():
    assert normalize_approx(Vec2.zero()) == Vec2.zero()


def test_normalize_axis_vector_gives_unit():
    assert normalize_approx(vec(7, 0)) == Vec2(Scalar.one(), Scalar.zero())


@pytest.mark.parametrize("x, y", [(3, 4), (-2, 9), (10, -10), (1, 1)])
def test_normalized_length_is_close_to_one(x, y):
    unit = normalize_approx(vec(x, y))
    assert abs(length(unit) - Scalar.one()).raw <= 4
    assert (unit.x.raw < 0) == (x < 0)
    assert (unit.y.raw < 0) == (y < 0)