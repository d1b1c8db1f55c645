import pytest

from bgengine.fixed import HALF_RAW, I64_MAX, I64_MIN, ONE_RAW, Scalar


def test_constants_follow_sixteen_fraction_bits():
    assert Scalar.one().raw == ONE_RAW == 1 << 16
    assert Scalar.half().raw == HALF_RAW == 1 << 15
    assert Scalar.zero().raw == 0
    assert Scalar().is_zero()


@pytest.mark.parametrize("value", [0, 1, -1, 5, -37, 32767])
def test_from_int_round_trips_through_trunc(value):
    assert Scalar.from_int(value).trunc_to_int() == value


def test_from_raw_keeps_raw():
    assert Scalar.from_raw(12345).raw == 12345


def test_trunc_goes_toward_zero():
    assert Scalar.from_raw(-HALF_RAW).trunc_to_int() == 0
    assert Scalar.from_raw(HALF_RAW).trunc_to_int() == 0
    assert (Scalar.from_int(-3) - Scalar.half()).trunc_to_int() == -3


def test_to_float_of_half():
    assert Scalar.half().to_float() == 0.5
    assert Scalar.from_int(-7).to_float() == -7.0


@pytest.mark.parametrize("raw", [0, 1, -1, ONE_RAW * 3 + 17, -(ONE_RAW * 11) - 5])
def test_multiply_and_divide_by_one_are_identity(raw):
    value = Scalar.from_raw(raw)
    assert value * Scalar.one() == value
    assert value / Scalar.one() == value


def test_multiplication_commutes_and_respects_sign():
    a = Scalar.from_raw(ONE_RAW * 5 + 123)
    b = Scalar.from_raw(-(ONE_RAW * 2) - 77)
    assert a * b == b * a
    assert (-a) * b == -(a * b)
    assert (-a) * (-b) == a * b


def test_multiplication_truncates_toward_zero():
    assert Scalar.from_raw(-1) * Scalar.half() == Scalar.zero()
    assert Scalar.from_raw(1) * Scalar.half() == Scalar.zero()


def test_integer_product_and_quotient_round_trip():
    a = Scalar.from_int(9)
    b = Scalar.from_int(4)
    assert (a * b) / b == a
    assert (a / b) * b == a


def test_add_and_sub_are_inverse():
    a = Scalar.from_raw(98765)
    b = Scalar.from_raw(-4321)
    assert (a + b) - b == a
    assert a - a == Scalar.zero()
    assert +a == a


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Scalar.one() / Scalar.zero()


def test_overflow_raises():
    with pytest.raises(OverflowError):
        Scalar.from_raw(I64_MAX) * Scalar.from_int(2)
    with pytest.raises(OverflowError):
        Scalar.from_raw(I64_MAX) / Scalar.half()
    with pytest.raises(OverflowError):
        -Scalar.from_raw(I64_MIN)
    with pytest.raises(OverflowError):
        Scalar.from_raw(I64_MAX) + Scalar.from_raw(1)


def test_abs_min_max_and_ordering():
    a = Scalar.from_int(-2)
    b = Scalar.from_int(3)
    assert abs(a) == Scalar.from_int(2)
    assert abs(b) == b
    assert Scalar.min(a, b) == a
    assert Scalar.max(a, b) == b
    assert a < b <= b
    assert b > a >= a


def test_non_integer_raw_rejected():
    with pytest.raises(TypeError):
        Scalar(1.5)