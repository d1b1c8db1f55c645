import pytest

from bgengine.fixed import Scalar
from bgengine.hashing import Hasher64
from bgengine.state_hash import StateHash
from bgengine.vec2 import Vec2


def test_initial_value_is_offset_basis():
    assert StateHash().value() == 14695981039346656037


def test_reset_restores_initial_value():
    state = StateHash()
    state.add_u32(7)
    state.reset()
    assert state.value() == 14695981039346656037


def test_bool_hashes_as_single_byte():
    for flag, byte in ((True, 1), (False, 0)):
        state = StateHash()
        state.add_bool(flag)
        hasher = Hasher64()
        hasher.add_u8(byte)
        assert state.value() == hasher.value()


def test_scalar_hashes_raw_value():
    value = Scalar.from_raw(-12345)
    state = StateHash()
    state.add_scalar(value)
    hasher = Hasher64()
    hasher.add_i64(-12345)
    assert state.value() == hasher.value()


def test_vec2_equals_two_scalars():
    vector = Vec2(Scalar.from_int(3), Scalar.from_int(-4))
    a = StateHash()
    a.add_vec2(vector)
    b = StateHash()
    b.add_scalar(vector.x)
    b.add_scalar(vector.y)
    assert a.value() == b.value()


@pytest.mark.parametrize(
    "method,value",
    [("add_u32", 5), ("add_i32", -5), ("add_u64", 5), ("add_i64", -5)],
)
def test_integer_adds_match_hasher(method, value):
    state = StateHash()
    getattr(state, method)(value)
    hasher = Hasher64()
    getattr(hasher, method)(value)
    assert state.value() == hasher.value()


def test_order_matters():
    a = StateHash()
    a.add_u32(1)
    a.add_u32(2)
    b = StateHash()
    b.add_u32(2)
    b.add_u32(1)
    assert a.value() != b.value()
    assert a.value() > 0


def test_out_of_range_raises():
    with pytest.raises(OverflowError):
        StateHash().add_u32(-1)