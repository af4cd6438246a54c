import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeduint.root import root
from fixeduint.uint import Uint

SIZES = [4, 8, 16, 63, 64, 65, 128, 256]


def check_root(value, degree):
    bits = value.bits
    result = root(value, degree)
    lower = result.pow(Uint(bits, degree))
    assert value >= lower
    if result.value + 1 < (1 << bits):
        upper = Uint(bits, result.value + 1).checked_pow(Uint(bits, degree))
        if upper is not None:
            assert value < upper
        else:
            assert (result.value + 1) ** degree >= (1 << bits)


@given(st.data(), st.sampled_from(SIZES), st.integers(1, 5))
def test_root(data, bits, degree):
    value = Uint(bits, data.draw(st.integers(0, (1 << bits) - 1)))
    check_root(value, degree)


@given(st.data(), st.sampled_from(SIZES))
def test_root_large(data, bits):
    value = Uint(bits, data.draw(st.integers(0, (1 << bits) - 1)))
    degree = data.draw(st.integers(1, bits))
    check_root(value, degree)


def test_examples():
    assert root(Uint(64, 0), 2) == Uint(64, 0)
    assert root(Uint(64, 1), 63) == Uint(64, 1)
    assert root(Uint(63, 0x0032DA8B0F88575D), 64) == Uint(63, 1)
    assert root(Uint(63, 0x1756800000000000), 34) == Uint(63, 3)


def test_slow_convergence_case():
    value = Uint(
        256, 0x215F07147D573EF203E1F268AB1516D3F294619DB820C5DFD0B334E4D06320B7
    )
    assert root(value, 196) == Uint(256, 2)


def test_square_root_pinned():
    assert root(Uint(64, 1000000), 2) == Uint(64, 1000)
    assert root(Uint(64, 999999), 2) == Uint(64, 999)
    assert root(Uint(64, 27), 3) == Uint(64, 3)


def test_degree_one_and_zero_width():
    assert root(Uint(16, 12345), 1) == Uint(16, 12345)
    assert root(Uint(0, 0), 3) == Uint(0, 0)


def test_zero_degree_raises():
    with pytest.raises(ValueError):
        root(Uint(64, 5), 0)