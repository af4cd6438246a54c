"""Modular arithmetic on fixed-width unsigned integers."""

from __future__ import annotations

from typing import Optional

from fixeduint.uint import Uint

_U64_MASK = (1 << 64) - 1


def _width(first: Uint, *others: Uint) -> int:
    for value in (first, *others):
        if not isinstance(value, Uint):
            raise TypeError(f"expected Uint, got {type(value).__name__}")
        if value.bits != first.bits:
            raise ValueError(f"bit widths differ: {first.bits} and {value.bits}")
    return first.bits


def reduce_mod(value: Uint, modulus: Uint) -> Uint:
    """Value modulo ``modulus``; zero when the modulus is zero."""
    bits = _width(value, modulus)
    if modulus.value == 0:
        return Uint.zero(bits)
    return Uint(bits, value.value % modulus.value)


def add_mod(lhs: Uint, rhs: Uint, modulus: Uint) -> Uint:
    """Sum modulo ``modulus``; zero when the modulus is zero."""
    bits = _width(lhs, rhs, modulus)
    if modulus.value == 0:
        return Uint.zero(bits)
    return Uint(bits, (lhs.value + rhs.value) % modulus.value)


def mul_mod(lhs: Uint, rhs: Uint, modulus: Uint) -> Uint:
    """Product modulo ``modulus``; zero when the modulus is zero."""
    bits = _width(lhs, rhs, modulus)
    if modulus.value == 0:
        return Uint.zero(bits)
    return Uint(bits, (lhs.value * rhs.value) % modulus.value)


def pow_mod(base: Uint, exp: Uint, modulus: Uint) -> Uint:
    """Power modulo ``modulus``; zero when the modulus is zero or one."""
    bits = _width(base, exp, modulus)
    if bits == 0 or modulus.value <= 1:
        return Uint.zero(bits)
    return Uint(bits, pow(base.value, exp.value, modulus.value))


def inv_mod(value: Uint, modulus: Uint) -> Optional[Uint]:
    """Inverse of ``value`` modulo ``modulus``, or None if none exists."""
    bits = _width(value, modulus)
    if modulus.value <= 1:
        return None
    try:
        inverse = pow(value.value, -1, modulus.value)
    except ValueError:
        return None
    return Uint(bits, inverse)


def mul_redc(lhs: Uint, rhs: Uint, modulus: Uint, inv: int) -> Uint:
    """Montgomery product ``lhs * rhs / 2**(64*limbs)`` modulo ``modulus``.

    ``inv`` must equal ``-1 / modulus`` modulo 2**64 and both operands must
    be below the modulus; ValueError is raised otherwise.
    """
    bits = _width(lhs, rhs, modulus)
    if bits == 0:
        return Uint.zero(0)
    m = modulus.value
    if not 0 <= inv <= _U64_MASK or (m * inv + 1) & _U64_MASK:
        raise ValueError("inv must be -1/modulus modulo 2**64")
    if lhs.value >= m or rhs.value >= m:
        raise ValueError("operands must be less than the modulus")

    limbs = -(-bits // 64)
    t = lhs.value * rhs.value
    for _ in range(limbs):
        factor = ((t & _U64_MASK) * inv) & _U64_MASK
        t = (t + factor * m) >> 64
    if t >= m:
        t -= m
    return Uint(bits, t)


def square_redc(value: Uint, modulus: Uint, inv: int) -> Uint:
    """Montgomery square; see :func:`mul_redc`."""
    return mul_redc(value, value, modulus, inv)