"""Integer roots of fixed-width unsigned integers."""

from __future__ import annotations

import math

from fixeduint.uint import Uint


def _saturating_double(value: Uint) -> Uint:
    doubled = value.value << 1
    if doubled >> value.bits:
        return Uint.max(value.bits)
    return Uint(value.bits, doubled)


def root(value: Uint, degree: int) -> Uint:
    """Floor of the ``degree``-th root of ``value``.

    Raises ValueError if ``degree`` is not positive.
    """
    if degree <= 0:
        raise ValueError("degree must be greater than zero")
    bits = value.bits

    if value.value == 0:
        return Uint.zero(bits)
    if degree >= bits:
        return Uint.one(bits)
    if degree == 1:
        return value

    result = Uint.approx_pow2(bits, math.log2(value.value) / degree)
    if result is None:
        result = value

    deg = Uint(bits, degree)
    deg_m1 = Uint(bits, degree - 1)
    decreasing = False
    while True:
        power = result.checked_pow(deg_m1)
        division = Uint.zero(bits) if power is None else value // power
        step = (division + deg_m1 * result) // deg
        if step == result or (decreasing and step > result):
            return result
        if step > result:
            # Cap growth at a factor of two so a low guess converges quickly.
            result = min(step, _saturating_double(result))
        else:
            decreasing = True
            result = step