"""Unsigned integers of a fixed bit width with overflow-aware arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

_LN2_1P5 = 0.5849625007211562
_EXP2_63 = 9223372036854775808.0
_U64_MAX = (1 << 64) - 1


@dataclass(frozen=True, slots=True)
class Uint:
    """An unsigned integer holding exactly ``bits`` bits."""

    bits: int
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.bits, int) or self.bits < 0:
            raise ValueError(f"bit width must be a non-negative integer, got {self.bits!r}")
        if not isinstance(self.value, int):
            raise TypeError(f"value must be an integer, got {type(self.value).__name__}")
        if not 0 <= self.value < (1 << self.bits):
            raise ValueError(f"value {self.value} does not fit in {self.bits} bits")

    # Construction -------------------------------------------------------

    @classmethod
    def zero(cls, bits: int) -> Uint:
        """The value zero."""
        return cls(bits, 0)

    @classmethod
    def one(cls, bits: int) -> Uint:
        """The value one, or zero when the width is zero."""
        return cls(bits, 1 if bits > 0 else 0)

    @classmethod
    def max(cls, bits: int) -> Uint:
        """The largest value of the given width."""
        return cls(bits, (1 << bits) - 1)

    @classmethod
    def product(cls, bits: int, values: Iterable[Uint]) -> Uint:
        """Wrapping product of ``values``; one for an empty iterable."""
        if bits == 0:
            return cls.zero(bits)
        result = cls.one(bits)
        for value in values:
            result = result.wrapping_mul(value)
        return result

    @classmethod
    def _try_new(cls, bits: int, value: int) -> Optional[Uint]:
        if 0 <= value < (1 << bits):
            return cls(bits, value)
        return None

    # Helpers ------------------------------------------------------------

    @property
    def _mask(self) -> int:
        return (1 << self.bits) - 1

    def _check(self, other: Uint) -> int:
        if not isinstance(other, Uint):
            raise TypeError(f"expected Uint, got {type(other).__name__}")
        if other.bits != self.bits:
            raise ValueError(f"bit widths differ: {self.bits} and {other.bits}")
        return other.value

    def _operand(self, other: object) -> Optional[int]:
        if not isinstance(other, Uint):
            return None
        return self._check(other)

    def _split(self, full: int) -> Tuple[Uint, bool]:
        return Uint(self.bits, full & self._mask), (full >> self.bits) != 0

    # Multiplication -----------------------------------------------------

    def overflowing_mul(self, rhs: Uint) -> Tuple[Uint, bool]:
        """Wrapped product and whether it overflowed."""
        return self._split(self.value * self._check(rhs))

    def checked_mul(self, rhs: Uint) -> Optional[Uint]:
        """Product, or None on overflow."""
        result, overflow = self.overflowing_mul(rhs)
        return None if overflow else result

    def saturating_mul(self, rhs: Uint) -> Uint:
        """Product, clamped to the maximum value on overflow."""
        result, overflow = self.overflowing_mul(rhs)
        return Uint.max(self.bits) if overflow else result

    def wrapping_mul(self, rhs: Uint) -> Uint:
        """Product modulo 2**bits."""
        return self.overflowing_mul(rhs)[0]

    def inv_ring(self) -> Optional[Uint]:
        """Inverse modulo 2**bits, or None if it does not exist."""
        if self.bits == 0 or self.value & 1 == 0:
            return None
        return Uint(self.bits, pow(self.value, -1, 1 << self.bits))

    def widening_mul(self, rhs: Uint) -> Uint:
        """Exact product, with width equal to the sum of both widths."""
        if not isinstance(rhs, Uint):
            raise TypeError(f"expected Uint, got {type(rhs).__name__}")
        return Uint(self.bits + rhs.bits, self.value * rhs.value)

    # Exponentiation -----------------------------------------------------

    def overflowing_pow(self, exp: Uint) -> Tuple[Uint, bool]:
        """Wrapped power and whether it overflowed."""
        e = self._check(exp)
        if self.bits == 0:
            return self, False
        mask = self._mask
        base = self.value
        result = 1
        overflow = False
        base_overflow = False
        while e:
            if e & 1:
                full = result * base
                result = full & mask
                overflow = overflow or (full >> self.bits) != 0 or base_overflow
            square = base * base
            base = square & mask
            base_overflow = base_overflow or (square >> self.bits) != 0
            e >>= 1
        return Uint(self.bits, result), overflow

    def checked_pow(self, exp: Uint) -> Optional[Uint]:
        """Power, or None on overflow."""
        result, overflow = self.overflowing_pow(exp)
        return None if overflow else result

    def pow(self, exp: Uint) -> Uint:
        """Power modulo 2**bits."""
        return self.wrapping_pow(exp)

    def saturating_pow(self, exp: Uint) -> Uint:
        """Power, clamped to the maximum value on overflow."""
        result, overflow = self.overflowing_pow(exp)
        return Uint.max(self.bits) if overflow else result

    def wrapping_pow(self, exp: Uint) -> Uint:
        """Power modulo 2**bits."""
        e = self._check(exp)
        if self.bits == 0:
            return self
        return Uint(self.bits, pow(self.value, e, 1 << self.bits))

    @classmethod
    def approx_pow2(cls, bits: int, exp: float) -> Optional[Uint]:
        """Approximate 2**exp as an integer of the given width, or None if too large."""
        if exp < _LN2_1P5:
            if exp < -1.0:
                return cls.zero(bits)
            return cls._try_new(bits, 1)
        if exp > float(bits):
            return None

        shift = math.trunc(exp)
        fract = exp - shift
        lead = min(int(2.0**fract * _EXP2_63), _U64_MAX)

        if shift >= 63:
            start = cls._try_new(bits, lead)
            if start is None:
                return None
            return cls._try_new(bits, start.value << (shift - 63))
        down = 63 - shift
        rounded = (lead >> down) + ((lead >> (down - 1)) & 1)
        return cls._try_new(bits, rounded)

    # Powers of two and multiples ----------------------------------------

    def is_power_of_two(self) -> bool:
        """True when the value is 2**k for some k."""
        return bin(self.value).count("1") == 1

    def checked_next_power_of_two(self) -> Optional[Uint]:
        """Smallest power of two not below the value, or None on overflow."""
        if self.is_power_of_two():
            return self
        exp = self.value.bit_length()
        if exp >= self.bits:
            return None
        return Uint(self.bits, 1 << exp)

    def next_power_of_two(self) -> Uint:
        """Smallest power of two not below the value; raises OverflowError if none fits."""
        result = self.checked_next_power_of_two()
        if result is None:
            raise OverflowError(f"next power of two of {self.value} exceeds {self.bits} bits")
        return result

    def checked_next_multiple_of(self, rhs: Uint) -> Optional[Uint]:
        """Smallest multiple of ``rhs`` not below the value, or None."""
        divisor = self._check(rhs)
        if divisor == 0:
            return None
        quotient, remainder = divmod(self.value, divisor)
        if remainder == 0:
            return self
        return self._try_new(self.bits, (quotient + 1) * divisor)

    def next_multiple_of(self, rhs: Uint) -> Uint:
        """Smallest multiple of ``rhs`` not below the value.

        Raises ZeroDivisionError for a zero ``rhs`` and OverflowError when
        the result does not fit.
        """
        if self._check(rhs) == 0:
            raise ZeroDivisionError("next multiple of zero")
        result = self.checked_next_multiple_of(rhs)
        if result is None:
            raise OverflowError(f"next multiple exceeds {self.bits} bits")
        return result

    # Operators ----------------------------------------------------------

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"Uint({self.bits}, {self.value:#x})"

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        v = self._operand(other)
        return NotImplemented if v is None else self.value < v

    def __le__(self, other: object) -> bool:
        v = self._operand(other)
        return NotImplemented if v is None else self.value <= v

    def __gt__(self, other: object) -> bool:
        v = self._operand(other)
        return NotImplemented if v is None else self.value > v

    def __ge__(self, other: object) -> bool:
        v = self._operand(other)
        return NotImplemented if v is None else self.value >= v

    def __mul__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, (self.value * v) & self._mask)

    def __add__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, (self.value + v) & self._mask)

    def __sub__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, (self.value - v) & self._mask)

    def __or__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, self.value | v)

    def __and__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, self.value & v)

    def __xor__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, self.value ^ v)

    def __lshift__(self, shift: int) -> Uint:
        if shift < 0:
            raise ValueError("negative shift count")
        return Uint(self.bits, (self.value << shift) & self._mask)

    def __rshift__(self, shift: int) -> Uint:
        if shift < 0:
            raise ValueError("negative shift count")
        return Uint(self.bits, self.value >> shift)

    def __floordiv__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, self.value // v)

    def __mod__(self, other: object) -> Uint:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return Uint(self.bits, self.value % v)