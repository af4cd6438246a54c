# fixeduint

Unsigned integers with a fixed bit length, for code that needs the exact
overflow behaviour of a machine word of any size: 1 bit, 64 bits, 256 bits,
or more.

Each value is a `Uint` (in `fixeduint.uint`) that carries its bit length
alongside its value. Constructing a `Uint` whose value does not fit the width
raises `ValueError`. Arithmetic comes in the usual flavours:

- `wrapping_*`: the result is reduced modulo `2**bits`;
- `overflowing_*`: the wrapped result together with an overflow flag;
- `checked_*`: `None` on overflow;
- `saturating_*`: clamps to the largest value on overflow.

## Basic arithmetic

```python
from fixeduint.uint import Uint

a = Uint(64, 36)
a.overflowing_pow(Uint(64, 12))   # (Uint(64, 0x41c21cb8e1000000), False)
a.overflowing_pow(Uint(64, 13))   # (Uint(64, 0x3f4c09ffa4000000), True)
a.checked_pow(Uint(64, 13))       # None
a.saturating_pow(Uint(64, 13))    # == Uint.max(64)

Uint(2, 3).widening_mul(Uint(3, 7))   # == Uint(5, 21)
Uint(64, 7).inv_ring()                # inverse of 7 modulo 2**64

Uint(64, 3).checked_next_power_of_two()              # == Uint(64, 4)
Uint(64, 23).checked_next_multiple_of(Uint(64, 8))   # == Uint(64, 24)
Uint.approx_pow2(64, 10.385)                         # == Uint(64, 1337)
Uint.product(64, [Uint(64, 2), Uint(64, 3)])         # == Uint(64, 6)
```

Multiplication offers `overflowing_mul`, `checked_mul`, `saturating_mul`,
`wrapping_mul` and `widening_mul`; powers offer `overflowing_pow`,
`checked_pow`, `saturating_pow`, `wrapping_pow` and `pow` (wrapping).
`is_power_of_two`, `next_power_of_two` and `next_multiple_of` complete the
set. `next_power_of_two` raises `OverflowError` when the result does not fit;
`next_multiple_of` raises `ZeroDivisionError` for a zero divisor and
`OverflowError` when the result does not fit.

`Uint.zero(bits)`, `Uint.one(bits)` and `Uint.max(bits)` build the common
constants.

The operators `+`, `-`, `*`, `//`, `%`, `&`, `|`, `^`, `<<`, `>>` and the
ordering comparisons work between values of the same width; arithmetic
operators wrap modulo `2**bits`. Mixing widths raises `ValueError`. `int()`
gives the plain integer value.

## Modular arithmetic

```python
from fixeduint.modular import add_mod, mul_mod, pow_mod, inv_mod, reduce_mod
from fixeduint.uint import Uint

m = Uint(256, 97)
mul_mod(Uint(256, 5), Uint(256, 6), m)    # == Uint(256, 30)
pow_mod(Uint(256, 2), Uint(256, 10), m)
inv_mod(Uint(256, 3), m)                  # None when there is no inverse
```

A zero modulus gives zero (`pow_mod` also gives zero for a modulus of one).
`mul_redc` and `square_redc` provide Montgomery multiplication and squaring
for odd moduli. They take the extra argument `inv = -modulus**-1 mod 2**64`
and raise `ValueError` if `inv` is wrong or an operand is not below the
modulus.

## Integer roots

```python
from fixeduint.root import root
from fixeduint.uint import Uint

root(Uint(64, 1_000_000), 3)   # == Uint(64, 100)
```

`root` returns the floor of the root and raises `ValueError` for a degree
that is not positive.

## Parsing

```python
from fixeduint.parsing import from_str, from_str_radix, ParseError

from_str("0xff", 128)              # == Uint(128, 255)
from_str("1_000_000", 64)          # underscores are ignored
from_str_radix("zz", 36, 64)       # bases up to 64 are supported
```

`from_str` recognises the `0x`, `0o` and `0b` prefixes (either case) and
falls back to decimal. Bases up to 36 use the case-insensitive alphabet
0-9, a-z; bases 37 to 64 use the base-64 alphabet and ignore `=`, CR and LF.
Bad input raises a subclass of `ParseError` (itself a `ValueError`):

- `InvalidDigitError` for a character that is not a digit;
- `InvalidRadixError` for a radix above 64;
- `BaseConvertError` when the value does not fit, a digit is out of range
  for the base, or the base is below two.

## What it does not do

There are no signed integers, no conversion to or from bytes, and no
formatting in other bases beyond Python's own `str`, `repr` and `int`.
There is no command-line tool.

## Tests

The tests use pytest and hypothesis, listed in the `test` extra.