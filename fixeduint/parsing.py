"""Parsing fixed-width unsigned integers from text."""

from __future__ import annotations

from typing import Iterator, List, Optional

from fixeduint.uint import Uint

_MAX_RADIX = 64
_PREFIXES = {"0x": 16, "0X": 16, "0o": 8, "0O": 8, "0b": 2, "0B": 2}


class ParseError(ValueError):
    """A string could not be parsed as an unsigned integer."""


class InvalidDigitError(ParseError):
    """The string holds a character that is not a digit."""

    def __init__(self, digit: str) -> None:
        super().__init__(f"invalid digit: {digit}")
        self.digit = digit


class InvalidRadixError(ParseError):
    """The radix is larger than supported."""

    def __init__(self, radix: int) -> None:
        super().__init__(f"invalid radix {radix}, up to {_MAX_RADIX} is supported")
        self.radix = radix


class BaseConvertError(ParseError):
    """The digits could not be converted to a value of the target width."""


def _digit_value(char: str, radix: int) -> Optional[int]:
    """Digit value of ``char``, None for ignored characters; raises on others."""
    if radix <= 36:
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        if "a" <= char <= "z":
            return ord(char) - ord("a") + 10
        if "A" <= char <= "Z":
            return ord(char) - ord("A") + 10
        if char == "_":
            return None
    else:
        if "A" <= char <= "Z":
            return ord(char) - ord("A")
        if "a" <= char <= "f":
            return ord(char) - ord("a") + 26
        if "0" <= char <= "9":
            return ord(char) - ord("0") + 52
        if char in "+-":
            return 62
        if char in "/,_":
            return 63
        if char in "=\r\n":
            return None
    raise InvalidDigitError(char)


def _from_base_be(radix: int, digits: List[int], bits: int) -> Uint:
    if radix < 2:
        raise BaseConvertError(f"the requested number base {radix} is less than two")
    limit = 1 << bits
    value = 0
    for digit in digits:
        if digit >= radix:
            raise BaseConvertError(f"digit {digit} is out of range for base {radix}")
        value = value * radix + digit
        if value >= limit:
            raise BaseConvertError("the value is too large to fit the target type")
    return Uint(bits, value)


def _scan(src: str, radix: int, errors: List[ParseError]) -> Iterator[int]:
    for char in src:
        try:
            digit = _digit_value(char, radix)
        except InvalidDigitError as error:
            errors.append(error)
            return
        if digit is not None:
            yield digit


def from_str_radix(src: str, radix: int, bits: int) -> Uint:
    """Parse ``src`` in the given radix into a ``bits``-wide integer.

    Bases up to 36 use the case-insensitive alphabet 0-9, a-z and ignore
    ``_``. Bases 37 to 64 use the base-64 alphabet and ignore ``=``, CR and LF.
    """
    if radix > _MAX_RADIX:
        raise InvalidRadixError(radix)
    errors: List[ParseError] = []
    digits = list(_scan(src, radix, errors))
    value = _from_base_be(radix, digits, bits)
    if errors:
        raise errors[0]
    return value


def from_str(src: str, bits: int) -> Uint:
    """Parse ``src``, honouring a ``0x``, ``0o`` or ``0b`` prefix; decimal otherwise."""
    radix = _PREFIXES.get(src[:2]) if len(src) >= 2 else None
    if radix is None:
        return from_str_radix(src, 10, bits)
    return from_str_radix(src[2:], radix, bits)