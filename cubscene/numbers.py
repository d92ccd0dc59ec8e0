"""Integer parsing and formatting with fixed-width integer behaviour."""

from __future__ import annotations

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_INT64_MAX = (1 << 63) - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _digits_from(text: str, pos: int):
    while pos < len(text) and text[pos] in _DIGITS:
        yield ord(text[pos]) - 48
        pos += 1


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit.  A magnitude above the 64-bit signed maximum gives -1, except
    for exactly 2**63 with a minus sign, which gives 0.  Other values wrap to
    32 bits.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign, pos = _read_sign(text, pos)
    result = 0
    for digit in _digits_from(text, pos):
        result = (result * 10 + digit) & _MASK64
    if result > _INT64_MAX:
        if sign < 0 and result == _INT64_MAX + 1:
            return 0
        return -1
    return _wrap_signed((result * sign) & _MASK32, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value.

    No whitespace is skipped; one sign is accepted and parsing stops at the
    first non-digit.  Overflow wraps to 64 bits.
    """
    sign, pos = _read_sign(text, 0)
    result = 0
    for digit in _digits_from(text, pos):
        result = _wrap_signed(result * 10 + digit, 64)
    return _wrap_signed(result * sign, 64)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(_wrap_signed(n, 32))