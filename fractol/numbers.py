"""Lenient number parsing and formatting used for command-line values."""

from __future__ import annotations

from .chars import is_digit

_WHITESPACE = frozenset(" \t\n\v\f\r")


def parse_double(text: str) -> float:
    """Parse a decimal number the lenient way.

    Leading whitespace is skipped and any run of sign characters toggles
    the sign for each minus. Every character up to a '.' counts as a digit
    of the integer part and every character after it as a digit of the
    fraction; no validation is done here (see ``is_valid_number``).
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    signs = len(rest) - len(rest.lstrip("+-"))
    for ch in rest[:signs]:
        if ch == "-":
            sign = -sign
    rest = rest[signs:]

    int_text, _, frac_text = rest.partition(".")
    integer = 0
    for ch in int_text:
        integer = integer * 10 + (ord(ch) - ord("0"))

    fraction = 0.0
    scale = 1.0
    for ch in frac_text:
        scale /= 10
        fraction += (ord(ch) - ord("0")) * scale

    return (integer + fraction) * sign


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, stopping at the first non-digit.

    Leading whitespace and a single optional sign are accepted; text that
    does not start with a number yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def int_to_str(n: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def absolute(n: int) -> int:
    """Return the absolute value of an integer."""
    return -n if n < 0 else n


def is_valid_number(text: str | None) -> bool:
    """Check that text is an optionally signed decimal with at least one digit.

    At most one decimal point is allowed, anywhere after the sign.
    """
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    has_digit = False
    seen_point = False
    for ch in body:
        if is_digit(ch):
            has_digit = True
        elif ch == "." and not seen_point:
            seen_point = True
        else:
            return False
    return has_digit