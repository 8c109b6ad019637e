"""Writing characters, strings and numbers to text streams, plus a small
printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import IO, Any, Optional, Union

_UINT_MASK = (1 << 32) - 1
_PTR_MASK = (1 << 64) - 1


def _target(stream: Optional[IO[str]]) -> IO[str]:
    return sys.stdout if stream is None else stream


def _as_char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def put_char(c: Union[str, int], stream: Optional[IO[str]] = None) -> None:
    """Write a single character (a one-character string or a code)."""
    _target(stream).write(_as_char(c))


def put_str(s: str, stream: Optional[IO[str]] = None) -> None:
    """Write a string as it is."""
    _target(stream).write(s)


def put_line(s: str, stream: Optional[IO[str]] = None) -> None:
    """Write a string followed by a newline."""
    _target(stream).write(s + "\n")


def put_number(n: int, stream: Optional[IO[str]] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(_as_int(n, "d")))


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return "%" + spec
    arg = _next_arg(values, spec)
    if spec == "c":
        return _as_char(arg)
    if spec == "s":
        if arg is None:
            return "(null)"
        if not isinstance(arg, str):
            raise TypeError(f"%s expects a str, got {type(arg).__name__}")
        return arg
    if spec == "p":
        if arg is None or arg == 0:
            return "0x0"
        return "0x" + format(_as_int(arg, spec) & _PTR_MASK, "x")
    number = _as_int(arg, spec)
    if spec in "di":
        return str(_to_int32(number))
    if spec == "u":
        return str(number & _UINT_MASK)
    return format(number & _UINT_MASK, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand a printf-style format string and return the result.

    Unknown conversions are kept literally with their percent sign; a lone
    percent sign at the end of the format is kept as it is.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Format like ``format_printf``, write to stdout and return the length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)