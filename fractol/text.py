"""String helpers: searching, slicing, joining, trimming, splitting and
size-bounded copying."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def find_char(s: Optional[str], c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if s is None:
        return None
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def find_last_char(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points at the first mismatch (the
    end of a string counts as code 0), or 0 when the prefixes agree.
    """
    _non_negative("n", n)
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0 or i == n - 1:
            return ca - cb
    return 0


def find_substring(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substring(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start past the end yields an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def join(a: str, b: str) -> str:
    """Concatenate two strings."""
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError("join expects two strings")
    return a + b


def trim(s: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def count_words(s: str, sep: CharLike) -> int:
    """Count the non-empty runs of ``s`` separated by ``sep``."""
    return len(split(s, sep))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` for every element of a mutable sequence.

    A non-None result replaces the element in place. The sequence itself is
    returned.
    """
    for index, ch in enumerate(chars):
        result = func(index, ch)
        if result is not None:
            chars[index] = result
    return chars


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had, counting ``dst`` as at most ``size`` characters.
    """
    _non_negative("size", size)
    dst_len = len(dst)
    result = dst
    if size > 0 and dst_len < size - 1:
        result = dst + src[:size - 1 - dst_len]
    return result, min(dst_len, size) + len(src)