"""Character classification, case mapping and number formatting helpers."""

from __future__ import annotations

import sys
from typing import TextIO, Union

Char = Union[str, int]

_ATOI_SPACES = frozenset("\t\n\v\f\r ")


def _code(c: Char) -> int:
    """Return the integer code of a character given as a string or an int."""
    if isinstance(c, int):
        return c
    if c == "":
        return 0
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return code if isinstance(c, int) else (chr(code) if c else c)


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return code if isinstance(c, int) else (chr(code) if c else c)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits
    are consumed until the first non-digit. No digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - 48)
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(int(n))


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Char, stream: TextIO | None = None) -> None:
    """Write one character to the stream (standard output by default)."""
    _stream(stream).write(chr(c) if isinstance(c, int) else c[:1])


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string to the stream."""
    _stream(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _stream(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(itoa(n))