"""String search, comparison, copying and splitting helpers.

Positions are returned as indices into the string, or ``None`` where
nothing is found. An empty character stands for the terminating NUL of a
C string, which sits just past the last character.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``len(s)`` for the empty character."""
    if c == "":
        return len(s)
    index = s.find(c[0])
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``len(s)`` for the empty character."""
    if c == "":
        return len(s)
    index = s.rfind(c[0])
    return None if index < 0 else index


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, where a
    string that has ended counts as code 0. A missing string sorts below a
    present one; two missing strings compare equal.
    """
    if s1 is None or s2 is None:
        if s1 is not None:
            return 1
        if s2 is not None:
            return -1
        return 0
    for i in range(max(n, 0)):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. A match must end within the
    first ``length`` characters.
    """
    if little == "":
        return 0
    if length <= 0:
        return None
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When the
    buffer is no larger than ``dst`` nothing is appended and the returned
    length is ``size + len(src)``.
    """
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if sep == "":
        return [s] if s else []
    return [word for word in s.split(sep[0]) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, MutableSequence], None]) -> None:
    """Call ``f(index, s)`` for every position so it can change ``s`` in place."""
    for i in range(len(s)):
        f(i, s)