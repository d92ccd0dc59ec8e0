"""String helpers with the search, compare, copy and split rules of the scene tools.

Search functions return an index into the text rather than a pointer, or
None when nothing is found.  A search for the NUL character finds the end
of the text, as a terminated string would.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def strchr(text: Optional[str], char: str) -> Optional[int]:
    """Return the index of the first occurrence of char in text, or None."""
    _check_char(char)
    if text is None:
        return None
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last occurrence of char in text, or None."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def _compare_codes(first, second) -> int:
    for a, b in zip_longest(first, second, fillvalue=0):
        if a != b or a == 0:
            return a - b
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the code difference at the first mismatch, or 0."""
    return _compare_codes(map(ord, first), map(ord, second))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters of two strings."""
    if n < 0:
        raise ValueError("count must not be negative")
    codes_a = islice(map(ord, first), n)
    codes_b = islice(map(ord, second), n)
    for a, b in islice(zip_longest(codes_a, codes_b, fillvalue=0), n):
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: Optional[str], needle: str, n: int) -> Optional[int]:
    """Return the index of needle in haystack, or None.

    An empty needle matches at index 0.  A needle longer than n characters
    never matches; n limits how much of the needle is compared, not where in
    the haystack it may start.
    """
    if haystack is None:
        return None
    if not needle:
        return 0
    if len(needle) > n:
        return None
    index = haystack.find(needle)
    return None if index < 0 else index


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as empty, both missing gives None."""
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Return the text that fits and the full length of src.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Return the resulting text and the length it tried to create.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from func(index, char) for every character of text."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call func(index, char) on each character, in place.

    A returned character replaces the one at that index; None keeps it.
    """
    if not chars or func is None:
        return
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in charset from both ends of text."""
    if text is None or charset is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most length characters of text beginning at start."""
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def split(text: Optional[str], sep: str) -> Optional[list[str]]:
    """Split text on sep, dropping empty pieces."""
    _check_char(sep)
    if text is None:
        return None
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]