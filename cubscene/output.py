"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from cubscene.numbers import itoa


def putchar_fd(char: str, stream: Optional[TextIO]) -> None:
    """Write a single character to stream; a missing stream writes nothing."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if stream is None:
        return
    stream.write(char)


def putstr_fd(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write text to stream; a missing or empty text writes nothing."""
    if not text or stream is None:
        return
    stream.write(text)


def putstr(text: Optional[str]) -> None:
    """Write text to standard output."""
    putstr_fd(text, sys.stdout)


def putendl_fd(text: Optional[str], stream: Optional[TextIO]) -> None:
    """Write text followed by a newline; a missing text writes nothing."""
    if text is None or stream is None:
        return
    stream.write(text + "\n")


def putnbr_fd(n: int, stream: Optional[TextIO]) -> None:
    """Write a 32-bit signed integer in decimal to stream."""
    if stream is None:
        return
    stream.write(itoa(n))