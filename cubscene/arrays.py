"""Helpers for lists of strings: lookup, copying and end insertion/removal.

The functions that add or remove an element return a new list and leave the
one they were given untouched.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO


def _matches(item: str, key: str) -> bool:
    return item == key or item.startswith(key + "=")


def array_find(items: Sequence[str], key: str) -> Optional[int]:
    """Return the index of the first item equal to key or starting with key followed by '='.

    Return None when no item matches.
    """
    return next(
        (index for index, item in enumerate(items) if _matches(item, key)),
        None,
    )


def array_ndup(items: Sequence[str], n: int) -> list[str]:
    """Return a copy of at most the first n items."""
    return list(items[: max(n, 0)])


def array_pop(items: Sequence[str]) -> list[str]:
    """Return a copy of items without its last element."""
    if not items:
        raise IndexError("pop from an empty array")
    return list(items[:-1])


def array_shift(items: Sequence[str]) -> list[str]:
    """Return a copy of items without its first element."""
    if not items:
        raise IndexError("shift from an empty array")
    return list(items[1:])


def array_push(items: Optional[Sequence[str]], value: str) -> list[str]:
    """Return a copy of items with value added at the end; None counts as empty."""
    return [*(items or ()), value]


def array_unshift(items: Optional[Sequence[str]], value: str) -> list[str]:
    """Return a copy of items with value added at the start; None counts as empty."""
    return [value, *(items or ())]


def array_print(
    items: Sequence[str],
    delimiter: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Write each item followed by delimiter, or by a newline when delimiter is None."""
    target = sys.stdout if stream is None else stream
    ending = "\n" if delimiter is None else delimiter
    target.write("".join(item + ending for item in items))