"""Wall texture lines of a scene file."""

from __future__ import annotations

from typing import NamedTuple, Optional

TEXTURE_IDS = ("NO", "SO", "WE", "EA")
_KNOWN_INITIALS = frozenset("NSWEFC")


class TextureEntry(NamedTuple):
    """A texture line: its identifier, the path it names and whether it is well formed."""

    identifier: str
    path: str
    valid: bool


def extract_path(line: str, start: int) -> tuple[str, bool]:
    """Return the path that begins at the first '.' from start, and whether the line is valid.

    A valid line holds a '.' and a '/', and only spaces between start and the
    path.  A line with no '.' after start gives an empty, invalid path.
    """
    dot = line.find(".", start)
    if dot < 0:
        return "", False
    valid = "/" in line and all(char == " " for char in line[start:dot])
    return line[dot:], valid


def parse_texture_line(line: Optional[str]) -> Optional[TextureEntry]:
    """Parse a NO, SO, WE or EA line; return None for any other line."""
    if not line:
        return None
    identifier = line[:2]
    if identifier not in TEXTURE_IDS:
        return None
    path, valid = extract_path(line, 2)
    return TextureEntry(identifier, path, valid)


def is_unknown_identifier(line: Optional[str]) -> bool:
    """Return True when line starts with a letter that begins no known identifier."""
    if not line:
        return False
    first = line[0]
    return first not in _KNOWN_INITIALS and 65 < ord(first) < 122