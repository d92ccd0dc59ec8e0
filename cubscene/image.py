"""In-memory 32-bit pixel images with transparent-colour blitting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

TRANSPARENT = 0xFF000000
_MASK32 = 0xFFFFFFFF


@dataclass
class Image:
    """A width x height image of 32-bit colours stored row by row."""

    width: int
    height: int
    pixels: Optional[list[int]] = field(default=None)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image size must not be negative")
        size = self.width * self.height
        if self.pixels is None:
            self.pixels = [0] * size
        else:
            if len(self.pixels) != size:
                raise ValueError(f"expected {size} pixels, got {len(self.pixels)}")
            self.pixels = [value & _MASK32 for value in self.pixels]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set (x, y) to color; out-of-bounds positions and the transparent colour are ignored."""
        color &= _MASK32
        if not self._inside(x, y) or color == TRANSPARENT:
            return
        self.pixels[y * self.width + x] = color

    def paste(self, src: "Image", x: int, y: int) -> None:
        """Draw src with its top-left corner at (x, y), skipping transparent pixels.

        Pixels that fall outside this image are clipped.
        """
        for row in range(src.height):
            for col in range(src.width):
                self.put_pixel(x + col, y + row, src.pixels[row * src.width + col])

    def copy_pixel(self, src: "Image", src_x: int, src_y: int, dst_x: int, dst_y: int) -> None:
        """Copy one pixel of src to (dst_x, dst_y) when both positions are in bounds."""
        if not src._inside(src_x, src_y) or not self._inside(dst_x, dst_y):
            return
        self.pixels[dst_y * self.width + dst_x] = src.pixels[src_y * src.width + src_x]