"""Rasterized glyph representation.

This module defines the glyph domain model: one character code rendered to
an 8-bit coverage bitmap at a fixed pixel size, plus the metrics needed to
position it on a baseline.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Glyph:
    """A single rasterized glyph.

    Attributes:
        char_code: Unicode code point (unsigned 32-bit)
        width: Bitmap width in pixels
        height: Bitmap height in pixels
        bearing_x: Offset from the pen position to the bitmap's left edge
        bearing_y: Offset from the baseline to the bitmap's top row
        advance: Horizontal pen advance in 26.6 fixed-point units
        image_data: width * height coverage bytes, row-major, top row first
    """

    char_code: int
    width: int
    height: int
    bearing_x: int
    bearing_y: int
    advance: int
    image_data: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.char_code <= 0xFFFFFFFF:
            raise ValueError(f"char_code out of range: {self.char_code}")
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Negative bitmap size {self.width}x{self.height} "
                f"for char code {self.char_code}"
            )

        expected = self.width * self.height
        if len(self.image_data) != expected:
            raise ValueError(
                f"Glyph {self.char_code} expects {expected} bytes of image data, "
                f"got {len(self.image_data)}"
            )

    def is_empty(self) -> bool:
        """Check if glyph has no visible pixels.

        Empty glyphs include spaces and other non-printing characters.

        Returns:
            True if width or height is zero
        """
        return self.width == 0 or self.height == 0

    @property
    def advance_px(self) -> int:
        """Advance rounded to whole pixels."""
        return (self.advance + 32) >> 6

    @property
    def character(self) -> str | None:
        """The character for this code point, or None if it isn't a valid scalar value."""
        if self.char_code > 0x10FFFF or 0xD800 <= self.char_code <= 0xDFFF:
            return None
        return chr(self.char_code)

    def rows(self) -> Iterator[bytes]:
        """Iterate over bitmap rows from top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield self.image_data[start : start + self.width]

    def coverage_at(self, x: int, y: int) -> int:
        """Get the coverage value of one pixel.

        Args:
            x: Column, 0 is the left edge
            y: Row, 0 is the top row

        Returns:
            Coverage from 0 (empty) to 255 (fully covered)

        Raises:
            IndexError: If the coordinate lies outside the bitmap
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        return self.image_data[y * self.width + x]
