"""Python view of one opened FreeType face.

This module wraps a native FT_Face pointer with the handful of operations the
extraction pipeline needs: sizing, metadata, char-code enumeration and glyph
rendering. The face is a context manager and is released with FT_Done_Face
when the ``with`` block exits.
"""

import ctypes
from collections.abc import Iterator
from types import ModuleType
from typing import Any

from rasterfont.domain.glyph import Glyph
from rasterfont.engine.binding import (
    FT_PIXEL_MODE_GRAY,
    FT_PIXEL_MODE_MONO,
    FT_STYLE_FLAG_BOLD,
    FT_STYLE_FLAG_ITALIC,
    describe_error,
)
from rasterfont.exceptions import FaceLoadError, GlyphRenderError


def _expand_mono_row(row: bytes, width: int) -> bytes:
    """Expand a 1-bit row (MSB first) to one coverage byte per pixel."""
    return bytes(
        255 if row[x >> 3] & (0x80 >> (x & 7)) else 0
        for x in range(width)
    )


def copy_bitmap(
    buffer: Any,
    width: int,
    rows: int,
    pitch: int,
    pixel_mode: int,
) -> bytes:
    """Copy a rendered FreeType bitmap into owned, tightly packed bytes.

    The slot buffer belongs to FreeType and is overwritten by the next render
    on the same face, so this must run before any further engine call.

    Args:
        buffer: Pointer to the first byte of the bitmap memory
        width: Bitmap width in pixels
        rows: Bitmap height in pixels
        pitch: Bytes per row; negative for bottom-up bitmaps
        pixel_mode: FT_PIXEL_MODE_* value

    Returns:
        width * rows coverage bytes, top row first; empty if either size is zero

    Raises:
        ValueError: For unsupported pixel modes or a missing buffer
    """
    if width <= 0 or rows <= 0:
        return b""
    if not buffer:
        raise ValueError(f"bitmap of {width}x{rows} has no buffer")

    stride = abs(pitch)
    data = ctypes.string_at(buffer, stride * rows)
    lines = [data[y * stride : (y + 1) * stride] for y in range(rows)]
    if pitch < 0:
        lines.reverse()

    if pixel_mode == FT_PIXEL_MODE_GRAY:
        return b"".join(line[:width] for line in lines)
    if pixel_mode == FT_PIXEL_MODE_MONO:
        return b"".join(_expand_mono_row(line, width) for line in lines)
    raise ValueError(f"unsupported pixel mode {pixel_mode}")


class FreeTypeFace:
    """An opened FT_Face.

    Not thread-safe. The face must not outlive the EngineHandle that opened it.

    Example:
        with engine.open_face(resource, 0) as face:
            face.set_pixel_size(16)
            for code in face.iter_char_codes():
                glyph = face.render_char(code, FT_LOAD_RENDER)
    """

    def __init__(
        self,
        ft: ModuleType,
        face: Any,
        source: str,
        keepalive: bytes | None = None,
    ) -> None:
        """Wrap an opened face.

        Args:
            ft: The loaded ``freetype.raw`` module
            face: FT_Face pointer returned by FT_New_Face/FT_New_Memory_Face
            source: Description of the resource, used in error messages
            keepalive: Memory the face was opened from; must stay alive until close
        """
        self._ft = ft
        self._face = face
        self._source = source
        self._keepalive = keepalive

    @property
    def closed(self) -> bool:
        return self._face is None

    def _record(self) -> Any:
        if self._face is None:
            raise RuntimeError("Face is closed.")
        return self._face.contents

    @property
    def source(self) -> str:
        return self._source

    @property
    def family_name(self) -> str:
        name = self._record().family_name
        return name.decode("utf-8", errors="replace") if name else ""

    @property
    def num_faces(self) -> int:
        return self._record().num_faces

    @property
    def face_index(self) -> int:
        # Upper bits carry the named-instance index of variable fonts
        return self._record().face_index & 0xFFFF

    @property
    def max_advance_height(self) -> int:
        """Declared maximum line advance (font units for scalable faces)."""
        return self._record().max_advance_height

    @property
    def max_advance_height_px(self) -> int:
        """Declared max line advance scaled to the current pixel size, rounded to whole pixels.

        Zero until set_pixel_size has been called, and for faces without a
        scalable outline.
        """
        record = self._record()
        if not record.size:
            return 0
        y_scale = record.size.contents.metrics.y_scale
        # units * 16.16 scale -> 26.6 pixels -> whole pixels
        return (record.max_advance_height * y_scale + (1 << 21)) >> 22

    @property
    def style_flags(self) -> int:
        return self._record().style_flags

    @property
    def is_bold(self) -> bool:
        return bool(self.style_flags & FT_STYLE_FLAG_BOLD)

    @property
    def is_italic(self) -> bool:
        return bool(self.style_flags & FT_STYLE_FLAG_ITALIC)

    def set_pixel_size(self, pixel_size: int) -> None:
        """Request rendering at a pixel height; width follows proportionally.

        A sizing error is not ignored. FreeType would otherwise keep rendering
        at the previous size, or fail every glyph of a bitmap-only face that
        has no strike at this size. Raising here aborts the whole load instead
        of returning such a face with all of its glyphs skipped.

        Raises:
            FaceLoadError: If the face cannot be rendered at that size
        """
        error = self._ft.FT_Set_Pixel_Sizes(self._face, 0, pixel_size)
        if error:
            raise FaceLoadError(
                self._source,
                self.face_index,
                f"cannot set pixel size {pixel_size}: {describe_error(self._ft, error)}",
            )

    def iter_char_codes(self) -> Iterator[int]:
        """Walk every character code the active charmap defines.

        Codes come in charmap order, which is not necessarily ascending. The
        walk ends when FreeType reports glyph index 0.

        Yields:
            Character codes
        """
        glyph_index = ctypes.c_uint(0)
        code = self._ft.FT_Get_First_Char(self._face, ctypes.byref(glyph_index))

        while glyph_index.value != 0:
            code &= 0xFFFFFFFF
            yield code
            code = self._ft.FT_Get_Next_Char(
                self._face, ctypes.c_ulong(code), ctypes.byref(glyph_index)
            )

    def render_char(self, char_code: int, load_flags: int) -> Glyph:
        """Load and render one character code.

        Args:
            char_code: Code point to render
            load_flags: FT_LOAD_* flags, must include FT_LOAD_RENDER

        Returns:
            Glyph owning a copy of the rendered bitmap

        Raises:
            GlyphRenderError: If FreeType cannot load or render the glyph
        """
        error = self._ft.FT_Load_Char(
            self._face, ctypes.c_ulong(char_code), ctypes.c_int32(load_flags)
        )
        if error:
            raise GlyphRenderError(char_code, describe_error(self._ft, error))

        slot = self._record().glyph.contents
        bitmap = slot.bitmap
        width, rows = bitmap.width, bitmap.rows

        try:
            image_data = copy_bitmap(
                bitmap.buffer, width, rows, bitmap.pitch, bitmap.pixel_mode
            )
        except ValueError as e:
            raise GlyphRenderError(char_code, str(e)) from e

        return Glyph(
            char_code=char_code,
            width=width,
            height=rows,
            bearing_x=slot.bitmap_left,
            bearing_y=slot.bitmap_top,
            advance=slot.advance.x,
            image_data=image_data,
        )

    def close(self) -> None:
        """Release the native face."""
        if self._face is not None:
            self._ft.FT_Done_Face(self._face)
            self._face = None
            self._keepalive = None

    def __enter__(self) -> "FreeTypeFace":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
