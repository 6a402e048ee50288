"""Glyph extraction for a single opened face.

This module turns one opened face into a FontFace: it sizes the face, reads
the font-wide metadata when the face is the first of its resource, walks every
defined char code in engine order and renders each one. A glyph that fails to
render is logged and left out; it never aborts the face.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from rasterfont.config import RasterConfig
from rasterfont.domain import FontFace, FontInfo, Glyph
from rasterfont.exceptions import GlyphRenderError
from rasterfont.utils import ExtractionLogger


class RenderableFace(Protocol):
    """The face operations the extractor relies on (see FreeTypeFace)."""

    @property
    def family_name(self) -> str: ...

    @property
    def num_faces(self) -> int: ...

    @property
    def face_index(self) -> int: ...

    @property
    def max_advance_height_px(self) -> int: ...

    @property
    def is_bold(self) -> bool: ...

    @property
    def is_italic(self) -> bool: ...

    def set_pixel_size(self, pixel_size: int) -> None: ...

    def iter_char_codes(self) -> Iterator[int]: ...

    def render_char(self, char_code: int, load_flags: int) -> Glyph: ...


@dataclass(frozen=True)
class FaceExtraction:
    """Result of extracting one face.

    Attributes:
        face: The extracted face
        info: Font-wide metadata; read from this face if it was the first,
            otherwise the value passed in unchanged
    """

    face: FontFace
    info: FontInfo


class GlyphExtractor:
    """Rasterizes every defined glyph of an opened face.

    Example:
        extractor = GlyphExtractor(RasterConfig())
        with engine.open_face(resource, 0) as face:
            result = extractor.extract_face(face, 16, is_first_face=True)
        print(result.info.family, result.face.glyph_count)
    """

    def __init__(
        self,
        config: RasterConfig | None = None,
        logger: ExtractionLogger | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            config: Rasterization settings (load flags)
            logger: Receives per-face and per-glyph diagnostics
        """
        self.config = config if config is not None else RasterConfig()
        self.logger = logger if logger is not None else ExtractionLogger()

    def read_font_info(self, face: RenderableFace, pixel_size: int) -> FontInfo:
        """Read and correct font-wide metadata from an already sized face.

        Args:
            face: The first face of the resource
            pixel_size: Requested pixel size, the fallback line height

        Returns:
            FontInfo with num_faces >= 1 and line_height >= 1
        """
        return FontInfo.from_declared(
            family=face.family_name,
            num_faces=face.num_faces,
            line_height=face.max_advance_height_px,
            pixel_size=pixel_size,
        )

    def extract_face(
        self,
        face: RenderableFace,
        pixel_size: int,
        is_first_face: bool,
        font_info: FontInfo | None = None,
    ) -> FaceExtraction:
        """Extract all glyphs of one face.

        Args:
            face: Opened face; stays owned by the caller
            pixel_size: Pixel height to render at
            is_first_face: Read font-wide metadata from this face
            font_info: Metadata from the first face; required when
                is_first_face is False

        Returns:
            The extracted face and the font info

        Raises:
            ValueError: If a non-first face is extracted without font_info
            FaceLoadError: If the face cannot be rendered at pixel_size
        """
        face.set_pixel_size(pixel_size)

        if is_first_face:
            font_info = self.read_font_info(face, pixel_size)
        elif font_info is None:
            raise ValueError("font_info from the first face is required for later faces")

        face_index = face.face_index
        load_flags = self.config.load_flags()
        glyphs: list[Glyph] = []
        seen: set[int] = set()
        failed = 0

        for char_code in face.iter_char_codes():
            if char_code in seen:
                continue
            seen.add(char_code)

            try:
                glyph = face.render_char(char_code, load_flags)
            except GlyphRenderError as e:
                self.logger.log_glyph_error(font_info.family, face_index, char_code, e)
                failed += 1
                continue

            glyphs.append(glyph)

        font_face = FontFace(
            face_index=face_index,
            bold=face.is_bold,
            italic=face.is_italic,
            glyphs=tuple(glyphs),
        )
        self.logger.log_face_complete(font_info.family, face_index, len(glyphs), failed)

        return FaceExtraction(face=font_face, info=font_info)
