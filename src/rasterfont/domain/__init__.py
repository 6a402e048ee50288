"""Domain models for rasterfont.

This module contains the models returned to callers: a Font owning its
FontFaces, each owning its rendered Glyphs. All models are:

- Immutable (frozen dataclasses)
- Independent of FreeType and ctypes details

Key classes:
- Glyph: One rendered character code with metrics and coverage bitmap
- FontFace: One face with its glyphs and style flags
- Font: All faces of one resource at one pixel size
- FontInfo: Font-wide metadata read from the first face
- FontStyle: Bold/italic flags
"""

from rasterfont.domain.font import Font, FontFace, FontInfo, FontStyle
from rasterfont.domain.glyph import Glyph

__all__: list[str] = [
    # Enums
    "FontStyle",
    # Core types
    "Glyph",
    "FontFace",
    "Font",
    "FontInfo",
]
