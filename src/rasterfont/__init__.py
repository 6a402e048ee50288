"""rasterfont - Extract fully rasterized font assets for UI renderers.

rasterfont opens a font file (or a buffer of font bytes) with FreeType,
renders every glyph of every face at one pixel size, and returns the result
as plain Python objects: a Font owning its FontFaces, each owning its Glyphs
with metrics and an 8-bit coverage bitmap.

Example:
    >>> from rasterfont import load_font
    >>> font = load_font("DejaVuSans.ttf", 16)
    >>> font.faces[0].get_glyph("A").width
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from rasterfont.api import FontLoader, load_font
from rasterfont.domain import Font, FontFace, FontStyle, Glyph
from rasterfont.exceptions import (
    FaceLoadError,
    GlyphRenderError,
    InitializationError,
    RasterFontError,
)

__all__ = [
    "FaceLoadError",
    "Font",
    "FontFace",
    "FontLoader",
    "FontStyle",
    "Glyph",
    "GlyphRenderError",
    "InitializationError",
    "RasterFontError",
    "__author__",
    "__version__",
    "load_font",
]
