"""FreeType engine layer for rasterfont.

This module handles all contact with the native FreeType library through the
freetype-py ctypes binding. It provides a clean abstraction layer between
FreeType and the domain models.

Key responsibilities:
- Own the FT_Library context (init on entry, teardown on exit)
- Open faces from a file path or an in-memory buffer
- Enumerate char codes and render glyphs, copying bitmaps out of FreeType

Key classes:
- EngineHandle: Scoped FT_Library owner
- FontResource, PathResource, MemoryResource: The two input forms
- FreeTypeFace: One opened FT_Face
"""

from rasterfont.engine.face import FreeTypeFace, copy_bitmap
from rasterfont.engine.library import EngineHandle
from rasterfont.engine.resource import (
    FontResource,
    FontSource,
    MemoryResource,
    PathResource,
)

__all__ = [
    "EngineHandle",
    "FontResource",
    "FontSource",
    "FreeTypeFace",
    "MemoryResource",
    "PathResource",
    "copy_bitmap",
]
