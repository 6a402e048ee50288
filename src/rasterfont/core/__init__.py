"""Core extraction pipeline for rasterfont.

This module contains the orchestration on top of the engine layer:

- Glyph extraction (char-code enumeration, rendering, failure recovery)
- Font assembly (face discovery, metadata from the first face, per-face scoping)

Key classes:
- GlyphExtractor: Extracts a FontFace from one opened face
- FaceExtraction: Extracted face plus font-wide metadata
- FontAssembler: Drives extraction over every face of a resource
"""

from rasterfont.core.assembler import FontAssembler
from rasterfont.core.extractor import FaceExtraction, GlyphExtractor, RenderableFace

__all__ = [
    "FaceExtraction",
    "FontAssembler",
    "GlyphExtractor",
    "RenderableFace",
]
