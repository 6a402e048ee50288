"""Exception hierarchy for rasterfont."""


class RasterFontError(Exception):
    """Base exception for all rasterfont errors."""

    pass


class EngineError(RasterFontError):
    """Errors related to the native rasterization engine."""

    pass


class InitializationError(EngineError):
    """The native FreeType context could not be created or is no longer open."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to initialize FreeType: {reason}")


class FontError(RasterFontError):
    """Errors related to opening or decoding a font resource."""

    pass


class FaceLoadError(FontError):
    """A face of a font resource could not be opened or decoded."""

    def __init__(self, source: str, face_index: int, reason: str) -> None:
        self.source = source
        self.face_index = face_index
        self.reason = reason
        super().__init__(f"Failed to load face {face_index} of {source}: {reason}")


class GlyphError(RasterFontError):
    """Errors related to a single glyph."""

    pass


class GlyphRenderError(GlyphError):
    """A character code could not be rasterized.

    Recovered by the extractor: the glyph is dropped from its face and
    extraction continues.
    """

    def __init__(self, char_code: int, reason: str) -> None:
        self.char_code = char_code
        self.reason = reason
        super().__init__(f"Error rendering char code {char_code:#06x}: {reason}")
