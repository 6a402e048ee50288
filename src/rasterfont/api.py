"""Public entry points for loading fonts.

Two ways in, sharing one pipeline:

- ``load_font(source, pixel_size)`` for a one-shot extraction that creates and
  tears down its own FreeType context.
- ``FontLoader`` to keep one FreeType context open across many extractions.

Each call performs a fresh extraction; nothing is cached between calls.
"""

import os

import structlog

from rasterfont.config import RasterFontSettings, get_default_settings
from rasterfont.core import FontAssembler, GlyphExtractor
from rasterfont.domain import Font
from rasterfont.engine import (
    EngineHandle,
    FontResource,
    FontSource,
    MemoryResource,
    PathResource,
)
from rasterfont.exceptions import RasterFontError
from rasterfont.utils import ExtractionLogger, ExtractionStats


class FontLoader:
    """Loads fonts through one FreeType context.

    The loader is not thread-safe; use one loader per thread. A failed load
    leaves the loader usable.

    Example:
        with FontLoader() as loader:
            regular = loader.load_font_file("Inter-Regular.ttf", 14)
            bundled = loader.load_font_bytes(data, 14)
    """

    def __init__(
        self,
        settings: RasterFontSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the loader. The FreeType context is created lazily.

        Args:
            settings: Rasterization and logging settings
            logger: structlog logger (package logger if None)
        """
        self.settings = settings if settings is not None else get_default_settings()
        self._engine = EngineHandle()
        self._logger = ExtractionLogger(logger)

    @property
    def engine(self) -> EngineHandle:
        return self._engine

    @property
    def stats(self) -> ExtractionStats:
        """Statistics of the most recent load."""
        return self._logger.stats

    def open(self) -> "FontLoader":
        """Initialize the FreeType context.

        Raises:
            InitializationError: If FreeType cannot be initialized
        """
        self._engine.open()
        return self

    def close(self) -> None:
        """Release the FreeType context."""
        self._engine.close()

    def load_font(self, source: FontSource, pixel_size: int) -> Font:
        """Load a font from a path or from font bytes.

        Args:
            source: Filesystem path, or the font file's bytes
            pixel_size: Pixel height to render every glyph at

        Returns:
            The fully rasterized font

        Raises:
            ValueError: If pixel_size is not a positive integer
            InitializationError: If FreeType cannot be initialized
            FaceLoadError: If any face cannot be opened or decoded
        """
        return self._load(FontResource.from_source(source), pixel_size)

    def load_font_file(self, path: str | os.PathLike, pixel_size: int) -> Font:
        """Load a font file from disk. See load_font."""
        return self._load(PathResource(path), pixel_size)

    def load_font_bytes(self, data: bytes | bytearray | memoryview, pixel_size: int) -> Font:
        """Load a font from its bytes. See load_font."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected font bytes, got {type(data).__name__}")
        return self._load(MemoryResource(data), pixel_size)

    def _load(self, resource: FontResource, pixel_size: int) -> Font:
        if isinstance(pixel_size, bool) or not isinstance(pixel_size, int) or pixel_size < 1:
            raise ValueError(f"pixel_size must be a positive integer, got {pixel_size!r}")

        self._engine.open()
        self._logger.log_font_start(resource.describe(), pixel_size)

        assembler = FontAssembler(
            self._engine,
            GlyphExtractor(self.settings.raster, self._logger),
            self._logger,
        )

        try:
            font = assembler.assemble(resource, pixel_size)
        except RasterFontError as e:
            self._logger.log_font_error(resource.describe(), e)
            raise

        self._logger.log_font_complete(font.family, font.num_faces, font.line_height)
        return font

    def __enter__(self) -> "FontLoader":
        """Context manager entry."""
        return self.open()

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


def load_font(
    source: FontSource,
    pixel_size: int,
    settings: RasterFontSettings | None = None,
) -> Font:
    """Load a font from a path or from font bytes with a short-lived FreeType context.

    Args:
        source: Filesystem path, or the font file's bytes
        pixel_size: Pixel height to render every glyph at
        settings: Rasterization settings

    Returns:
        The fully rasterized font

    Raises:
        ValueError: If pixel_size is not a positive integer
        InitializationError: If FreeType cannot be initialized
        FaceLoadError: If any face cannot be opened or decoded
    """
    with FontLoader(settings) as loader:
        return loader.load_font(source, pixel_size)
