"""Logging utilities for rasterfont."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog


# Shared by the package logger and configure_logging. Records are handed to
# the stdlib "rasterfont" logger, so nothing is emitted until handlers exist.
PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
]


@dataclass
class ExtractionStats:
    """Statistics from one font extraction."""

    faces_loaded: int = 0
    glyphs_extracted: int = 0
    glyph_failures: list[tuple[int, int, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def failure_count(self) -> int:
        return len(self.glyph_failures)

    @property
    def duration_seconds(self) -> float:
        """Calculate extraction duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Library code only asks structlog for a logger; applications call this
    once to decide where the records go.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


def get_logger() -> structlog.stdlib.BoundLogger:
    """Get the package logger without touching logging configuration.

    The logger writes through the stdlib "rasterfont" logger, so records stay
    silent unless the host application installs handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger("rasterfont"),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class ExtractionLogger:
    """Logger for tracking extraction progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = ExtractionStats()

    def log_font_start(self, source: str, pixel_size: int) -> None:
        """Log start of a font extraction and reset statistics."""
        self._stats = ExtractionStats(start_time=time.time())
        self._logger.debug("Loading font", source=source, pixel_size=pixel_size)

    def log_face_start(self, source: str, face_index: int) -> None:
        """Log start of face extraction."""
        self._logger.debug("Extracting face", source=source, face_index=face_index)

    def log_face_complete(
        self,
        family: str,
        face_index: int,
        glyph_count: int,
        failed_count: int,
    ) -> None:
        """Log successful face extraction."""
        self._logger.info(
            "Face extracted",
            family=family,
            face_index=face_index,
            glyphs=glyph_count,
            failed=failed_count,
        )
        self._stats.faces_loaded += 1
        self._stats.glyphs_extracted += glyph_count

    def log_glyph_error(
        self,
        family: str,
        face_index: int,
        char_code: int,
        error: Exception,
    ) -> None:
        """Log a glyph that could not be rendered and was skipped."""
        self._logger.warning(
            "Failed to load glyph",
            family=family,
            face_index=face_index,
            char_code=char_code,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.glyph_failures.append((face_index, char_code, str(error)))

    def log_font_complete(self, family: str, num_faces: int, line_height: int) -> None:
        """Log a fully assembled font."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Font loaded",
            family=family,
            faces=num_faces,
            line_height=line_height,
            glyphs=self._stats.glyphs_extracted,
            failed=self._stats.failure_count,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    def log_font_error(self, source: str, error: Exception) -> None:
        """Log an extraction aborted by a face or engine failure."""
        self._stats.end_time = time.time()
        self._logger.error(
            "Font loading failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ExtractionStats:
        """Get current extraction statistics."""
        return self._stats
