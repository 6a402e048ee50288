"""Configuration settings for rasterfont."""

from pathlib import Path

from pydantic import BaseModel, Field

from rasterfont.engine.binding import (
    FT_LOAD_FORCE_AUTOHINT,
    FT_LOAD_NO_HINTING,
    FT_LOAD_RENDER,
)


class RasterConfig(BaseModel):
    """Configuration for glyph rasterization."""

    hinting: bool = Field(
        default=True,
        description="Apply hinting when rendering glyphs",
    )
    force_autohint: bool = Field(
        default=False,
        description="Use FreeType's auto-hinter instead of the font's own hints",
    )

    def load_flags(self) -> int:
        """Build the FT_LOAD_* flags passed with every glyph render.

        Returns:
            Bitmask always including FT_LOAD_RENDER
        """
        flags = FT_LOAD_RENDER
        if not self.hinting:
            flags |= FT_LOAD_NO_HINTING
        elif self.force_autohint:
            flags |= FT_LOAD_FORCE_AUTOHINT
        return flags


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RasterFontSettings(BaseModel):
    """Main application settings."""

    raster: RasterConfig = Field(default_factory=RasterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterFontSettings:
    """Get default application settings."""
    return RasterFontSettings()
