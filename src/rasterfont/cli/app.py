"""CLI application entry point for rasterfont.

The single `rasterize` command loads a font through FontLoader and reports on it.
"""

from pathlib import Path
from typing import Annotated

import typer

from rasterfont import __version__
from rasterfont.api import FontLoader
from rasterfont.cli.output import (
    console,
    print_error,
    print_faces_table,
    print_failures,
    print_font_info,
    print_glyph_preview,
    print_header,
    print_step,
    print_success,
)
from rasterfont.config import LoggingConfig, RasterConfig, RasterFontSettings
from rasterfont.exceptions import FaceLoadError, InitializationError, RasterFontError
from rasterfont.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="rasterfont",
    help="Rasterize every glyph of every face of a font at one pixel size.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]rasterfont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def rasterize(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to a font file (TTF, OTF, TTC, ...)",
            show_default=False,
        ),
    ],
    size: Annotated[
        int,
        typer.Option(
            "--size",
            "-s",
            help="Pixel size to rasterize at",
            min=1,
        ),
    ] = 16,
    glyph: Annotated[
        str | None,
        typer.Option(
            "--glyph",
            "-g",
            help="Preview the bitmap of this character",
        ),
    ] = None,
    face: Annotated[
        int,
        typer.Option(
            "--face",
            "-f",
            help="Face index used for --glyph",
            min=0,
        ),
    ] = 0,
    hinting: Annotated[
        bool,
        typer.Option(
            "--hinting/--no-hinting",
            help="Apply hinting when rendering",
        ),
    ] = True,
    autohint: Annotated[
        bool,
        typer.Option(
            "--autohint",
            help="Force FreeType's auto-hinter",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Rasterize a font and print a summary of its faces and glyphs.

    Example:
        rasterfont DejaVuSans.ttf --size 24 --glyph g
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a font file.",
        )
        raise typer.Exit(code=1)

    if glyph is not None and len(glyph) != 1:
        print_error(
            f"Invalid glyph: {glyph!r}",
            details="--glyph takes exactly one character.",
        )
        raise typer.Exit(code=1)

    settings = RasterFontSettings(
        raster=RasterConfig(
            hinting=hinting,
            force_autohint=autohint,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step(f"Rasterizing at {size}px")

    try:
        with FontLoader(settings) as loader:
            font = loader.load_font_file(input_font, size)
            stats = loader.stats
    except InitializationError as e:
        print_error(f"FreeType is not available: {e.reason}")
        raise typer.Exit(code=1)
    except FaceLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=f"Face index {e.face_index}")
        raise typer.Exit(code=1)
    except RasterFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_font_info(str(input_font), font)
        print_faces_table(font)
        print_failures(stats.glyph_failures, verbose)

    if glyph is not None:
        if face >= font.num_faces:
            print_error(f"Face {face} does not exist; the font has {font.num_faces}")
            raise typer.Exit(code=1)

        found = font.faces[face].get_glyph(glyph)
        if found is None:
            print_error(f"Face {face} does not define {glyph!r} (U+{ord(glyph):04X})")
            raise typer.Exit(code=1)
        print_glyph_preview(found)

    if not quiet:
        print_success(
            total_time_s=stats.duration_seconds,
            glyphs=stats.glyphs_extracted,
            failures=stats.failure_count,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
