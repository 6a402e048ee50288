"""Console rendering for the rasterfont command.

Everything the CLI prints goes through the shared Rich console defined here.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rasterfont.domain import Font, FontStyle, Glyph

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

# Coverage ramp from empty to fully inked
PREVIEW_RAMP = " .:-=+*#%@"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]rasterfont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font: Font) -> None:
    """Print font-wide information.

    Args:
        font_path: Path to the font file
        font: The loaded font
    """
    # Use Text to safely handle paths with special characters
    console.print(Text(f"  {font.family or 'unnamed family'}", style="bold"))
    console.print(Text(f"  {font_path}", no_wrap=True, overflow="ignore"))
    faces = "face" if font.num_faces == 1 else "faces"
    console.print(
        f"  {font.num_faces} {faces} {SYM_DOT} {font.size}px {SYM_DOT} "
        f"{font.line_height}px line height"
    )


def style_name(style: FontStyle) -> str:
    """Human-readable name of a face style."""
    if style == FontStyle.REGULAR:
        return "Regular"
    parts = []
    if FontStyle.BOLD in style:
        parts.append("Bold")
    if FontStyle.ITALIC in style:
        parts.append("Italic")
    return " ".join(parts)


def print_faces_table(font: Font) -> None:
    """Print one row per face with its style and glyph counts.

    Args:
        font: The loaded font
    """
    table = Table(box=None, padding=(0, 2), show_edge=False)
    table.add_column("Face", justify="right")
    table.add_column("Style")
    table.add_column("Glyphs", justify="right")
    table.add_column("Inked", justify="right")

    for face in font.faces:
        inked = sum(1 for glyph in face.glyphs if not glyph.is_empty())
        table.add_row(
            str(face.face_index),
            style_name(face.style),
            f"{face.glyph_count:,}",
            f"{inked:,}",
        )

    console.print(table)


def print_failures(failures: list[tuple[int, int, str]], verbose: bool) -> None:
    """Print glyphs that could not be rendered.

    Args:
        failures: (face_index, char_code, reason) tuples
        verbose: Whether to list every failure
    """
    if not failures:
        return

    console.print(f"  [yellow]{len(failures)}[/yellow] glyphs could not be rendered")
    if verbose:
        for face_index, char_code, reason in failures[:20]:
            console.print(f"  face {face_index} {SYM_DOT} U+{char_code:04X} {SYM_DOT} {reason}")
        if len(failures) > 20:
            console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(failures) - 20} more)")


def render_preview(glyph: Glyph) -> list[str]:
    """Render a glyph's coverage bitmap as text lines.

    Args:
        glyph: Glyph to preview

    Returns:
        One string per bitmap row
    """
    last = len(PREVIEW_RAMP) - 1
    return [
        "".join(PREVIEW_RAMP[value * last // 255] for value in row)
        for row in glyph.rows()
    ]


def print_glyph_preview(glyph: Glyph) -> None:
    """Print glyph metrics and an ASCII preview of its bitmap.

    Args:
        glyph: Glyph to preview
    """
    label = glyph.character if glyph.character is not None else "?"
    console.print(f"\n[bold]U+{glyph.char_code:04X}[/bold] {label!r}")
    console.print(
        f"  {glyph.width}x{glyph.height} {SYM_DOT} bearing ({glyph.bearing_x}, {glyph.bearing_y}) "
        f"{SYM_DOT} advance {glyph.advance_px}px"
    )

    if glyph.is_empty():
        console.print("  (empty bitmap)")
        return

    for line in render_preview(glyph):
        console.print(Text(f"  |{line}|"))


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(total_time_s: float, glyphs: int, failures: int) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total extraction time in seconds
        glyphs: Number of glyphs extracted across all faces
        failures: Number of glyphs that failed to render
    """
    time_str = _format_time(total_time_s)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    failure_style = "red" if failures > 0 else "green"
    console.print(
        f"  {glyphs:,} glyphs {SYM_DOT} "
        f"[{failure_style}]{failures} failed[/{failure_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
