"""Font fixtures built on the fly with fontTools.

Each fixture font is a tiny TrueType font with rectangular outlines, so the
tests control exactly which char codes exist and which style flags are set.
"""

import io
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.ttCollection import TTCollection

FAMILY = "Raster Test"

FS_SELECTION_ITALIC = 0x01
FS_SELECTION_BOLD = 0x20
FS_SELECTION_REGULAR = 0x40


def rect_glyph(*rects: tuple[int, int, int, int]):
    """Glyph made of axis-aligned rectangles (x0, y0, x1, y1)."""
    pen = TTGlyphPen(None)
    for x0, y0, x1, y1 in rects:
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y1))
        pen.lineTo((x1, y1))
        pen.lineTo((x1, y0))
        pen.closePath()
    return pen.glyph()


def build_font(
    chars: str = "AB",
    style: str = "Regular",
    bold: bool = False,
    italic: bool = False,
    with_space: bool = True,
) -> bytes:
    """Build a TrueType font defining the given characters.

    Args:
        chars: Characters that get a rectangular outline
        style: Style name stored in the name table
        bold: Set the bold bits in OS/2 and head
        italic: Set the italic bits in OS/2 and head
        with_space: Also map U+0020 to an empty glyph

    Returns:
        The font file bytes
    """
    glyph_order = [".notdef"]
    cmap: dict[int, str] = {}
    glyphs = {".notdef": rect_glyph((50, 0, 450, 700))}

    if with_space:
        glyph_order.append("space")
        cmap[0x20] = "space"
        glyphs["space"] = TTGlyphPen(None).glyph()

    for i, char in enumerate(chars):
        name = f"uni{ord(char):04X}"
        glyph_order.append(name)
        cmap[ord(char)] = name
        # Vary the shapes so glyphs differ
        glyphs[name] = rect_glyph((100, 0, 500, 700), (100 + 40 * i, 300, 540 + 40 * i, 380))

    fs_selection = 0
    mac_style = 0
    if bold:
        fs_selection |= FS_SELECTION_BOLD
        mac_style |= 0x01
    if italic:
        fs_selection |= FS_SELECTION_ITALIC
        mac_style |= 0x02
    if not fs_selection:
        fs_selection = FS_SELECTION_REGULAR

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    metrics = {name: (600, 0) for name in glyph_order}
    metrics["space"] = (250, 0)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
        fsSelection=fs_selection,
    )
    fb.setupNameTable({"familyName": FAMILY, "styleName": style})
    fb.setupPost()
    fb.setupMaxp()
    fb.font["head"].macStyle = mac_style

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


def build_collection(*fonts: bytes) -> bytes:
    """Bundle several fonts into one TrueType collection."""
    collection = TTCollection()
    collection.fonts = [TTFont(io.BytesIO(data)) for data in fonts]
    buffer = io.BytesIO()
    collection.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def font_bytes() -> bytes:
    """Single-face font defining space, A and B."""
    return build_font("AB")


@pytest.fixture
def font_path(tmp_path: Path, font_bytes: bytes) -> Path:
    path = tmp_path / "RasterTest-Regular.ttf"
    path.write_bytes(font_bytes)
    return path


@pytest.fixture
def collection_bytes() -> bytes:
    """Two-face collection: regular (A, B) and bold (A, B, C)."""
    return build_collection(
        build_font("AB"),
        build_font("ABC", style="Bold", bold=True),
    )


@pytest.fixture
def collection_path(tmp_path: Path, collection_bytes: bytes) -> Path:
    path = tmp_path / "RasterTest.ttc"
    path.write_bytes(collection_bytes)
    return path


@pytest.fixture
def make_font():
    """Factory for single-face fonts with custom characters and styles."""
    return build_font
