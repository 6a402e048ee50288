"""Tests for per-face glyph extraction."""

from unittest.mock import MagicMock

import pytest

from rasterfont.config import RasterConfig
from rasterfont.core.extractor import GlyphExtractor
from rasterfont.domain import FontInfo
from rasterfont.engine.binding import FT_LOAD_NO_HINTING, FT_LOAD_RENDER
from rasterfont.exceptions import FaceLoadError
from rasterfont.utils import ExtractionLogger


@pytest.fixture
def extractor() -> GlyphExtractor:
    """Extractor with a mocked structlog logger."""
    return GlyphExtractor(RasterConfig(), ExtractionLogger(MagicMock()))


class TestGlyphExtractor:
    """Tests for GlyphExtractor.extract_face."""

    def test_two_codes_one_face(self, extractor, make_face):
        """Test a face with two renderable codes."""
        face = make_face(codes=(65, 66))

        result = extractor.extract_face(face, 16, is_first_face=True)

        assert face.pixel_size == 16
        assert result.face.face_index == 0
        assert result.face.char_codes() == [65, 66]
        for glyph in result.face.glyphs:
            assert glyph.width >= 0 and glyph.height >= 0
            assert len(glyph.image_data) == glyph.width * glyph.height

    def test_enumeration_order_preserved(self, extractor, make_face):
        """Test glyphs keep engine order rather than sorted order."""
        face = make_face(codes=(0x263A, 65, 32, 0x10))

        result = extractor.extract_face(face, 16, is_first_face=True)

        assert result.face.char_codes() == [0x263A, 65, 32, 0x10]

    def test_empty_glyph_kept(self, extractor, make_face):
        """Test zero-size glyphs are kept with an empty buffer."""
        result = extractor.extract_face(make_face(codes=(32,)), 16, is_first_face=True)

        space = result.face.get_glyph(" ")
        assert space is not None
        assert space.image_data == b""

    def test_render_failure_skips_code(self, extractor, make_face):
        """Test one failing code among five is dropped without raising."""
        face = make_face(codes=(65, 66, 67, 68, 69), failing=(67,))

        result = extractor.extract_face(face, 16, is_first_face=True)

        assert result.face.glyph_count == 4
        assert 67 not in result.face
        assert face.rendered == [65, 66, 68, 69]

    def test_render_failure_recorded(self, make_face):
        """Test the failure diagnostic names family, face index and code."""
        structlog_logger = MagicMock()
        logger = ExtractionLogger(structlog_logger)
        extractor = GlyphExtractor(RasterConfig(), logger)
        face = make_face(family="Broken Serif", face_index=0, codes=(65, 66), failing=(66,))

        extractor.extract_face(face, 16, is_first_face=True)

        assert logger.stats.glyph_failures[0][:2] == (0, 66)
        structlog_logger.warning.assert_called_once()
        kwargs = structlog_logger.warning.call_args.kwargs
        assert kwargs["family"] == "Broken Serif"
        assert kwargs["face_index"] == 0
        assert kwargs["char_code"] == 66

    def test_all_codes_failing(self, extractor, make_face):
        """Test a face whose every glyph fails still extracts."""
        face = make_face(codes=(65, 66), failing=(65, 66))

        result = extractor.extract_face(face, 16, is_first_face=True)

        assert result.face.glyphs == ()

    def test_duplicate_codes_ignored(self, extractor, make_face):
        """Test a code reported twice is only rendered once."""
        face = make_face(codes=(65, 66, 65))

        result = extractor.extract_face(face, 16, is_first_face=True)

        assert result.face.char_codes() == [65, 66]
        assert face.rendered == [65, 66]

    def test_style_flags(self, extractor, make_face):
        """Test bold and italic come from the face."""
        result = extractor.extract_face(
            make_face(bold=True, italic=True), 16, is_first_face=True
        )
        assert result.face.bold
        assert result.face.italic

    def test_load_flags_from_config(self, make_face):
        """Test every render uses the configured load flags."""
        extractor = GlyphExtractor(RasterConfig(hinting=False), ExtractionLogger(MagicMock()))
        face = make_face(codes=(65, 66))

        extractor.extract_face(face, 16, is_first_face=True)

        assert face.load_flags == [FT_LOAD_RENDER | FT_LOAD_NO_HINTING] * 2

    def test_size_error_propagates(self, extractor, make_face):
        """Test a face that cannot be sized fails as a face load error."""
        face = make_face(size_error=FaceLoadError("'x.ttf'", 0, "invalid pixel size"))

        with pytest.raises(FaceLoadError):
            extractor.extract_face(face, 16, is_first_face=True)


class TestFontInfoHandling:
    """Tests for font-wide metadata on first and later faces."""

    def test_first_face_reads_info(self, extractor, make_face):
        """Test the first face supplies family, face count and line height."""
        face = make_face(family="Fake Sans", num_faces=3, line_height=19)

        result = extractor.extract_face(face, 16, is_first_face=True)

        assert result.info == FontInfo(family="Fake Sans", num_faces=3, line_height=19)

    def test_zero_face_count_corrected(self, extractor, make_face):
        """Test a declared face count of 0 becomes 1."""
        result = extractor.extract_face(make_face(num_faces=0), 16, is_first_face=True)
        assert result.info.num_faces == 1

    def test_non_positive_line_height_corrected(self, extractor, make_face):
        """Test a non-positive line height becomes the pixel size."""
        result = extractor.extract_face(make_face(line_height=0), 24, is_first_face=True)
        assert result.info.line_height == 24

    def test_later_face_keeps_passed_info(self, extractor, make_face):
        """Test later faces never recompute font info."""
        info = FontInfo(family="First", num_faces=2, line_height=20)
        face = make_face(family="Other", num_faces=9, line_height=99, face_index=1)

        result = extractor.extract_face(face, 16, is_first_face=False, font_info=info)

        assert result.info is info
        assert result.face.face_index == 1

    def test_later_face_requires_info(self, extractor, make_face):
        """Test later faces cannot be extracted without font info."""
        with pytest.raises(ValueError, match="font_info"):
            extractor.extract_face(make_face(face_index=1), 16, is_first_face=False)
