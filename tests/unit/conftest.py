"""Shared fakes for unit tests.

The fakes stand in for FreeType-backed objects so the extraction pipeline can
be driven with exact engine answers (face counts, failing glyphs, ...).
"""

from collections.abc import Callable, Iterator

import pytest

from rasterfont.domain import Glyph
from rasterfont.engine import FontResource
from rasterfont.exceptions import FaceLoadError, GlyphRenderError


class FakeFace:
    """In-memory face answering like FreeTypeFace."""

    def __init__(
        self,
        family: str = "Fake Sans",
        num_faces: int = 1,
        face_index: int = 0,
        line_height: int = 20,
        bold: bool = False,
        italic: bool = False,
        codes: tuple[int, ...] = (65, 66),
        failing: tuple[int, ...] = (),
        size_error: Exception | None = None,
    ) -> None:
        self.family_name = family
        self.num_faces = num_faces
        self.face_index = face_index
        self.max_advance_height_px = line_height
        self.is_bold = bold
        self.is_italic = italic
        self.codes = codes
        self.failing = failing
        self.size_error = size_error
        self.pixel_size: int | None = None
        self.rendered: list[int] = []
        self.load_flags: list[int] = []
        self.closed = False

    def set_pixel_size(self, pixel_size: int) -> None:
        if self.size_error is not None:
            raise self.size_error
        self.pixel_size = pixel_size

    def iter_char_codes(self) -> Iterator[int]:
        yield from self.codes

    def render_char(self, char_code: int, load_flags: int) -> Glyph:
        self.load_flags.append(load_flags)
        if char_code in self.failing:
            raise GlyphRenderError(char_code, "broken outline")
        self.rendered.append(char_code)

        # Spaces render to an empty bitmap
        width, height = (0, 0) if char_code == 32 else (3, 4)
        return Glyph(
            char_code=char_code,
            width=width,
            height=height,
            bearing_x=1,
            bearing_y=height,
            advance=640,
            image_data=bytes(range(width * height)),
        )

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeFace":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class FakeEngine:
    """Engine handle serving FakeFaces by index."""

    def __init__(self, faces: dict[int, FakeFace]) -> None:
        self.faces = faces
        self.opened: list[int] = []

    def open_face(self, resource: FontResource, face_index: int) -> FakeFace:
        self.opened.append(face_index)
        # Every earlier face must be closed before the next one opens
        for index in self.opened[:-1]:
            if index in self.faces:
                assert self.faces[index].closed, f"face {index} still open"
        if face_index not in self.faces:
            raise FaceLoadError(resource.describe(), face_index, "no such face")
        return self.faces[face_index]


@pytest.fixture
def make_face() -> Callable[..., FakeFace]:
    """Factory for fake faces."""
    return FakeFace


@pytest.fixture
def make_engine() -> Callable[[dict[int, FakeFace]], FakeEngine]:
    """Factory for fake engines."""
    return FakeEngine
