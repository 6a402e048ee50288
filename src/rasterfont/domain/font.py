"""Font and face containers.

A Font owns its faces and a face owns its glyphs; nothing is shared between
fonts. All containers are frozen once assembled.
"""

from dataclasses import dataclass, field
from enum import Flag

from rasterfont.domain.glyph import Glyph


class FontStyle(Flag):
    """Style bits stored in a face."""

    REGULAR = 0
    BOLD = 1
    ITALIC = 2


@dataclass(frozen=True)
class FontInfo:
    """Font-wide metadata read from face 0.

    Only the first face is consulted; the value is handed unchanged to the
    extraction of every other face of the same resource.

    Attributes:
        family: Family name
        num_faces: Number of faces in the resource, at least 1
        line_height: Line advance in pixels, at least 1
    """

    family: str
    num_faces: int
    line_height: int

    @classmethod
    def from_declared(
        cls,
        family: str,
        num_faces: int,
        line_height: int,
        pixel_size: int,
    ) -> "FontInfo":
        """Build font info from the values the engine reports, correcting invalid ones.

        Args:
            family: Declared family name
            num_faces: Declared face count (values below 1 become 1)
            line_height: Declared max advance height (values below 1 become pixel_size)
            pixel_size: Requested rasterization size

        Returns:
            Corrected FontInfo
        """
        return cls(
            family=family,
            num_faces=num_faces if num_faces >= 1 else 1,
            line_height=line_height if line_height >= 1 else pixel_size,
        )


@dataclass(frozen=True)
class FontFace:
    """One face of a font with all of its rendered glyphs.

    Attributes:
        face_index: Position of the face within the font resource
        bold: Face carries the bold style flag
        italic: Face carries the italic style flag
        glyphs: Glyphs in the order the engine enumerated them
    """

    face_index: int
    bold: bool
    italic: bool
    glyphs: tuple[Glyph, ...] = ()
    _by_code: dict[int, Glyph] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.face_index < 0:
            raise ValueError(f"face_index must be non-negative, got {self.face_index}")

        by_code: dict[int, Glyph] = {}
        for glyph in self.glyphs:
            if glyph.char_code in by_code:
                raise ValueError(
                    f"Duplicate char code {glyph.char_code} in face {self.face_index}"
                )
            by_code[glyph.char_code] = glyph
        object.__setattr__(self, "_by_code", by_code)

    @property
    def style(self) -> FontStyle:
        """Style flags of this face."""
        style = FontStyle.REGULAR
        if self.bold:
            style |= FontStyle.BOLD
        if self.italic:
            style |= FontStyle.ITALIC
        return style

    @property
    def glyph_count(self) -> int:
        return len(self.glyphs)

    def char_codes(self) -> list[int]:
        """Char codes of all glyphs, in enumeration order."""
        return [glyph.char_code for glyph in self.glyphs]

    def get_glyph(self, char: int | str) -> Glyph | None:
        """Get a glyph by code point or by one-character string.

        Args:
            char: Code point or single character

        Returns:
            The glyph, or None if the face doesn't define it
        """
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError(f"Expected a single character, got {char!r}")
            char = ord(char)
        return self._by_code.get(char)

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, (int, str)):
            return False
        try:
            return self.get_glyph(char) is not None
        except ValueError:
            return False


@dataclass(frozen=True)
class Font:
    """A fully rasterized font resource.

    Attributes:
        family: Family name shared by every face
        size: Pixel size every face was rendered at
        faces: Faces ordered by face index
        line_height: Line advance in whole pixels, read from face 0. This is
            FreeType's max_advance_height scaled to the pixel size, not the
            raw font-unit value the engine stores
    """

    family: str
    size: int
    faces: tuple[FontFace, ...]
    line_height: int

    def __post_init__(self) -> None:
        if not self.faces:
            raise ValueError("A font needs at least one face")
        for slot, face in enumerate(self.faces):
            if face.face_index != slot:
                raise ValueError(
                    f"Face in slot {slot} has face_index {face.face_index}"
                )

    @property
    def num_faces(self) -> int:
        return len(self.faces)

    def styles(self) -> list[FontStyle]:
        """Styles of all faces, in face order."""
        return [face.style for face in self.faces]

    def get_face(self, bold: bool = False, italic: bool = False) -> FontFace | None:
        """Get the first face with the given style.

        Args:
            bold: Require the bold flag
            italic: Require the italic flag

        Returns:
            Matching face, or None if the font has no face with that style
        """
        for face in self.faces:
            if face.bold == bold and face.italic == italic:
                return face
        return None
