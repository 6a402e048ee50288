"""Multi-face font assembly.

Face 0 is loaded first: it tells how many faces the resource holds and
supplies the family name and line height for the whole font. Faces 1..N-1
are then opened and extracted one at a time, each closed before the next is
opened. Any face that cannot be loaded aborts the whole assembly.
"""

import dataclasses

from rasterfont.core.extractor import GlyphExtractor
from rasterfont.domain import Font, FontFace, FontInfo
from rasterfont.engine import EngineHandle, FontResource
from rasterfont.utils import ExtractionLogger


class FontAssembler:
    """Builds a Font from every face of a font resource.

    Example:
        with EngineHandle() as engine:
            assembler = FontAssembler(engine, GlyphExtractor())
            font = assembler.assemble(PathResource("font.ttc"), 16)
    """

    def __init__(
        self,
        engine: EngineHandle,
        extractor: GlyphExtractor | None = None,
        logger: ExtractionLogger | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            engine: Open engine handle used to open faces
            extractor: Glyph extractor (default settings if None)
            logger: Progress logger; defaults to the extractor's
        """
        self.engine = engine
        self.extractor = extractor if extractor is not None else GlyphExtractor(logger=logger)
        self.logger = logger if logger is not None else self.extractor.logger

    def _load_face(
        self,
        resource: FontResource,
        face_index: int,
        pixel_size: int,
        font_info: FontInfo | None,
    ) -> tuple[FontFace, FontInfo]:
        """Open, extract and close one face."""
        self.logger.log_face_start(resource.describe(), face_index)

        with self.engine.open_face(resource, face_index) as face:
            result = self.extractor.extract_face(
                face,
                pixel_size,
                is_first_face=font_info is None,
                font_info=font_info,
            )

        font_face = result.face
        if font_face.face_index != face_index:
            font_face = dataclasses.replace(font_face, face_index=face_index)
        return font_face, result.info

    def assemble(self, resource: FontResource, pixel_size: int) -> Font:
        """Load every face of a resource.

        Args:
            resource: Path or memory resource
            pixel_size: Pixel height every face is rendered at

        Returns:
            Font with one face per index declared by face 0

        Raises:
            FaceLoadError: If any face cannot be opened or sized
        """
        first_face, font_info = self._load_face(resource, 0, pixel_size, None)

        faces: list[FontFace] = [first_face]
        for face_index in range(1, font_info.num_faces):
            font_face, _ = self._load_face(resource, face_index, pixel_size, font_info)
            faces.append(font_face)

        return Font(
            family=font_info.family,
            size=pixel_size,
            faces=tuple(faces),
            line_height=font_info.line_height,
        )
