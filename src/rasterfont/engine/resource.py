"""Font resources and face opening.

A font resource is either a file on disk or a buffer of font bytes. Both are
opened one face at a time; the returned FreeTypeFace owns the native handle
and must be closed (or used as a context manager) before the next face is
opened.
"""

import ctypes
import os
from abc import ABC, abstractmethod
from pathlib import Path
from types import ModuleType
from typing import Any, Union

from rasterfont.engine.binding import describe_error
from rasterfont.engine.face import FreeTypeFace
from rasterfont.exceptions import FaceLoadError

FontSource = Union[str, os.PathLike, bytes, bytearray, memoryview]


class FontResource(ABC):
    """Where the bytes of a font come from."""

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description used in errors and logs."""

    @abstractmethod
    def _new_face(self, ft: ModuleType, library: Any, face_index: int, face: Any) -> int:
        """Call the FreeType constructor for this resource form.

        Returns:
            FT_Error code, 0 on success
        """

    def _keepalive(self) -> bytes | None:
        return None

    def open_face(self, ft: ModuleType, library: Any, face_index: int) -> FreeTypeFace:
        """Open one face of this resource.

        Args:
            ft: The loaded ``freetype.raw`` module
            library: Initialized FT_Library
            face_index: Index of the face within the resource

        Returns:
            The opened face; the caller owns it and must close it

        Raises:
            FaceLoadError: If FreeType cannot open or decode the face
        """
        if face_index < 0:
            raise FaceLoadError(self.describe(), face_index, "face index must be non-negative")

        face = ft.FT_Face()
        error = self._new_face(ft, library, face_index, face)
        if error:
            raise FaceLoadError(self.describe(), face_index, describe_error(ft, error))

        return FreeTypeFace(ft, face, source=self.describe(), keepalive=self._keepalive())

    @staticmethod
    def from_source(source: "FontSource | FontResource") -> "FontResource":
        """Normalize a path or a byte buffer into a resource.

        Args:
            source: Filesystem path, font bytes, or an existing resource

        Returns:
            PathResource or MemoryResource
        """
        if isinstance(source, FontResource):
            return source
        if isinstance(source, (bytes, bytearray, memoryview)):
            return MemoryResource(source)
        if isinstance(source, (str, os.PathLike)):
            return PathResource(source)
        raise TypeError(
            f"Expected a path or font bytes, got {type(source).__name__}"
        )


class PathResource(FontResource):
    """A font file opened by FreeType directly from disk."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return f"'{self.path}'"

    def _new_face(self, ft: ModuleType, library: Any, face_index: int, face: Any) -> int:
        filename = ctypes.c_char_p(os.fsencode(self.path))
        return ft.FT_New_Face(library, filename, ctypes.c_long(face_index), ctypes.byref(face))

    def __repr__(self) -> str:
        return f"PathResource({str(self.path)!r})"


class MemoryResource(FontResource):
    """Font bytes held in memory.

    FreeType reads directly from the buffer without copying it, so the
    resource keeps the bytes referenced by every face it opens.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self.data = bytes(data)

    def describe(self) -> str:
        return f"in-memory font ({len(self.data)} bytes)"

    def _keepalive(self) -> bytes | None:
        return self.data

    def open_face(self, ft: ModuleType, library: Any, face_index: int) -> FreeTypeFace:
        if not self.data:
            raise FaceLoadError(self.describe(), face_index, "font data is empty")
        return super().open_face(ft, library, face_index)

    def _new_face(self, ft: ModuleType, library: Any, face_index: int, face: Any) -> int:
        return ft.FT_New_Memory_Face(
            library,
            self.data,
            ctypes.c_long(len(self.data)),
            ctypes.c_long(face_index),
            ctypes.byref(face),
        )

    def __repr__(self) -> str:
        return f"MemoryResource(<{len(self.data)} bytes>)"
