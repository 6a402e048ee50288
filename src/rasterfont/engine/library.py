"""Scoped ownership of a native FreeType library context."""

import ctypes
from types import ModuleType
from typing import Any

from rasterfont.engine.binding import describe_error, load_freetype
from rasterfont.engine.face import FreeTypeFace
from rasterfont.engine.resource import FontResource
from rasterfont.exceptions import InitializationError


class EngineHandle:
    """Owns one FT_Library for the lifetime of a ``with`` block.

    A handle is not safe for concurrent use: serialize calls through one
    handle or create one handle per worker. A face that failed to load does
    not affect the handle, which stays usable for later calls.

    Example:
        with EngineHandle() as engine:
            with engine.open_face(PathResource("font.ttf"), 0) as face:
                print(face.family_name)
    """

    def __init__(self) -> None:
        self._ft: ModuleType | None = None
        self._library: Any = None

    @classmethod
    def create(cls) -> "EngineHandle":
        """Create and initialize a handle.

        Raises:
            InitializationError: If FreeType cannot be initialized
        """
        handle = cls()
        handle.open()
        return handle

    @property
    def is_open(self) -> bool:
        return self._library is not None

    def open(self) -> None:
        """Initialize the native library context; no-op if already open.

        Raises:
            InitializationError: If the binding is missing or FT_Init_FreeType fails
        """
        if self._library is not None:
            return

        ft = load_freetype()
        library = ft.FT_Library()
        error = ft.FT_Init_FreeType(ctypes.byref(library))
        if error:
            raise InitializationError(describe_error(ft, error))

        self._ft = ft
        self._library = library

    def close(self) -> None:
        """Release the native library context; no-op if already closed."""
        if self._library is not None:
            self._ft.FT_Done_FreeType(self._library)
            self._library = None

    dispose = close

    def _require_open(self) -> ModuleType:
        if self._library is None or self._ft is None:
            raise InitializationError("engine handle is not open")
        return self._ft

    @property
    def version(self) -> tuple[int, int, int]:
        """Version of the native FreeType library as (major, minor, patch)."""
        ft = self._require_open()
        major, minor, patch = ctypes.c_int(), ctypes.c_int(), ctypes.c_int()
        ft.FT_Library_Version(
            self._library, ctypes.byref(major), ctypes.byref(minor), ctypes.byref(patch)
        )
        return major.value, minor.value, patch.value

    def open_face(self, resource: FontResource, face_index: int) -> FreeTypeFace:
        """Open one face of a resource with this handle's library.

        Args:
            resource: Path or memory resource
            face_index: Index of the face within the resource

        Returns:
            Opened face, to be used as a context manager

        Raises:
            InitializationError: If the handle is closed
            FaceLoadError: If the face cannot be opened
        """
        ft = self._require_open()
        return resource.open_face(ft, self._library, face_index)

    def __enter__(self) -> "EngineHandle":
        """Context manager entry."""
        self.open()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
