"""Lazy access to the freetype-py ctypes binding.

freetype-py locates the native FreeType library when ``freetype.raw`` is
first imported and raises if it cannot. The import is deferred to engine
creation so that a missing native library surfaces as InitializationError
instead of breaking ``import rasterfont``.
"""

from types import ModuleType

from rasterfont.exceptions import InitializationError

# Values from freetype.h, needed before the binding is loaded
FT_LOAD_NO_HINTING = 0x2
FT_LOAD_RENDER = 0x4
FT_LOAD_FORCE_AUTOHINT = 0x20

FT_STYLE_FLAG_ITALIC = 1 << 0
FT_STYLE_FLAG_BOLD = 1 << 1

FT_PIXEL_MODE_MONO = 1
FT_PIXEL_MODE_GRAY = 2


def load_freetype() -> ModuleType:
    """Import and return ``freetype.raw``.

    Returns:
        The freetype-py raw ctypes module

    Raises:
        InitializationError: If the binding or the native library is missing
    """
    try:
        from freetype import raw
    except (ImportError, OSError, RuntimeError) as e:
        raise InitializationError(
            f"{e}. Are you missing the freetype library?"
        ) from e
    return raw


def describe_error(ft: ModuleType, error: int) -> str:
    """Turn a FreeType error code into readable text.

    Args:
        ft: The loaded ``freetype.raw`` module
        error: Non-zero FT_Error value

    Returns:
        Error description including FreeType's own message
    """
    return f"{ft.FT_Exception(error)} [error {error:#04x}]"
