"""
TrueType Font Handles
=====================

Thin wrappers around freetype-py that turn raw font bytes into a parsed font
and build sized faces able to report string advance widths.
"""

import io
import logging

import freetype

from ..core.exceptions import FontParseError

logger = logging.getLogger(__name__)

# Unhinted outlines give linearly scaled advances, independent of hinting quirks
LOAD_FLAGS = freetype.FT_LOAD_NO_HINTING | freetype.FT_LOAD_NO_BITMAP


class ParsedFont:
    """An in-memory font validated by FreeType.

    The FreeType face opened during parsing is kept and shared by every
    sized view, which rescales it before each measurement.
    """

    def __init__(self, data: bytes, face: freetype.Face):
        self.data = data
        self._face = face
        self.family_name = _decode_name(face.family_name)
        self.style_name = _decode_name(face.style_name)
        self.num_glyphs = face.num_glyphs

    def face(self, size: float, dpi: int) -> "FontFace":
        """Return a view measuring this font at ``size`` points and ``dpi``."""
        return FontFace(self._face, size, dpi)

    def __repr__(self) -> str:
        return f"ParsedFont(family={self.family_name!r}, style={self.style_name!r})"


class FontFace:
    """A shared FreeType face viewed at a fixed size and resolution."""

    def __init__(self, face: freetype.Face, size: float, dpi: int):
        self.size = size
        self.dpi = dpi
        self._face = face

    def measure(self, text: str) -> int:
        """Return the advance width of ``text`` in 26.6 fixed point."""
        # The underlying face is shared, so its scale is set on every call
        self._face.set_char_size(int(self.size * 64), 0, self.dpi, self.dpi)
        width = 0
        previous = None
        for char in text:
            if previous is not None and self._face.has_kerning:
                kerning = self._face.get_kerning(previous, char, freetype.FT_KERNING_UNFITTED)
                width += kerning.x
            self._face.load_char(char, LOAD_FLAGS)
            width += self._face.glyph.advance.x
            previous = char
        return width


def parse_font(data: bytes, source: str = "<memory>") -> ParsedFont:
    """
    Parse font bytes with FreeType.

    Args:
        data: Complete font file contents
        source: Where the bytes came from, used in error messages

    Returns:
        ParsedFont handle

    Raises:
        FontParseError: If FreeType cannot open the data as a font
    """
    if not data:
        raise FontParseError(source, "empty font data")

    try:
        face = freetype.Face(io.BytesIO(data))
    except freetype.FT_Exception as e:
        logger.debug(f"FreeType rejected font data from {source}: {e}")
        raise FontParseError(source, str(e)) from e

    return ParsedFont(data, face)


def _decode_name(name: bytes | None) -> str | None:
    if not name:
        return None
    return name.decode("utf-8", errors="replace")
