"""
Text Width Measurement
======================

Pixel widths of label strings, using the registry's active font when one is
loaded and a rough estimate otherwise.
"""

import logging

import freetype

from .registry import FontRegistry

logger = logging.getLogger(__name__)


def estimate_width(text: str, size: int) -> int:
    """
    Ballpark width of ``text`` when no font metrics are available.

    Calibrated for typical proportional fonts. Sizes below 2 give zero or
    negative widths for non-empty text; layout code relies on these exact
    values, so they are not clamped.
    """
    return len(text) * (size - 2)


class TextMeasurer:
    """Measures strings against the active font of a registry."""

    def __init__(self, registry: FontRegistry, dpi: int = 72):
        self.registry = registry
        self.dpi = dpi

    def measure_font(self, text: str, size: int) -> int:
        """
        Return the pixel width of ``text`` at font size ``size``.

        Uses the active font's metrics if possible, but falls back to a
        conservative estimate otherwise. Never raises.
        """
        font = self.registry.font
        if font is None:
            return estimate_width(text, size)

        try:
            face = font.face(size, self.dpi)
            width = face.measure(text)
        except freetype.FT_Exception as e:
            logger.warning(f"Measuring with {self.registry.name} failed, using estimate: {e}")
            return estimate_width(text, size)

        # 26.6 fixed point to whole pixels
        return width >> 6
