"""Lollipops Fonts
===============

Font resolution and text measurement for the lollipops diagram generator.

Finds a usable typeface (system Arial, a cached OpenSans, or a one-off
download of OpenSans), keeps it as the active font of a registry, and reports
the pixel width of label strings for layout.
"""

__version__ = "1.0.0"

from .core.exceptions import FontError, FontNotFoundError, LollipopsError
from .fonts import (
    FontCandidate,
    FontRegistry,
    FontResolver,
    LoadResult,
    TextMeasurer,
    estimate_width,
)

__all__ = [
    "FontCandidate",
    "FontError",
    "FontNotFoundError",
    "FontRegistry",
    "FontResolver",
    "LoadResult",
    "LollipopsError",
    "TextMeasurer",
    "estimate_width",
]
