"""Font Management Module
======================

Resolves, loads and measures the single font used to lay out diagram labels.
"""

from .models import (
    DEFAULT_FONT_URL,
    DEFAULT_SYSTEM_CANDIDATES,
    FALLBACK_CANDIDATE,
    FetchResult,
    FontCandidate,
    LoadResult,
)
from .registry import FontRegistry
from .measure import TextMeasurer, estimate_width
from .downloader import FontDownloader
from .resolver import FontResolver, first_success

__all__ = [
    "DEFAULT_FONT_URL",
    "DEFAULT_SYSTEM_CANDIDATES",
    "FALLBACK_CANDIDATE",
    "FetchResult",
    "FontCandidate",
    "FontDownloader",
    "FontRegistry",
    "FontResolver",
    "LoadResult",
    "TextMeasurer",
    "estimate_width",
    "first_success",
]
