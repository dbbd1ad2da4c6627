"""
Font Registry
=============

Holds the single active font used for text measurement. A registry starts
empty and only changes when a font file is read and parsed successfully.
"""

import logging
from pathlib import Path

from ..core.exceptions import FontParseError, FontReadError
from .models import LoadResult
from .truetype import ParsedFont, parse_font

logger = logging.getLogger(__name__)


class FontRegistry:
    """
    Owner of the active font.

    Layout code holds one registry and passes it to whatever needs to load
    or measure fonts. Name and font are always replaced together.
    """

    def __init__(self):
        self._name: str | None = None
        self._font: ParsedFont | None = None

    @property
    def name(self) -> str | None:
        """Display name of the active font, if any."""
        return self._name

    @property
    def font(self) -> ParsedFont | None:
        """The active parsed font, if any."""
        return self._font

    @property
    def is_loaded(self) -> bool:
        return self._font is not None

    def load(self, name: str, path: str | Path) -> LoadResult:
        """
        Read and parse a font file, making it the active font on success.

        Args:
            name: Display name to record for the font
            path: Font file location

        Returns:
            LoadResult describing the outcome. On failure the registry is
            left exactly as it was.
        """
        path = str(path)

        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.debug(f"Could not read font {path}: {e}")
            return LoadResult(success=False, name=name, path=path, error=FontReadError(path, str(e)))

        try:
            font = parse_font(data, source=path)
        except FontParseError as e:
            logger.debug(f"Could not parse font {path}: {e}")
            return LoadResult(success=False, name=name, path=path, error=e)

        self._name, self._font = name, font
        logger.info(f"Loaded font {name} from {path}")
        return LoadResult(success=True, name=name, path=path)

    def __repr__(self) -> str:
        return f"FontRegistry(name={self._name!r}, loaded={self.is_loaded})"
