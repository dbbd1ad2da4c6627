"""
Font data models and types.
"""

from dataclasses import dataclass
from pathlib import Path

from ..core.exceptions import FontError

DEFAULT_FONT_URL = "https://github.com/googlefonts/opensans/raw/main/fonts/ttf/OpenSans-Regular.ttf"


@dataclass(frozen=True)
class FontCandidate:
    """A named font file location tried during font resolution."""

    name: str
    path: str

    @property
    def filename(self) -> str:
        """Get the font filename."""
        return Path(self.path).name

    def __str__(self) -> str:
        return f"{self.name} ({self.path})"


DEFAULT_SYSTEM_CANDIDATES: tuple[FontCandidate, ...] = (
    # macOS
    FontCandidate("Arial", "/Library/Fonts/Arial.ttf"),
    # Windows
    FontCandidate("Arial", "C:\\WINDOWS\\Fonts\\arial.ttf"),
    FontCandidate("Arial", "C:\\WINNT\\Fonts\\arial.ttf"),
    # Ubuntu with the multiverse msttcorefonts package
    FontCandidate("Arial", "/usr/share/fonts/truetype/msttcorefonts/arial.ttf"),
)

FALLBACK_CANDIDATE = FontCandidate("OpenSans", "OpenSans-Regular.ttf")


@dataclass(frozen=True)
class LoadResult:
    """Outcome of an attempt to install a font into a registry."""

    success: bool
    name: str | None = None
    path: str | None = None
    error: FontError | None = None

    def __bool__(self) -> bool:
        return self.success

    def raise_for_error(self) -> None:
        """Raise the carried error if the load failed."""
        if self.error is not None:
            raise self.error


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a font download."""

    success: bool
    url: str
    path: str
    bytes_written: int = 0
    error: FontError | None = None

    def __bool__(self) -> bool:
        return self.success
