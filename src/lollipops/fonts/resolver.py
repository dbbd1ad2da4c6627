"""
Font Resolver
=============

Finds a usable default font. We try to have sane defaults for font usage:

1. Load Arial from its most common install locations.
2. Load the cached OpenSans fallback from the working directory.
3. Download OpenSans once and load the downloaded copy.

Users can bypass all of this by naming a font file explicitly.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from ..core.config import FontConfig
from ..core.exceptions import FontNotFoundError
from .downloader import FontDownloader
from .models import LoadResult
from .registry import FontRegistry

logger = logging.getLogger(__name__)

LoadStep = Callable[[], LoadResult]


def first_success(steps: Iterable[LoadStep]) -> LoadResult | None:
    """Run ``steps`` in order and return the first successful result.

    Steps after the first success are never called. Returns None when
    every step fails.
    """
    for step in steps:
        result = step()
        if result.success:
            return result
    return None


class FontResolver:
    """
    Resolves fonts into a registry.

    Every failure along the fallback chain is swallowed and the next step is
    tried; only exhausting the whole chain is reported to the caller.
    """

    def __init__(
        self,
        registry: FontRegistry,
        config: FontConfig | None = None,
        downloader: FontDownloader | None = None,
    ):
        self.registry = registry
        self.config = config or FontConfig()
        self.downloader = downloader or FontDownloader(self.config)

    def load_default_font(self) -> LoadResult:
        """
        Load the first usable font from the fallback chain.

        Returns:
            The successful LoadResult, or a failed one carrying
            FontNotFoundError when nothing could be loaded
        """
        result = first_success(self._default_steps())
        if result is not None:
            return result

        logger.debug("No usable default font found")
        return LoadResult(success=False, error=FontNotFoundError())

    def load_font(self, name: str, path: str | Path) -> LoadResult:
        """Load a user-supplied font, without any fallback."""
        return self.registry.load(name, path)

    def _default_steps(self) -> list[LoadStep]:
        steps: list[LoadStep] = [
            self._load_step(candidate.name, candidate.path)
            for candidate in self.config.system_candidates
        ]
        fallback = self.config.fallback_candidate
        steps.append(self._load_step(fallback.name, fallback.path))
        if self.config.download_enabled:
            steps.append(self._download_and_load)
        return steps

    def _load_step(self, name: str, path: str) -> LoadStep:
        return lambda: self.registry.load(name, path)

    def _download_and_load(self) -> LoadResult:
        """Fetch the fallback font and load it if the download produced data."""
        fallback = self.config.fallback_candidate
        fetched = self.downloader.fetch(self.config.download_url, fallback.path)
        if not fetched.success:
            logger.debug(f"Fallback font download failed: {fetched.error}")
            return LoadResult(
                success=False, name=fallback.name, path=fallback.path, error=fetched.error
            )
        return self.registry.load(fallback.name, fallback.path)
