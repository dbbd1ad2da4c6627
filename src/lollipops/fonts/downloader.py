"""
Font Downloader
===============

Fetches the fallback font over HTTP and stores it next to the working
directory so later runs can load it without network access.
"""

import logging
import tempfile
from pathlib import Path

import click
import requests

from .. import __version__
from ..core.config import FontConfig
from ..core.exceptions import (
    EmptyFontDownloadError,
    FontDownloadNetworkError,
    FontDownloadWriteError,
)
from .models import FetchResult

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class FontDownloader:
    """
    Downloads a font file with a single GET request.

    The body is streamed into a temporary file beside the target and only
    moved into place once a non-empty download finished without errors.
    No retries, no checksum verification.
    """

    def __init__(self, config: FontConfig | None = None, session: requests.Session | None = None):
        self.config = config or FontConfig()
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with appropriate configuration."""
        session = requests.Session()
        session.headers.update({"User-Agent": f"lollipops/{__version__}"})
        return session

    def fetch(self, url: str | None = None, target_path: str | Path | None = None) -> FetchResult:
        """
        Download ``url`` to ``target_path``.

        Args:
            url: Font URL, defaults to the configured fallback font URL
            target_path: Destination file, defaults to the configured cache path

        Returns:
            FetchResult with the number of bytes written or the failure reason
        """
        url = url or self.config.download_url
        target_path = Path(target_path or self.config.cache_path)

        try:
            response = self.session.get(url, stream=True, timeout=self.config.download_timeout)
        except requests.RequestException as e:
            logger.debug(f"Font download from {url} failed: {e}")
            return FetchResult(
                success=False,
                url=url,
                path=str(target_path),
                error=FontDownloadNetworkError(url, str(e)),
            )

        try:
            if not response.ok:
                logger.warning(f"Font download from {url} returned HTTP {response.status_code}")
            self._print_notice(target_path.name)
            bytes_written = self._write_body(response, target_path)
        except requests.RequestException as e:
            return FetchResult(
                success=False,
                url=url,
                path=str(target_path),
                error=FontDownloadNetworkError(url, str(e)),
            )
        except OSError as e:
            return FetchResult(
                success=False,
                url=url,
                path=str(target_path),
                error=FontDownloadWriteError(str(target_path), str(e)),
            )
        finally:
            response.close()

        if bytes_written == 0:
            return FetchResult(
                success=False,
                url=url,
                path=str(target_path),
                error=EmptyFontDownloadError(url),
            )

        logger.info(f"Downloaded {bytes_written} bytes to {target_path}")
        return FetchResult(success=True, url=url, path=str(target_path), bytes_written=bytes_written)

    def _write_body(self, response: requests.Response, target_path: Path) -> int:
        """Stream the response body to ``target_path``, returning bytes written."""
        with tempfile.NamedTemporaryFile(
            dir=target_path.parent, prefix=f".{target_path.name}.", suffix=".tmp", delete=False
        ) as temp_file:
            temp_path = Path(temp_file.name)
            try:
                bytes_written = 0
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        temp_file.write(chunk)
                        bytes_written += len(chunk)
            except BaseException:
                temp_file.close()
                temp_path.unlink(missing_ok=True)
                raise

        if bytes_written == 0:
            temp_path.unlink(missing_ok=True)
            return 0

        try:
            temp_path.replace(target_path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        return bytes_written

    def _print_notice(self, filename: str) -> None:
        """Tell the user which font is being fetched and under what license."""
        click.echo(f"Downloading Font: {filename} ({self.config.license_name})", err=True)
        click.echo(f"Learn more about usage at {self.config.project_url}", err=True)
        click.echo("Or provide a different truetype font with -f fontname.ttf\n", err=True)
