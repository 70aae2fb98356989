"""HTTPX-based implementation of the ArchiveFetcherPort.

Downloads a release archive with httpx and unpacks it with tarfile or
zipfile into a version directory.
"""

from __future__ import annotations

import logging
import shutil
import tarfile
import tempfile
import zipfile
import zlib
from pathlib import Path

import httpx

from mdn_lsp.adapters.ports import ArchiveFetcherPort
from mdn_lsp.domain.binary import ArchiveKind
from mdn_lsp.domain.exceptions import ArchiveExtractError, BinaryDownloadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
PARTIAL_SUFFIX = ".partial"


class HttpxArchiveFetcher:
    """HTTPX-based adapter for downloading and extracting release archives.

    The archive is streamed to a temporary file next to the destination and
    unpacked into ``<destination>.partial``, which is renamed to
    ``destination`` only once extraction succeeded. A failed install never
    leaves a populated version directory behind.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        chunk_size: int = 64 * 1024,
    ) -> None:
        """Initialize the archive fetcher.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                If not provided, a new client is created per request.
            timeout: Request timeout in seconds for per-request clients.
            chunk_size: Streaming chunk size in bytes.
        """
        self._client = client
        self._timeout = timeout
        self._chunk_size = chunk_size

    def download(self, url: str, destination: Path, kind: ArchiveKind) -> None:
        """Download ``url`` and extract it into the ``destination`` directory.

        Raises:
            BinaryDownloadError: For network, HTTP or local write failures.
            ArchiveExtractError: If the archive cannot be unpacked.
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        partial = destination.with_name(destination.name + PARTIAL_SUFFIX)

        with tempfile.TemporaryDirectory(dir=destination.parent) as tmpdir:
            archive_path = Path(tmpdir) / f"archive.{kind.value}"
            self._fetch(url, archive_path)

            shutil.rmtree(partial, ignore_errors=True)
            try:
                self._extract(archive_path, partial, kind)
                if destination.exists():
                    shutil.rmtree(destination)
                partial.rename(destination)
            except (
                tarfile.TarError,
                zipfile.BadZipFile,
                zlib.error,
                EOFError,
                OSError,
            ) as e:
                shutil.rmtree(partial, ignore_errors=True)
                raise ArchiveExtractError(
                    f"failed to extract {url}: {e}", original_error=e
                ) from e

        logger.info(f"Extracted {url} into {destination}")

    def _fetch(self, url: str, archive_path: Path) -> None:
        try:
            if self._client is not None:
                self._stream_to(self._client, url, archive_path)
            else:
                with httpx.Client(
                    timeout=self._timeout, follow_redirects=True
                ) as client:
                    self._stream_to(client, url, archive_path)
        except (httpx.HTTPError, OSError) as e:
            raise BinaryDownloadError(
                f"failed to download file: {e}", url=url, original_error=e
            ) from e

    def _stream_to(self, client: httpx.Client, url: str, archive_path: Path) -> None:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            with archive_path.open("wb") as f:
                for chunk in response.iter_bytes(self._chunk_size):
                    f.write(chunk)

    def _extract(self, archive_path: Path, target: Path, kind: ArchiveKind) -> None:
        target.mkdir(parents=True)
        if kind is ArchiveKind.GZIP_TAR:
            with tarfile.open(archive_path, "r:gz") as archive:
                archive.extractall(target, filter="data")
        else:
            with zipfile.ZipFile(archive_path) as archive:
                archive.extractall(target)


# Runtime protocol check
assert isinstance(HttpxArchiveFetcher(), ArchiveFetcherPort)
