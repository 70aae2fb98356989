"""Fake archive fetcher for testing.

Provides a test double for ArchiveFetcherPort that "extracts" a fixed set of
files without network operations.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdn_lsp.adapters.fakes.fake_filesystem import FakeFileSystem
    from mdn_lsp.domain.binary import ArchiveKind


class FakeArchiveFetcher:
    """Fake implementation of ArchiveFetcherPort for testing.

    On download, creates ``members`` below the destination: in the given
    FakeFileSystem if one is provided, otherwise as real empty files.
    Records all calls as (url, destination, kind) tuples.
    """

    def __init__(
        self,
        members: tuple[str, ...] = ("rari",),
        filesystem: FakeFileSystem | None = None,
    ) -> None:
        self._members = members
        self._filesystem = filesystem
        self._exception: BaseException | None = None
        self._calls: list[tuple[str, Path, ArchiveKind]] = []

    @property
    def calls(self) -> list[tuple[str, Path, ArchiveKind]]:
        return self._calls

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from download(), or None to clear."""
        self._exception = exception

    def download(self, url: str, destination: Path, kind: ArchiveKind) -> None:
        self._calls.append((url, destination, kind))

        if self._exception is not None:
            raise self._exception

        for member in self._members:
            target = destination / member
            if self._filesystem is not None:
                self._filesystem.add_file(target)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(b"")
