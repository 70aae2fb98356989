"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from mdn_lsp.adapters.fakes.fake_archive_fetcher import FakeArchiveFetcher
from mdn_lsp.adapters.fakes.fake_filesystem import FakeFileSystem
from mdn_lsp.adapters.fakes.fake_host import (
    FakeSettingsProvider,
    FakeStatusReporter,
    FakeWorktree,
)
from mdn_lsp.adapters.fakes.fake_platform_detector import FakePlatformDetector
from mdn_lsp.adapters.fakes.fake_release_index import FakeReleaseIndex, ReleaseQuery

__all__ = [
    "FakeArchiveFetcher",
    "FakeFileSystem",
    "FakePlatformDetector",
    "FakeReleaseIndex",
    "FakeSettingsProvider",
    "FakeStatusReporter",
    "FakeWorktree",
    "ReleaseQuery",
]
