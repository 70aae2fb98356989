"""Interface adapters: ports plus their HTTP, filesystem and host implementations."""

from mdn_lsp.adapters.ports import (
    ArchiveFetcherPort,
    FileSystemPort,
    InstallationStatusPort,
    PlatformDetectorPort,
    ReleaseIndexPort,
    SettingsProviderPort,
    WorktreePort,
)
from mdn_lsp.adapters.httpx_archive_fetcher import HttpxArchiveFetcher
from mdn_lsp.adapters.httpx_release_index import HttpxReleaseIndex
from mdn_lsp.adapters.local_filesystem import LocalFileSystem
from mdn_lsp.adapters.local_worktree import LocalWorktree
from mdn_lsp.adapters.platform_detector import OsPlatformDetector
from mdn_lsp.adapters.status_reporter import LoggingStatusReporter
from mdn_lsp.adapters.yaml_settings_provider import YamlSettingsProvider

__all__ = [
    "ArchiveFetcherPort",
    "FileSystemPort",
    "InstallationStatusPort",
    "PlatformDetectorPort",
    "ReleaseIndexPort",
    "SettingsProviderPort",
    "WorktreePort",
    "HttpxArchiveFetcher",
    "HttpxReleaseIndex",
    "LocalFileSystem",
    "LocalWorktree",
    "OsPlatformDetector",
    "LoggingStatusReporter",
    "YamlSettingsProvider",
]
