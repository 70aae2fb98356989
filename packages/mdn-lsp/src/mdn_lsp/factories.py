"""Factory functions for wiring the extension with production adapters.

Binds every port to its real I/O implementation. Tests build
BinaryResolver directly with fakes instead.
"""

from __future__ import annotations

import os
from pathlib import Path

import httpx

from mdn_lsp.adapters.httpx_archive_fetcher import HttpxArchiveFetcher
from mdn_lsp.adapters.httpx_release_index import HttpxReleaseIndex
from mdn_lsp.adapters.local_filesystem import LocalFileSystem
from mdn_lsp.adapters.platform_detector import OsPlatformDetector
from mdn_lsp.adapters.ports import InstallationStatusPort, PlatformDetectorPort
from mdn_lsp.adapters.status_reporter import LoggingStatusReporter
from mdn_lsp.adapters.yaml_settings_provider import YamlSettingsProvider
from mdn_lsp.domain.binary import BootstrapState
from mdn_lsp.domain.settings import BootstrapConfig
from mdn_lsp.extension import MdnLspExtension
from mdn_lsp.usecases.asset_selector import ReleaseAssetSelector
from mdn_lsp.usecases.binary_resolver import BinaryResolver
from mdn_lsp.usecases.command_builder import LanguageServerCommandBuilder


def create_extension(
    config: BootstrapConfig | None = None,
    *,
    platform_detector: PlatformDetectorPort | None = None,
    status_reporter: InstallationStatusPort | None = None,
    client: httpx.Client | None = None,
    github_token: str | None = None,
    global_settings_file: Path | None = None,
) -> MdnLspExtension:
    """Create an MdnLspExtension bound to real network and filesystem I/O.

    The platform is detected once here and reused for the process lifetime.

    Args:
        config: Bootstrap configuration (defaults to BootstrapConfig.from_env()).
        platform_detector: Platform detector (defaults to OsPlatformDetector).
        status_reporter: Installation status sink (defaults to logging).
        client: Shared httpx.Client for release index and downloads.
        github_token: GitHub token; defaults to $GITHUB_TOKEN.
        global_settings_file: Optional user-wide settings file.

    Returns:
        A ready-to-use MdnLspExtension with an empty BootstrapState.

    Raises:
        MdnLspConfigError: If the current platform cannot be detected.

    Example:
        >>> extension = create_extension(BootstrapConfig(working_dir=Path("/tmp/mdn")))
        >>> extension.state.binary_path is None
        True
    """
    config = config or BootstrapConfig.from_env()
    platform = (platform_detector or OsPlatformDetector()).detect()
    token = github_token if github_token is not None else os.environ.get("GITHUB_TOKEN")

    resolver = BinaryResolver(
        server_id=config.server_id,
        repository=config.repository,
        platform=platform,
        state=BootstrapState(),
        settings=YamlSettingsProvider(
            settings_file=config.settings_file,
            global_settings_file=global_settings_file,
        ),
        release_index=HttpxReleaseIndex(client=client, token=token),
        archive_fetcher=HttpxArchiveFetcher(client=client),
        filesystem=LocalFileSystem(),
        status_reporter=status_reporter or LoggingStatusReporter(),
        selector=ReleaseAssetSelector(config.tool_name),
        working_dir=config.working_dir,
    )
    return MdnLspExtension(
        resolver=resolver,
        command_builder=LanguageServerCommandBuilder(config.content_subdir),
    )
