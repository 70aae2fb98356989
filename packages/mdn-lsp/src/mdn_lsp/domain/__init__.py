"""Domain layer: Entities with zero external dependencies."""

from mdn_lsp.domain.binary import (
    ArchiveKind,
    BootstrapState,
    GitHubRelease,
    InstallationStatus,
    Platform,
    ReleaseAsset,
    ResolvedBinary,
)
from mdn_lsp.domain.command import ServerCommand
from mdn_lsp.domain.exceptions import (
    AssetNotFoundError,
    BinaryResolutionError,
    MdnLspConfigError,
    MdnLspError,
    UnsupportedPlatformError,
)
from mdn_lsp.domain.settings import BinarySettings, BootstrapConfig, LspSettings

__all__ = [
    "ArchiveKind",
    "BootstrapState",
    "GitHubRelease",
    "InstallationStatus",
    "Platform",
    "ReleaseAsset",
    "ResolvedBinary",
    "ServerCommand",
    "MdnLspError",
    "MdnLspConfigError",
    "BinaryResolutionError",
    "UnsupportedPlatformError",
    "AssetNotFoundError",
    "BinarySettings",
    "BootstrapConfig",
    "LspSettings",
]
