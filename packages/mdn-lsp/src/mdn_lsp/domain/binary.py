"""Binary-related domain value objects.

This module contains value objects for locating the rari binary: the
platform key used to pick a release artifact, release index records, the
resolved binary handed to the command builder, and the process-wide
bootstrap state that remembers a previously fetched path.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from mdn_lsp.domain.exceptions import MdnLspConfigError

OperatingSystem = Literal["mac", "linux", "windows"]
Architecture = Literal["aarch64", "x86", "x86_64"]

VALID_OS: tuple[str, ...] = ("mac", "linux", "windows")
VALID_ARCH: tuple[str, ...] = ("aarch64", "x86", "x86_64")


@dataclass(frozen=True)
class Platform:
    """Platform value object representing OS and architecture.

    Immutable value object derived once per process from the host
    environment. It selects which release artifact to fetch.

    Attributes:
        os: Operating system, must be 'mac', 'linux' or 'windows'.
        arch: Architecture, must be 'aarch64', 'x86' or 'x86_64'.
    """

    os: OperatingSystem
    arch: Architecture

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        self._validate_os()
        self._validate_arch()

    def _validate_os(self) -> None:
        """Validate os is a valid value."""
        if self.os not in VALID_OS:
            raise MdnLspConfigError(f"os must be one of {VALID_OS}, got: {self.os!r}")

    def _validate_arch(self) -> None:
        """Validate arch is a valid value."""
        if self.arch not in VALID_ARCH:
            raise MdnLspConfigError(
                f"arch must be one of {VALID_ARCH}, got: {self.arch!r}"
            )

    @property
    def is_unix(self) -> bool:
        """True on mac and linux."""
        return self.os in ("mac", "linux")


class ArchiveKind(Enum):
    """Archive format of a release artifact."""

    GZIP_TAR = "tar.gz"
    ZIP = "zip"


class InstallationStatus(Enum):
    """Language server installation status reported to the host UI.

    Attributes:
        NONE: Nothing in progress (installed or not yet checked).
        CHECKING_FOR_UPDATE: Querying the release index.
        DOWNLOADING: Downloading and extracting a release archive.
        FAILED: The last fetch attempt failed.
    """

    NONE = "none"
    CHECKING_FOR_UPDATE = "checking_for_update"
    DOWNLOADING = "downloading"
    FAILED = "failed"


@dataclass(frozen=True)
class ReleaseAsset:
    """A downloadable file attached to a release.

    Attributes:
        name: Asset file name, e.g. 'rari-x86_64-apple-darwin.tar.gz'.
        download_url: URL the asset can be fetched from.
    """

    name: str
    download_url: str


@dataclass(frozen=True)
class GitHubRelease:
    """A release returned by the release index.

    Attributes:
        version: Release tag, used verbatim in the install directory name.
        assets: Downloadable assets attached to the release.
    """

    version: str
    assets: tuple[ReleaseAsset, ...] = ()

    def __post_init__(self) -> None:
        if not self.version or not self.version.strip():
            raise MdnLspConfigError("release version cannot be empty")

    def find_asset(self, name: str) -> ReleaseAsset | None:
        """Return the asset with exactly this name, or None."""
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None


@dataclass(frozen=True)
class ResolvedBinary:
    """The binary chosen for one resolution call.

    Produced fresh on every call and owned by the caller. Only ``path`` is
    ever remembered between calls (in BootstrapState).

    Attributes:
        path: Executable path, verbatim from settings or PATH, or the
            version-qualified install path.
        args: Extra arguments configured by the user (possibly empty).
        env: Extra environment variables as ordered (name, value) pairs.
    """

    path: str
    args: tuple[str, ...] = ()
    env: tuple[tuple[str, str], ...] = ()


@dataclass
class BootstrapState:
    """Process-wide cache of a previously fetched binary path.

    Starts empty, is set the first time a network fetch succeeds and is
    never cleared. The lock serialises first fetches so two concurrent
    startups cannot download the same release twice.
    """

    binary_path: str | None = None
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def remember(self, path: str) -> None:
        """Record the path of a freshly fetched binary."""
        self.binary_path = path
