"""Port interfaces for the mdn-lsp core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mdn_lsp.domain.binary import (
        ArchiveKind,
        GitHubRelease,
        InstallationStatus,
        Platform,
    )
    from mdn_lsp.domain.settings import LspSettings


@runtime_checkable
class WorktreePort(Protocol):
    """Port interface for the project the language server is started for.

    Contract:
        - root_path() returns the absolute project root as a string
        - which(name) searches the executable search path, None on a miss
        - shell_env() returns the project's shell environment as pairs
    """

    def root_path(self) -> str:
        """Return the project root directory."""
        ...

    def which(self, name: str) -> str | None:
        """Search the executable search path for ``name``.

        Returns:
            Path to the executable, or None if not found.
        """
        ...

    def shell_env(self) -> list[tuple[str, str]]:
        """Capture the login shell environment for the project root.

        Returns:
            Ordered (name, value) pairs.
        """
        ...


@runtime_checkable
class SettingsProviderPort(Protocol):
    """Port interface for reading per-project language server settings.

    Contract:
        - A missing settings file or block returns empty LspSettings
        - Malformed settings raise MdnLspConfigError
    """

    def lsp_settings(self, server_id: str, worktree: WorktreePort) -> LspSettings:
        """Read settings for ``server_id`` scoped to ``worktree``.

        Raises:
            MdnLspConfigError: If the settings block is malformed.
        """
        ...


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the current OS and architecture.

    Contract:
        - detect() returns the same Platform on every call
        - Raises MdnLspConfigError on hosts outside mac/linux/windows
    """

    def detect(self) -> Platform:
        """Detect the current platform."""
        ...


@runtime_checkable
class ReleaseIndexPort(Protocol):
    """Port interface for querying the remote release index.

    Contract:
        - latest_release() returns the newest matching release
        - Raises ReleaseFetchError when the index cannot be queried or no
          release matches the options
    """

    def latest_release(
        self,
        repository: str,
        require_assets: bool = True,
        pre_release: bool = False,
    ) -> GitHubRelease:
        """Return the latest release of ``repository``.

        Args:
            repository: Repository identifier in 'owner/name' form.
            require_assets: Skip releases that have no downloadable assets.
            pre_release: Allow prereleases to be returned.

        Raises:
            ReleaseFetchError: If the query fails or nothing matches.
        """
        ...


@runtime_checkable
class ArchiveFetcherPort(Protocol):
    """Port interface for downloading and unpacking a release archive.

    Contract:
        - download() leaves ``destination`` fully populated or absent
        - Raises BinaryDownloadError for transfer failures and
          ArchiveExtractError for unpacking failures
    """

    def download(self, url: str, destination: Path, kind: ArchiveKind) -> None:
        """Download ``url`` and extract it into the ``destination`` directory."""
        ...


@runtime_checkable
class FileSystemPort(Protocol):
    """Port interface for the filesystem operations of the resolver.

    Contract:
        - is_file() never raises; errors count as "not a file"
        - make_executable(), list_entries() and remove() raise OSError
    """

    def is_file(self, path: Path) -> bool:
        """Return True if ``path`` exists and is a regular file."""
        ...

    def make_executable(self, path: Path) -> None:
        """Add execute permission to ``path``."""
        ...

    def list_entries(self, directory: Path) -> list[Path]:
        """Return the top-level entries of ``directory``."""
        ...

    def remove(self, path: Path) -> None:
        """Remove a file or a directory tree."""
        ...


@runtime_checkable
class InstallationStatusPort(Protocol):
    """Port interface for reporting installation progress to the host UI.

    Contract:
        - set_status() is fire-and-forget (no exceptions propagated)
    """

    def set_status(
        self,
        server_id: str,
        status: InstallationStatus,
        message: str | None = None,
    ) -> None:
        """Report the installation status of ``server_id``.

        Args:
            server_id: Language server identifier.
            status: New status.
            message: Failure description when status is FAILED.
        """
        ...
