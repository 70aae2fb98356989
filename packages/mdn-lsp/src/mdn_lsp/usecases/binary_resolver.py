"""Binary resolver use case deciding which rari executable to launch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from mdn_lsp.domain.binary import (
    BootstrapState,
    InstallationStatus,
    Platform,
    ResolvedBinary,
)
from mdn_lsp.domain.exceptions import (
    AssetNotFoundError,
    BinaryDownloadError,
    BinaryResolutionError,
    MakeExecutableError,
    MdnLspConfigError,
    ReleaseFetchError,
)
from mdn_lsp.domain.settings import default_working_dir
from mdn_lsp.usecases.asset_selector import ReleaseAssetSelector
from mdn_lsp.usecases.stale_installation_cleaner import StaleInstallationCleaner

if TYPE_CHECKING:
    from mdn_lsp.adapters.ports import (
        ArchiveFetcherPort,
        FileSystemPort,
        InstallationStatusPort,
        ReleaseIndexPort,
        SettingsProviderPort,
        WorktreePort,
    )
    from mdn_lsp.domain.settings import BinarySettings

logger = logging.getLogger(__name__)


class BinaryResolver:
    """Use case for resolving the rari binary for a language server start.

    Tries each source in strict priority order and stops at the first hit:
    1. A binary path configured in the project's settings (trusted as-is)
    2. The tool found on the executable search path
    3. A path remembered in BootstrapState from an earlier fetch
    4. The latest release from the release index, downloaded on demand

    Failures in tiers 1-3 only mean the tier did not apply. Tier 4 failures
    are raised as BinaryResolutionError subclasses naming the failed step.
    """

    def __init__(
        self,
        *,
        server_id: str,
        repository: str,
        platform: Platform,
        state: BootstrapState,
        settings: SettingsProviderPort,
        release_index: ReleaseIndexPort,
        archive_fetcher: ArchiveFetcherPort,
        filesystem: FileSystemPort,
        status_reporter: InstallationStatusPort,
        selector: ReleaseAssetSelector,
        working_dir: Path | None = None,
        cleaner: StaleInstallationCleaner | None = None,
    ) -> None:
        """Initialize the binary resolver use case.

        Args:
            server_id: Language server identifier used for settings and status.
            repository: Release repository in 'owner/name' form.
            platform: Platform detected once for this process.
            state: Process-wide cache of a previously fetched path.
            settings: Port for per-project settings.
            release_index: Port for querying releases.
            archive_fetcher: Port for downloading and extracting archives.
            filesystem: Port for file checks, permissions and cleanup.
            status_reporter: Port for installation status feedback.
            selector: Platform to artifact mapping.
            working_dir: Directory holding downloaded versions (defaults to
                the per-user cache directory).
            cleaner: Stale installation cleaner, built from ``filesystem``
                if not given.
        """
        self._server_id = server_id
        self._repository = repository
        self._platform = platform
        self._state = state
        self._settings = settings
        self._release_index = release_index
        self._archive_fetcher = archive_fetcher
        self._filesystem = filesystem
        self._status_reporter = status_reporter
        self._selector = selector
        self._working_dir = working_dir or default_working_dir()
        self._cleaner = cleaner or StaleInstallationCleaner(filesystem)

    @property
    def state(self) -> BootstrapState:
        return self._state

    def __call__(self, worktree: WorktreePort) -> ResolvedBinary:
        """Resolve the binary for ``worktree``.

        Returns:
            ResolvedBinary with path, user arguments and shell environment.

        Raises:
            BinaryResolutionError: If the binary had to be fetched and any
                fetch step failed.
        """
        env = self._environment(worktree)
        args: tuple[str, ...] = ()

        # Tier 1: explicit settings override
        binary_settings = self._read_binary_settings(worktree)
        if binary_settings is not None:
            args = binary_settings.arguments or ()
            if binary_settings.path is not None:
                logger.info(
                    f"Using {self._server_id} binary from settings: {binary_settings.path}"
                )
                return ResolvedBinary(path=binary_settings.path, args=args, env=env)

        # Tier 2: executable search path
        path = self._which(worktree)
        if path is not None:
            logger.info(f"Using {self._selector.tool_name} found on PATH: {path}")
            return ResolvedBinary(path=path, args=args, env=env)

        # Tier 3: previously fetched binary
        path = self._cached_path()
        if path is not None:
            logger.debug(f"Using cached binary: {path}")
            return ResolvedBinary(path=path, args=args, env=env)

        # Tier 4: release index
        path = self._fetch(Path(worktree.root_path()))
        return ResolvedBinary(path=path, args=args, env=env)

    def _environment(self, worktree: WorktreePort) -> tuple[tuple[str, str], ...]:
        if not self._platform.is_unix:
            return ()
        return tuple(worktree.shell_env())

    def _read_binary_settings(self, worktree: WorktreePort) -> BinarySettings | None:
        try:
            lsp_settings = self._settings.lsp_settings(self._server_id, worktree)
        except (MdnLspConfigError, OSError, ValueError) as e:
            logger.debug(f"Ignoring unreadable {self._server_id} settings: {e}")
            return None
        return lsp_settings.binary

    def _which(self, worktree: WorktreePort) -> str | None:
        try:
            return worktree.which(self._selector.tool_name)
        except OSError as e:
            logger.debug(f"PATH lookup for {self._selector.tool_name} failed: {e}")
            return None

    def _cached_path(self) -> str | None:
        path = self._state.binary_path
        if path is not None and self._filesystem.is_file(Path(path)):
            return path
        return None

    def _fetch(self, project_root: Path) -> str:
        with self._state.lock:
            # Another caller may have finished a fetch while we waited
            path = self._cached_path()
            if path is not None:
                return path

            self._report(InstallationStatus.CHECKING_FOR_UPDATE)
            try:
                path = self._install_latest(project_root)
            except BinaryResolutionError as e:
                logger.error(f"Failed to fetch {self._selector.tool_name}: {e.message}")
                self._report(InstallationStatus.FAILED, e.message)
                raise

            self._state.remember(path)
            self._report(InstallationStatus.NONE)
            return path

    def _install_latest(self, project_root: Path) -> str:
        asset_name = self._selector.asset_name(self._platform)
        kind = self._selector.archive_kind(self._platform)

        try:
            release = self._release_index.latest_release(
                self._repository, require_assets=True, pre_release=False
            )
        except BinaryResolutionError:
            raise
        except Exception as e:
            raise ReleaseFetchError(
                f"failed to fetch latest release of {self._repository}: {e}",
                original_error=e,
            ) from e

        asset = release.find_asset(asset_name)
        if asset is None:
            raise AssetNotFoundError(asset_name, release.version)

        version_dir = self._selector.version_dir(release.version)
        binary_path = self._working_dir / self._selector.executable_path(
            self._platform, release.version
        )

        if self._filesystem.is_file(binary_path):
            logger.info(f"{version_dir} is already installed")
            return str(binary_path)

        self._report(InstallationStatus.DOWNLOADING)
        logger.info(f"Downloading {asset.name} from {asset.download_url}")

        try:
            self._archive_fetcher.download(
                asset.download_url, self._working_dir / version_dir, kind
            )
        except BinaryResolutionError:
            raise
        except Exception as e:
            raise BinaryDownloadError(
                f"failed to download file: {e}",
                url=asset.download_url,
                original_error=e,
            ) from e

        try:
            self._filesystem.make_executable(binary_path)
        except OSError as e:
            raise MakeExecutableError(
                f"failed to make {binary_path} executable: {e}", original_error=e
            ) from e

        self._cleaner.clean(self._working_dir, keep=version_dir, protect=project_root)
        return str(binary_path)

    def _report(self, status: InstallationStatus, message: str | None = None) -> None:
        self._status_reporter.set_status(self._server_id, status, message)
