"""Release asset selector mapping a platform to its release artifact."""

from __future__ import annotations

from mdn_lsp.domain.binary import ArchiveKind, Platform
from mdn_lsp.domain.exceptions import UnsupportedPlatformError

# (arch, os) -> target triple and archive kind. x86 has no entries.
_TARGETS: dict[tuple[str, str], tuple[str, ArchiveKind]] = {
    ("aarch64", "mac"): ("aarch64-apple-darwin", ArchiveKind.GZIP_TAR),
    ("aarch64", "linux"): ("aarch64-unknown-linux-musl", ArchiveKind.GZIP_TAR),
    ("aarch64", "windows"): ("aarch64-pc-windows-msvc", ArchiveKind.ZIP),
    ("x86_64", "mac"): ("x86_64-apple-darwin", ArchiveKind.GZIP_TAR),
    ("x86_64", "linux"): ("x86_64-unknown-linux-musl", ArchiveKind.GZIP_TAR),
    ("x86_64", "windows"): ("x86_64-pc-windows-msvc", ArchiveKind.ZIP),
}


class ReleaseAssetSelector:
    """Maps a Platform to the expected release archive and local executable.

    Pure and deterministic: no I/O, and the only failure is
    UnsupportedPlatformError for x86.

    Example:
        >>> selector = ReleaseAssetSelector("rari")
        >>> selector.asset_name(Platform(os="mac", arch="aarch64"))
        'rari-aarch64-apple-darwin.tar.gz'
        >>> selector.executable_path(Platform(os="windows", arch="x86_64"), "v1.0.0")
        'rari-v1.0.0/rari.exe'
    """

    def __init__(self, tool_name: str) -> None:
        self._tool_name = tool_name

    @property
    def tool_name(self) -> str:
        return self._tool_name

    def asset_name(self, platform: Platform) -> str:
        """Return the archive name expected in a release for ``platform``.

        Raises:
            UnsupportedPlatformError: If the architecture is x86.
        """
        triple, kind = self._target(platform)
        return f"{self._tool_name}-{triple}.{kind.value}"

    def archive_kind(self, platform: Platform) -> ArchiveKind:
        """Return the archive format used for ``platform``.

        Raises:
            UnsupportedPlatformError: If the architecture is x86.
        """
        _, kind = self._target(platform)
        return kind

    def version_dir(self, version: str) -> str:
        """Return the install directory name for a release version."""
        return f"{self._tool_name}-{version}"

    def executable_path(self, platform: Platform, version: str) -> str:
        """Return the executable path relative to the working directory."""
        executable = self._tool_name
        if platform.os == "windows":
            executable = f"{executable}.exe"
        return f"{self.version_dir(version)}/{executable}"

    def _target(self, platform: Platform) -> tuple[str, ArchiveKind]:
        try:
            return _TARGETS[(platform.arch, platform.os)]
        except KeyError:
            raise UnsupportedPlatformError(
                f"{platform.arch} is not supported on {platform.os}"
            ) from None
