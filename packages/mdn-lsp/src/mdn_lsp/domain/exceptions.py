"""Domain exceptions.

Exception hierarchy:
- MdnLspError: Root of every error raised by this package.
- MdnLspConfigError: Invalid configuration, settings, or platform values.
  Raised by domain value objects and the settings adapter.
- BinaryResolutionError: A network-fetch step of binary resolution failed.
  These are the only errors surfaced to the host when the language server
  is starting; each subclass names the step that failed.
"""

from __future__ import annotations


class MdnLspError(Exception):
    """Base exception for the mdn-lsp package."""

    pass


class MdnLspConfigError(MdnLspError):
    """Raised when configuration or user settings are invalid.

    Domain value objects (Platform, BinarySettings, BootstrapConfig) raise this
    from ``__post_init__``. The resolver treats it as "this tier did not apply"
    when it comes from the settings store.
    """

    pass


class BinaryResolutionError(MdnLspError):
    """Raised when the binary cannot be fetched from the release index.

    Attributes:
        message: Human-readable error description naming the failed step.
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        original_error: BaseException | None = None,
    ) -> None:
        """Initialize BinaryResolutionError.

        Args:
            message: Human-readable error description.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class UnsupportedPlatformError(BinaryResolutionError):
    """Raised when no release artifact exists for the current architecture.

    Permanent: x86 is never supported on any operating system.
    """

    pass


class AssetNotFoundError(BinaryResolutionError):
    """Raised when the latest release lacks the artifact for this platform.

    Attributes:
        asset_name: The archive name that was expected.
        version: The release version that was searched.
    """

    def __init__(self, asset_name: str, version: str) -> None:
        super().__init__(f"unable to find {asset_name} in latest release {version}")
        self.asset_name = asset_name
        self.version = version


class ReleaseFetchError(BinaryResolutionError):
    """Raised when the release index cannot be queried."""

    pass


class BinaryDownloadError(BinaryResolutionError):
    """Raised when the release archive cannot be downloaded.

    Attributes:
        url: The URL that failed to download (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message, original_error=original_error)
        self.url = url


class ArchiveExtractError(BinaryResolutionError):
    """Raised when a downloaded archive cannot be unpacked."""

    pass


class MakeExecutableError(BinaryResolutionError):
    """Raised when the extracted binary cannot be marked executable."""

    pass


class DirectoryListError(BinaryResolutionError):
    """Raised when the working directory cannot be listed during cleanup."""

    pass
