"""Unit tests for the domain exception hierarchy."""

import pytest

from mdn_lsp.domain.exceptions import (
    ArchiveExtractError,
    AssetNotFoundError,
    BinaryDownloadError,
    BinaryResolutionError,
    DirectoryListError,
    MakeExecutableError,
    MdnLspConfigError,
    MdnLspError,
    ReleaseFetchError,
    UnsupportedPlatformError,
)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.Exceptions")
class TestExceptionHierarchy:
    """Test the exception taxonomy."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            UnsupportedPlatformError,
            ReleaseFetchError,
            ArchiveExtractError,
            MakeExecutableError,
            DirectoryListError,
        ],
    )
    def test_fetch_steps_are_resolution_errors(self, exc_type: type) -> None:
        error = exc_type("step failed")

        assert isinstance(error, BinaryResolutionError)
        assert isinstance(error, MdnLspError)
        assert error.message == "step failed"
        assert str(error) == "step failed"

    def test_config_error_is_not_resolution_error(self) -> None:
        """Test settings problems are a separate branch from fetch failures."""
        assert not issubclass(MdnLspConfigError, BinaryResolutionError)
        assert issubclass(MdnLspConfigError, MdnLspError)

    def test_resolution_error_keeps_original(self) -> None:
        original = OSError("boom")

        error = BinaryResolutionError("wrapped", original_error=original)

        assert error.original_error is original

    def test_asset_not_found_message(self) -> None:
        error = AssetNotFoundError("rari-x86_64-apple-darwin.tar.gz", "v1.2.3")

        assert error.asset_name == "rari-x86_64-apple-darwin.tar.gz"
        assert error.version == "v1.2.3"
        assert str(error) == "unable to find rari-x86_64-apple-darwin.tar.gz in latest release v1.2.3"

    def test_download_error_records_url(self) -> None:
        error = BinaryDownloadError("failed to download file", url="https://example.com/a.zip")

        assert error.url == "https://example.com/a.zip"
        assert error.original_error is None
