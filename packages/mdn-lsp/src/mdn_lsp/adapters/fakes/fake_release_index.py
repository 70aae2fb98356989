"""Fake release index for testing.

Provides a test double for ReleaseIndexPort that returns preconfigured
releases without network operations.
"""

from __future__ import annotations

from dataclasses import dataclass

from mdn_lsp.domain.binary import GitHubRelease, ReleaseAsset


@dataclass(frozen=True)
class ReleaseQuery:
    """Record of a single latest_release() call."""

    repository: str
    require_assets: bool
    pre_release: bool


class FakeReleaseIndex:
    """Fake implementation of ReleaseIndexPort for testing.

    Returns a preconfigured GitHubRelease. Supports configuring exceptions
    for error path testing and records all calls for assertion in tests.

    Example:
        >>> fake = FakeReleaseIndex.with_assets("v1.0.0", "rari-x86_64-apple-darwin.tar.gz")
        >>> fake.latest_release("mdn/rari").version
        'v1.0.0'
        >>> fake.calls[0].repository
        'mdn/rari'
    """

    def __init__(self, release: GitHubRelease | None = None) -> None:
        self._release = release
        self._exception: BaseException | None = None
        self._calls: list[ReleaseQuery] = []

    @classmethod
    def with_assets(cls, version: str, *asset_names: str) -> FakeReleaseIndex:
        """Create a fake whose release carries the named assets.

        Download URLs are derived from the version and asset name.
        """
        assets = tuple(
            ReleaseAsset(
                name=name,
                download_url=f"https://example.com/download/{version}/{name}",
            )
            for name in asset_names
        )
        return cls(GitHubRelease(version=version, assets=assets))

    @property
    def calls(self) -> list[ReleaseQuery]:
        """Return recorded latest_release() calls."""
        return self._calls

    def set_response(self, release: GitHubRelease) -> None:
        """Configure the release to return."""
        self._release = release

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise, or None to clear."""
        self._exception = exception

    def latest_release(
        self,
        repository: str,
        require_assets: bool = True,
        pre_release: bool = False,
    ) -> GitHubRelease:
        """Return the preconfigured release or raise the configured exception."""
        self._calls.append(ReleaseQuery(repository, require_assets, pre_release))

        if self._exception is not None:
            raise self._exception
        if self._release is None:
            raise AssertionError("FakeReleaseIndex has no release configured")
        return self._release
