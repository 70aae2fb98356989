"""HTTPX-based implementation of the ReleaseIndexPort.

This adapter queries the GitHub REST API for the releases of a repository.
"""

from __future__ import annotations

from typing import Any

import httpx

from mdn_lsp.adapters.ports import ReleaseIndexPort
from mdn_lsp.domain.binary import GitHubRelease, ReleaseAsset
from mdn_lsp.domain.exceptions import MdnLspConfigError, ReleaseFetchError

GITHUB_API_BASE = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


class HttpxReleaseIndex:
    """HTTPX-based adapter for the GitHub releases API.

    Lists releases newest first and returns the first one that matches the
    requested options. Drafts are always skipped. The release version is the
    tag name, verbatim.

    Attributes:
        api_base: Base URL of the GitHub API.
        token: Optional token sent as a bearer credential (raises rate limits).
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        api_base: str = GITHUB_API_BASE,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the release index.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                If not provided, a new client is created per request.
            api_base: Base URL of the GitHub API.
            token: Optional GitHub token.
            timeout: Request timeout in seconds for per-request clients.
        """
        self._client = client
        self._api_base = api_base.rstrip("/")
        self._token = token
        self._timeout = timeout

    def latest_release(
        self,
        repository: str,
        require_assets: bool = True,
        pre_release: bool = False,
    ) -> GitHubRelease:
        """Return the latest release of ``repository`` matching the options.

        Raises:
            ReleaseFetchError: For network failures, HTTP errors, malformed
                responses, or when no release matches.
        """
        url = f"{self._api_base}/repos/{repository}/releases"
        try:
            releases = self._get_json(url)
        except (httpx.HTTPError, ValueError) as e:
            raise ReleaseFetchError(
                f"failed to fetch releases from {url}: {e}", original_error=e
            ) from e

        if not isinstance(releases, list):
            raise ReleaseFetchError(f"unexpected response from {url}: expected a list")

        for data in releases:
            if not isinstance(data, dict):
                continue
            if data.get("draft"):
                continue
            if data.get("prerelease") and not pre_release:
                continue
            if require_assets and not data.get("assets"):
                continue
            return self._parse_release(data)

        raise ReleaseFetchError(f"no matching release found for {repository}")

    def _get_json(self, url: str) -> Any:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        params = {"per_page": 100}

        if self._client is not None:
            response = self._client.get(url, headers=headers, params=params)
            response.raise_for_status()
            return response.json()

        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            response = client.get(url, headers=headers, params=params)
            response.raise_for_status()
            return response.json()

    def _parse_release(self, data: dict[str, Any]) -> GitHubRelease:
        try:
            assets = tuple(
                ReleaseAsset(
                    name=asset["name"],
                    download_url=asset["browser_download_url"],
                )
                for asset in data.get("assets") or ()
            )
            return GitHubRelease(version=data["tag_name"], assets=assets)
        except (KeyError, TypeError, MdnLspConfigError) as e:
            raise ReleaseFetchError(
                f"malformed release record: {e}", original_error=e
            ) from e


# Runtime protocol check
assert isinstance(HttpxReleaseIndex(), ReleaseIndexPort)
