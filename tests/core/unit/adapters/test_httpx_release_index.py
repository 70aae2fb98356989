"""Unit tests for HttpxReleaseIndex adapter."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import httpx
import pytest

from mdn_lsp.adapters.httpx_release_index import HttpxReleaseIndex
from mdn_lsp.adapters.ports import ReleaseIndexPort
from mdn_lsp.domain.binary import ReleaseAsset
from mdn_lsp.domain.exceptions import ReleaseFetchError


def _release(
    tag: str,
    *asset_names: str,
    draft: bool = False,
    prerelease: bool = False,
) -> dict[str, Any]:
    return {
        "tag_name": tag,
        "draft": draft,
        "prerelease": prerelease,
        "assets": [
            {
                "name": name,
                "browser_download_url": f"https://github.com/mdn/rari/releases/download/{tag}/{name}",
            }
            for name in asset_names
        ],
    }


def _index(payload: Any, status_code: int = 200, requests: list | None = None, **kwargs) -> HttpxReleaseIndex:
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, json=payload)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpxReleaseIndex(client=client, **kwargs)


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseIndex")
class TestHttpxReleaseIndexProtocol:
    """Test HttpxReleaseIndex satisfies ReleaseIndexPort protocol."""

    def test_protocol_is_runtime_checkable(self) -> None:
        assert isinstance(HttpxReleaseIndex(), ReleaseIndexPort)


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseIndex")
class TestHttpxReleaseIndexLatestRelease:
    """Test HttpxReleaseIndex.latest_release()."""

    def test_returns_first_release_with_assets(self) -> None:
        """Test the newest release is parsed with its assets."""
        index = _index(
            [
                _release("v0.2.0", "rari-x86_64-apple-darwin.tar.gz"),
                _release("v0.1.0", "rari-x86_64-apple-darwin.tar.gz"),
            ]
        )

        release = index.latest_release("mdn/rari")

        assert release.version == "v0.2.0"
        assert release.assets == (
            ReleaseAsset(
                name="rari-x86_64-apple-darwin.tar.gz",
                download_url="https://github.com/mdn/rari/releases/download/v0.2.0/rari-x86_64-apple-darwin.tar.gz",
            ),
        )

    def test_skips_drafts_and_prereleases(self) -> None:
        index = _index(
            [
                _release("v0.4.0", "a.zip", draft=True),
                _release("v0.3.0-rc1", "a.zip", prerelease=True),
                _release("v0.2.0", "a.zip"),
            ]
        )

        assert index.latest_release("mdn/rari").version == "v0.2.0"

    def test_pre_release_allowed_when_requested(self) -> None:
        index = _index(
            [
                _release("v0.3.0-rc1", "a.zip", prerelease=True),
                _release("v0.2.0", "a.zip"),
            ]
        )

        release = index.latest_release("mdn/rari", pre_release=True)

        assert release.version == "v0.3.0-rc1"

    def test_skips_releases_without_assets(self) -> None:
        index = _index([_release("v0.3.0"), _release("v0.2.0", "a.zip")])

        assert index.latest_release("mdn/rari").version == "v0.2.0"

    def test_assetless_release_accepted_when_not_required(self) -> None:
        index = _index([_release("v0.3.0"), _release("v0.2.0", "a.zip")])

        release = index.latest_release("mdn/rari", require_assets=False)

        assert release.version == "v0.3.0"
        assert release.assets == ()

    def test_request_targets_repository_releases(self) -> None:
        """Test URL, query and GitHub headers of the request."""
        requests: list[httpx.Request] = []
        index = _index([_release("v1", "a.zip")], requests=requests, token="secret")

        index.latest_release("mdn/rari")

        (request,) = requests
        assert request.url.path == "/repos/mdn/rari/releases"
        assert request.url.params["per_page"] == "100"
        assert request.headers["Accept"] == "application/vnd.github+json"
        assert request.headers["Authorization"] == "Bearer secret"

    def test_no_authorization_without_token(self) -> None:
        requests: list[httpx.Request] = []
        index = _index([_release("v1", "a.zip")], requests=requests)

        index.latest_release("mdn/rari")

        assert "Authorization" not in requests[0].headers

    def test_custom_api_base(self) -> None:
        requests: list[httpx.Request] = []
        index = _index(
            [_release("v1", "a.zip")],
            requests=requests,
            api_base="https://ghe.example.com/api/v3/",
        )

        index.latest_release("mdn/rari")

        assert str(requests[0].url).startswith(
            "https://ghe.example.com/api/v3/repos/mdn/rari/releases"
        )


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseIndex")
class TestHttpxReleaseIndexErrors:
    """Test HttpxReleaseIndex error translation."""

    def test_http_error_status(self) -> None:
        index = _index({"message": "rate limited"}, status_code=403)

        with pytest.raises(ReleaseFetchError, match="failed to fetch releases") as exc_info:
            index.latest_release("mdn/rari")

        assert isinstance(exc_info.value.original_error, httpx.HTTPStatusError)

    def test_network_error(self) -> None:
        mock_client = Mock(spec=httpx.Client)
        mock_client.get.side_effect = httpx.ConnectError("Connection refused")
        index = HttpxReleaseIndex(client=mock_client)

        with pytest.raises(ReleaseFetchError, match="Connection refused"):
            index.latest_release("mdn/rari")

    def test_invalid_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>")

        index = HttpxReleaseIndex(client=httpx.Client(transport=httpx.MockTransport(handler)))

        with pytest.raises(ReleaseFetchError):
            index.latest_release("mdn/rari")

    def test_non_list_response(self) -> None:
        index = _index({"tag_name": "v1"})

        with pytest.raises(ReleaseFetchError, match="expected a list"):
            index.latest_release("mdn/rari")

    def test_no_matching_release(self) -> None:
        index = _index([_release("v1", draft=True)])

        with pytest.raises(ReleaseFetchError, match="no matching release found for mdn/rari"):
            index.latest_release("mdn/rari")

    def test_malformed_release_record(self) -> None:
        index = _index([{"tag_name": "v1", "assets": [{"name": "a.zip"}]}])

        with pytest.raises(ReleaseFetchError, match="malformed release record"):
            index.latest_release("mdn/rari")
