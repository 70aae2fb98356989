"""Pytest configuration and shared fixtures for mdn-lsp core unit tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from mdn_lsp.adapters.fakes import (
    FakeArchiveFetcher,
    FakeFileSystem,
    FakeReleaseIndex,
    FakeSettingsProvider,
    FakeStatusReporter,
)
from mdn_lsp.domain.binary import BootstrapState, Platform
from mdn_lsp.usecases.asset_selector import ReleaseAssetSelector
from mdn_lsp.usecases.binary_resolver import BinaryResolver

WORK_DIR = Path("/work")
LINUX_ASSET = "rari-x86_64-unknown-linux-musl.tar.gz"


@pytest.fixture
def linux_platform() -> Platform:
    return Platform(os="linux", arch="x86_64")


@pytest.fixture
def selector() -> ReleaseAssetSelector:
    return ReleaseAssetSelector("rari")


@pytest.fixture
def fake_filesystem() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def fake_status() -> FakeStatusReporter:
    return FakeStatusReporter()


@pytest.fixture
def make_resolver(
    linux_platform: Platform,
    selector: ReleaseAssetSelector,
    fake_filesystem: FakeFileSystem,
    fake_status: FakeStatusReporter,
) -> Callable[..., BinaryResolver]:
    """Build a BinaryResolver wired to fakes; keyword arguments override ports.

    Example:
        def test_x(make_resolver):
            resolver = make_resolver(release_index=FakeReleaseIndex.with_assets("v1", ...))
    """

    def factory(**overrides: Any) -> BinaryResolver:
        kwargs: dict[str, Any] = {
            "server_id": "mdn-lsp",
            "repository": "mdn/rari",
            "platform": linux_platform,
            "state": BootstrapState(),
            "settings": FakeSettingsProvider(),
            "release_index": FakeReleaseIndex.with_assets("v2.3.0", LINUX_ASSET),
            "archive_fetcher": FakeArchiveFetcher(filesystem=fake_filesystem),
            "filesystem": fake_filesystem,
            "status_reporter": fake_status,
            "selector": selector,
            "working_dir": WORK_DIR,
        }
        kwargs.update(overrides)
        return BinaryResolver(**kwargs)

    return factory
