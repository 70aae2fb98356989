"""
Root conftest.py for the mdn-lsp test suite.

Registers the tier and responsibility-anchor markers used across the suite:

    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.BinaryResolver")
    def test_something():
        ...

Tiers map to timeouts (applied when pytest-timeout is installed). Tests
missing either marker are reported at collection time; set
MARKER_ENFORCE=1 to fail collection instead.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant",
        "Domain.Policy",
        "UseCase",
        "Port",
        "Adapter",
        "Contract",
    ]
)

# Tier timeout limits in seconds (0 = no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Responsibility this test protects. Must start with one of: "
        + ", ".join(sorted(VALID_TRA_PREFIXES)),
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow). Sets the timeout.",
    )


def _get_tier(item: Item) -> int | None:
    marker = item.get_closest_marker("tier")
    if marker is None or not marker.args:
        return None
    tier = marker.args[0]
    if isinstance(tier, int) and tier in TIER_TIMEOUTS:
        return tier
    return None


def _marker_errors(items: list[Item]) -> list[str]:
    errors = []
    for item in items:
        if _get_tier(item) is None:
            errors.append(f"{item.nodeid}: missing or invalid @pytest.mark.tier()")

        marker = item.get_closest_marker("tra")
        if marker is None or not marker.args:
            errors.append(f"{item.nodeid}: missing @pytest.mark.tra('...')")
            continue
        anchor = marker.args[0]
        if not isinstance(anchor, str) or not any(
            anchor == prefix or anchor.startswith(prefix + ".")
            for prefix in VALID_TRA_PREFIXES
        ):
            errors.append(f"{item.nodeid}: invalid TRA anchor {anchor!r}")
    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))
    for item in items:
        tier = _get_tier(item)
        if tier is None or item.get_closest_marker("timeout") is not None:
            continue
        timeout = TIER_TIMEOUTS[tier]
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check tier/TRA markers and apply tier timeouts."""
    errors = _marker_errors(items)
    if errors:
        if os.environ.get("MARKER_ENFORCE") == "1":
            pytest.fail("Marker errors:\n" + "\n".join(errors), pytrace=False)
        print("\nMarker warnings:")
        for error in errors:
            print(f"  {error}")

    _apply_tier_timeouts(items)
