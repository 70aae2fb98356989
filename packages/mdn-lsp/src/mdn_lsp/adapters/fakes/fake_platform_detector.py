"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from mdn_lsp.domain.binary import Architecture, OperatingSystem, Platform


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Example:
        >>> fake = FakePlatformDetector(Platform(os="linux", arch="x86_64"))
        >>> fake.detect()
        Platform(os='linux', arch='x86_64')

        >>> fake = FakePlatformDetector.from_tuple("mac", "aarch64")
        >>> fake.detect()
        Platform(os='mac', arch='aarch64')
    """

    def __init__(self, platform: Platform) -> None:
        self._platform = platform
        self.detect_calls = 0

    @classmethod
    def from_tuple(
        cls,
        os: OperatingSystem,
        arch: Architecture,
    ) -> FakePlatformDetector:
        """Create a FakePlatformDetector from OS and architecture strings."""
        return cls(Platform(os=os, arch=arch))

    def detect(self) -> Platform:
        """Return the configured platform."""
        self.detect_calls += 1
        return self._platform
