"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform

from mdn_lsp.domain.binary import Architecture, OperatingSystem, Platform
from mdn_lsp.domain.exceptions import MdnLspConfigError


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by querying platform.system() and
    platform.machine().

    Machine type mappings:
        - x86_64, AMD64 -> x86_64
        - aarch64, arm64 -> aarch64
        - i386, i686, x86 -> x86 (detected, but no release exists for it)
    """

    _OS_MAP: dict[str, OperatingSystem] = {
        "darwin": "mac",
        "linux": "linux",
        "windows": "windows",
    }

    _ARCH_MAP: dict[str, Architecture] = {
        "x86_64": "x86_64",
        "amd64": "x86_64",
        "aarch64": "aarch64",
        "arm64": "aarch64",
        "i386": "x86",
        "i686": "x86",
        "x86": "x86",
    }

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.

        Raises:
            MdnLspConfigError: If the current OS or architecture is not recognised.
        """
        return Platform(os=self._detect_os(), arch=self._detect_arch())

    def _detect_os(self) -> OperatingSystem:
        system = platform.system().lower()
        if system not in self._OS_MAP:
            raise MdnLspConfigError(
                f"Unsupported operating system: {platform.system()!r}. "
                f"Supported: Darwin, Linux, Windows"
            )
        return self._OS_MAP[system]

    def _detect_arch(self) -> Architecture:
        machine = platform.machine().lower()
        if machine not in self._ARCH_MAP:
            raise MdnLspConfigError(
                f"Unsupported architecture: {platform.machine()!r}. "
                f"Supported: x86_64/amd64, aarch64/arm64"
            )
        return self._ARCH_MAP[machine]
