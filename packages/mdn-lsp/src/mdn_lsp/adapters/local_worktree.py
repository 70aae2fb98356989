"""Local worktree adapter implementing WorktreePort.

Provides PATH lookup with shutil.which and login-shell environment capture
with subprocess for a project directory on the local machine.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

SHELL_ENV_TIMEOUT = 10.0


class LocalWorktree:
    """Adapter for a project directory on the local filesystem.

    Attributes:
        root: Project root directory.
    """

    def __init__(
        self,
        root: Path,
        shell: str | None = None,
        search_path: str | None = None,
    ) -> None:
        """Initialize the worktree.

        Args:
            root: Project root directory.
            shell: Login shell used for environment capture. Defaults to $SHELL,
                then /bin/sh.
            search_path: Executable search path. Defaults to $PATH.
        """
        self.root = root.resolve()
        self._shell = shell or os.environ.get("SHELL") or "/bin/sh"
        self._search_path = search_path

    def root_path(self) -> str:
        return str(self.root)

    def which(self, name: str) -> str | None:
        """Search the executable search path for ``name``."""
        return shutil.which(name, path=self._search_path)

    def shell_env(self) -> list[tuple[str, str]]:
        """Capture the environment of a login shell started in the root.

        Falls back to this process's environment when the shell cannot be
        run, so the capture never raises.
        """
        if sys.platform == "win32":
            return list(os.environ.items())

        try:
            result = subprocess.run(
                [self._shell, "-l", "-c", "env -0"],
                cwd=self.root,
                capture_output=True,
                timeout=SHELL_ENV_TIMEOUT,
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Could not capture shell environment in {self.root}: {e}")
            return list(os.environ.items())

        return parse_env_output(result.stdout)


def parse_env_output(output: bytes) -> list[tuple[str, str]]:
    """Parse NUL-separated ``env -0`` output into (name, value) pairs."""
    pairs: list[tuple[str, str]] = []
    for record in output.decode("utf-8", errors="replace").split("\0"):
        name, sep, value = record.partition("=")
        # Login shells may print banners before the first record
        name = name.rsplit("\n", 1)[-1]
        if sep and name:
            pairs.append((name, value))
    return pairs
