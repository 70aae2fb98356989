"""Local filesystem adapter implementing FileSystemPort."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path


class LocalFileSystem:
    """Adapter performing real filesystem operations with os/shutil."""

    def is_file(self, path: Path) -> bool:
        """Return True if ``path`` is a regular file; errors count as False."""
        try:
            return path.is_file()
        except OSError:
            return False

    def make_executable(self, path: Path) -> None:
        """Add execute permission for user, group and others.

        Raises:
            OSError: If the file is missing or permissions cannot be changed.
        """
        mode = path.stat().st_mode
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def list_entries(self, directory: Path) -> list[Path]:
        """Return the top-level entries of ``directory``, sorted by name.

        Raises:
            OSError: If the directory cannot be listed.
        """
        with os.scandir(directory) as entries:
            return sorted(Path(entry.path) for entry in entries)

    def remove(self, path: Path) -> None:
        """Remove a file, symlink, or directory tree.

        Raises:
            OSError: If removal fails.
        """
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
