"""Fake filesystem for testing.

Provides an in-memory FileSystemPort that counts existence checks and can
be told to fail specific operations.
"""

from __future__ import annotations

from pathlib import Path


class FakeFileSystem:
    """In-memory implementation of FileSystemPort.

    Tracks a set of regular files and directories. Directories are implied by
    the files below them and may also be added explicitly.

    Example:
        >>> fs = FakeFileSystem(files=["work/rari-v1/rari"])
        >>> fs.is_file(Path("work/rari-v1/rari"))
        True
        >>> fs.list_entries(Path("work"))
        [PosixPath('work/rari-v1')]
    """

    def __init__(
        self,
        files: list[str | Path] | None = None,
        directories: list[str | Path] | None = None,
    ) -> None:
        self.files: set[Path] = {Path(f) for f in files or ()}
        self.directories: set[Path] = {Path(d) for d in directories or ()}
        self.executables: set[Path] = set()
        self.is_file_calls: list[Path] = []
        self.removed: list[Path] = []
        self._list_error: OSError | None = None
        self._chmod_error: OSError | None = None
        self._remove_errors: dict[str, OSError] = {}

    def add_file(self, path: str | Path) -> None:
        self.files.add(Path(path))

    def fail_listing(self, error: OSError | None) -> None:
        """Make list_entries() raise ``error`` (None to clear)."""
        self._list_error = error

    def fail_make_executable(self, error: OSError | None) -> None:
        """Make make_executable() raise ``error`` (None to clear)."""
        self._chmod_error = error

    def fail_removal(self, name: str, error: OSError) -> None:
        """Make remove() raise ``error`` for the entry called ``name``."""
        self._remove_errors[name] = error

    def is_file(self, path: Path) -> bool:
        self.is_file_calls.append(path)
        return path in self.files

    def make_executable(self, path: Path) -> None:
        if self._chmod_error is not None:
            raise self._chmod_error
        if path not in self.files:
            raise FileNotFoundError(f"No such file: {path}")
        self.executables.add(path)

    def list_entries(self, directory: Path) -> list[Path]:
        if self._list_error is not None:
            raise self._list_error

        entries: set[Path] = set()
        for path in self.files | self.directories:
            try:
                relative = path.relative_to(directory)
            except ValueError:
                continue
            if relative.parts:
                entries.add(directory / relative.parts[0])
        return sorted(entries)

    def remove(self, path: Path) -> None:
        if path.name in self._remove_errors:
            raise self._remove_errors[path.name]

        self.files = {f for f in self.files if not _is_within(f, path)}
        self.directories = {d for d in self.directories if not _is_within(d, path)}
        self.removed.append(path)


def _is_within(path: Path, parent: Path) -> bool:
    return path == parent or parent in path.parents
