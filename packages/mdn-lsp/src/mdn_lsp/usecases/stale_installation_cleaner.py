"""Stale installation cleaner use case.

Removes every top-level entry of the working directory except the version
directory that was just installed. Removal is best-effort: individual
failures are collected in the report and never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from mdn_lsp.domain.exceptions import DirectoryListError

if TYPE_CHECKING:
    from mdn_lsp.adapters.ports import FileSystemPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanupReport:
    """Outcome of a cleanup pass.

    Attributes:
        removed: Entries that were deleted.
        failed: Entries that could not be deleted, with the error message.
        skipped: True when the pass was refused because the working
            directory holds a protected path.
    """

    removed: tuple[Path, ...] = ()
    failed: tuple[tuple[Path, str], ...] = ()
    skipped: bool = False

    @property
    def clean(self) -> bool:
        """True when every stale entry was removed."""
        return not self.failed and not self.skipped


class StaleInstallationCleaner:
    """Deletes previous installations after a fresh download.

    Policy: collect-and-ignore. Listing the directory must succeed, since
    without it nothing can be cleaned; removing a single entry may fail
    (locked file, permissions) without blocking the language server startup.
    A working directory that is, or contains, a protected path (the project
    being served) is never cleaned.
    """

    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def clean(
        self,
        working_dir: Path,
        keep: str,
        protect: Path | None = None,
    ) -> CleanupReport:
        """Remove every entry of ``working_dir`` not named ``keep``.

        Args:
            working_dir: Directory holding installed versions.
            keep: Name of the entry to preserve.
            protect: Path that must survive; if ``working_dir`` is this path
                or one of its ancestors, nothing is removed.

        Returns:
            CleanupReport listing removed and failed entries.

        Raises:
            DirectoryListError: If ``working_dir`` cannot be listed.
        """
        if protect is not None and _contains(working_dir, protect):
            logger.warning(
                f"Not cleaning {working_dir}: it contains the project at {protect}"
            )
            return CleanupReport(skipped=True)

        try:
            entries = self._filesystem.list_entries(working_dir)
        except OSError as e:
            raise DirectoryListError(
                f"failed to list working directory {working_dir}: {e}",
                original_error=e,
            ) from e

        removed: list[Path] = []
        failed: list[tuple[Path, str]] = []

        for entry in entries:
            if entry.name == keep:
                continue
            try:
                self._filesystem.remove(entry)
            except OSError as e:
                logger.warning(f"Could not remove stale installation {entry}: {e}")
                failed.append((entry, str(e)))
            else:
                logger.info(f"Removed stale installation {entry}")
                removed.append(entry)

        return CleanupReport(removed=tuple(removed), failed=tuple(failed))


def _contains(directory: Path, path: Path) -> bool:
    directory = directory.resolve()
    path = path.resolve()
    return directory == path or directory in path.parents
