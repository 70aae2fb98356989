"""Fake host collaborators for testing.

Test doubles for WorktreePort, SettingsProviderPort and
InstallationStatusPort.
"""

from __future__ import annotations

from mdn_lsp.domain.binary import InstallationStatus
from mdn_lsp.domain.settings import BinarySettings, LspSettings


class FakeWorktree:
    """Fake implementation of WorktreePort.

    Example:
        >>> tree = FakeWorktree(executables={"rari": "/usr/bin/rari"})
        >>> tree.which("rari")
        '/usr/bin/rari'
        >>> tree.which_calls
        ['rari']
    """

    def __init__(
        self,
        root: str = "/project",
        executables: dict[str, str] | None = None,
        env: list[tuple[str, str]] | None = None,
    ) -> None:
        self._root = root
        self._executables = dict(executables or {})
        self._env = list(env or [])
        self.which_calls: list[str] = []

    def root_path(self) -> str:
        return self._root

    def which(self, name: str) -> str | None:
        self.which_calls.append(name)
        return self._executables.get(name)

    def shell_env(self) -> list[tuple[str, str]]:
        return list(self._env)


class FakeSettingsProvider:
    """Fake implementation of SettingsProviderPort.

    Returns preconfigured settings, or raises a configured exception to
    simulate a malformed settings file.
    """

    def __init__(self, settings: LspSettings | None = None) -> None:
        self._settings = settings or LspSettings()
        self._exception: BaseException | None = None
        self.calls: list[str] = []

    @classmethod
    def with_binary(
        cls,
        path: str | None = None,
        arguments: tuple[str, ...] | None = None,
    ) -> FakeSettingsProvider:
        """Create a fake whose settings carry a binary block."""
        return cls(LspSettings(binary=BinarySettings(path=path, arguments=arguments)))

    def set_exception(self, exception: BaseException | None) -> None:
        self._exception = exception

    def lsp_settings(self, server_id: str, worktree: object) -> LspSettings:
        self.calls.append(server_id)
        if self._exception is not None:
            raise self._exception
        return self._settings


class FakeStatusReporter:
    """Fake implementation of InstallationStatusPort recording every update."""

    def __init__(self) -> None:
        self.updates: list[tuple[str, InstallationStatus, str | None]] = []

    @property
    def statuses(self) -> list[InstallationStatus]:
        """Return the reported statuses in order."""
        return [status for _, status, _ in self.updates]

    def set_status(
        self,
        server_id: str,
        status: InstallationStatus,
        message: str | None = None,
    ) -> None:
        self.updates.append((server_id, status, message))
