"""Language server command descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ServerCommand:
    """Command line and environment used by the host to launch the server.

    Attributes:
        command: Executable path.
        args: Arguments, starting with the 'lsp' subcommand.
        env: Environment variables to set for the process.
    """

    command: str
    args: tuple[str, ...] = ()
    env: dict[str, str] = field(default_factory=dict)

    def argv(self) -> list[str]:
        """Return the full argument vector, executable first."""
        return [self.command, *self.args]
