"""Command builder use case turning a resolved binary into a launch command."""

from __future__ import annotations

from mdn_lsp.domain.binary import ResolvedBinary
from mdn_lsp.domain.command import ServerCommand
from mdn_lsp.domain.settings import DEFAULT_CONTENT_SUBDIR

LSP_SUBCOMMAND = "lsp"


class LanguageServerCommandBuilder:
    """Builds the ServerCommand the host runs to start the language server.

    The command is ``<binary> lsp <user arguments...>`` with CONTENT_ROOT
    pointing at the project's content directory. The resolver environment is
    applied after CONTENT_ROOT, so a later pair with the same name wins.
    """

    def __init__(self, content_subdir: str = DEFAULT_CONTENT_SUBDIR) -> None:
        self._content_subdir = content_subdir

    def build(self, binary: ResolvedBinary, root_path: str) -> ServerCommand:
        """Build the launch command.

        Args:
            binary: Result of binary resolution.
            root_path: Project root directory.

        Returns:
            ServerCommand ready to be executed by the host.
        """
        env = {"CONTENT_ROOT": f"{root_path}/{self._content_subdir}"}
        for name, value in binary.env:
            env[name] = value

        return ServerCommand(
            command=binary.path,
            args=(LSP_SUBCOMMAND, *binary.args),
            env=env,
        )
