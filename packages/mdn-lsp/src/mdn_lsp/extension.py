"""Host-facing entry point for the mdn-lsp language server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mdn_lsp.usecases.command_builder import LanguageServerCommandBuilder

if TYPE_CHECKING:
    from mdn_lsp.adapters.ports import WorktreePort
    from mdn_lsp.domain.binary import BootstrapState
    from mdn_lsp.domain.command import ServerCommand
    from mdn_lsp.usecases.binary_resolver import BinaryResolver

logger = logging.getLogger(__name__)


class MdnLspExtension:
    """Turns a language-server-startup event into a launch command.

    One instance lives for the whole host process; its resolver owns the
    BootstrapState, so a binary fetched for one project is reused for the
    next startup.
    """

    def __init__(
        self,
        resolver: BinaryResolver,
        command_builder: LanguageServerCommandBuilder | None = None,
    ) -> None:
        self._resolver = resolver
        self._command_builder = command_builder or LanguageServerCommandBuilder()

    @property
    def state(self) -> BootstrapState:
        return self._resolver.state

    def language_server_command(self, worktree: WorktreePort) -> ServerCommand:
        """Resolve the binary and build the command for ``worktree``.

        Raises:
            BinaryResolutionError: If the binary had to be fetched and failed.
        """
        binary = self._resolver(worktree)
        command = self._command_builder.build(binary, worktree.root_path())
        logger.debug(f"Language server command: {command.argv()}")
        return command
