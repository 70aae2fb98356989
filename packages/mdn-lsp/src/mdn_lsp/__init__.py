"""mdn-lsp: Resolve, fetch and launch the rari language server binary."""

__version__ = "0.1.0"

from mdn_lsp.domain.binary import BootstrapState, Platform, ResolvedBinary
from mdn_lsp.domain.command import ServerCommand
from mdn_lsp.domain.exceptions import BinaryResolutionError, MdnLspConfigError
from mdn_lsp.domain.settings import BootstrapConfig
from mdn_lsp.extension import MdnLspExtension
from mdn_lsp.usecases.binary_resolver import BinaryResolver

__all__ = [
    "BootstrapConfig",
    "BootstrapState",
    "BinaryResolver",
    "BinaryResolutionError",
    "MdnLspConfigError",
    "MdnLspExtension",
    "Platform",
    "ResolvedBinary",
    "ServerCommand",
]
