"""Use cases: Application logic layer."""

from mdn_lsp.usecases.asset_selector import ReleaseAssetSelector
from mdn_lsp.usecases.binary_resolver import BinaryResolver
from mdn_lsp.usecases.command_builder import LanguageServerCommandBuilder
from mdn_lsp.usecases.stale_installation_cleaner import (
    CleanupReport,
    StaleInstallationCleaner,
)

__all__ = [
    "ReleaseAssetSelector",
    "BinaryResolver",
    "LanguageServerCommandBuilder",
    "CleanupReport",
    "StaleInstallationCleaner",
]
