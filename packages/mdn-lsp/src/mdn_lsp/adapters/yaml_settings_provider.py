"""Settings reader for per-project language server overrides.

Reads the ``lsp.<server-id>`` block of the editor settings file with PyYAML.
JSON settings files parse as YAML, so both formats are accepted.

Example settings::

    lsp:
      mdn-lsp:
        binary:
          path: /usr/local/bin/rari
          arguments: ["--verbose"]
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from mdn_lsp.domain.exceptions import MdnLspConfigError
from mdn_lsp.domain.settings import DEFAULT_SETTINGS_FILE, LspSettings

if TYPE_CHECKING:
    from mdn_lsp.adapters.ports import WorktreePort


class YamlSettingsProvider:
    """Reads LspSettings from the project's settings file.

    The project file is consulted first; if it has no block for the server,
    the optional global settings file is used. Missing files are not errors.
    """

    def __init__(
        self,
        settings_file: str = DEFAULT_SETTINGS_FILE,
        global_settings_file: Path | None = None,
    ) -> None:
        """Initialize the settings provider.

        Args:
            settings_file: Settings file path relative to the project root.
            global_settings_file: Optional user-wide settings file.
        """
        self._settings_file = settings_file
        self._global_settings_file = global_settings_file

    def lsp_settings(self, server_id: str, worktree: WorktreePort) -> LspSettings:
        """Read settings for ``server_id`` scoped to ``worktree``.

        Raises:
            MdnLspConfigError: If a settings file is not valid YAML/JSON or the
                block has the wrong shape.
        """
        candidates = [Path(worktree.root_path()) / self._settings_file]
        if self._global_settings_file is not None:
            candidates.append(self._global_settings_file)

        for path in candidates:
            block = self._server_block(path, server_id)
            if block is not None:
                return LspSettings.from_mapping(block)
        return LspSettings()

    def _server_block(self, path: Path, server_id: str) -> Any:
        if not path.is_file():
            return None

        try:
            config = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise MdnLspConfigError(f"Invalid settings file {path}: {e}") from e

        if config is None:
            return None
        if not isinstance(config, dict):
            raise MdnLspConfigError(f"Settings file {path} must contain a mapping")

        lsp = config.get("lsp")
        if lsp is None:
            return None
        if not isinstance(lsp, dict):
            raise MdnLspConfigError(f"'lsp' in {path} must be a mapping")
        return lsp.get(server_id)
