"""Settings domain value objects.

Two kinds of configuration live here:

- LspSettings / BinarySettings: per-project user overrides read from the
  editor's settings store (``lsp.<server-id>.binary``).
- BootstrapConfig: process configuration for the extension itself (which
  tool, which release repository, where downloads are kept).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import appdirs

from mdn_lsp.domain.exceptions import MdnLspConfigError

DEFAULT_SERVER_ID = "mdn-lsp"
DEFAULT_TOOL_NAME = "rari"
DEFAULT_REPOSITORY = "mdn/rari"
DEFAULT_CONTENT_SUBDIR = "files"
DEFAULT_SETTINGS_FILE = ".zed/settings.json"


def default_working_dir() -> Path:
    """Return the per-user cache directory that holds downloaded versions."""
    return Path(appdirs.user_cache_dir(DEFAULT_SERVER_ID))


@dataclass(frozen=True)
class BinarySettings:
    """User-configured binary override.

    Each field is independently optional: a path alone, arguments alone, or
    both may be configured.

    Attributes:
        path: Executable to use verbatim, or None.
        arguments: Extra arguments for the server, or None.
    """

    path: str | None = None
    arguments: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Validate binary settings."""
        self._validate_path()
        self._validate_arguments()

    def _validate_path(self) -> None:
        if self.path is None:
            return
        if not isinstance(self.path, str) or not self.path.strip():
            raise MdnLspConfigError(
                f"binary.path must be a non-empty string, got: {self.path!r}"
            )

    def _validate_arguments(self) -> None:
        if self.arguments is None:
            return
        if not all(isinstance(arg, str) for arg in self.arguments):
            raise MdnLspConfigError(
                f"binary.arguments must be a list of strings, got: {self.arguments!r}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> BinarySettings:
        """Build from a raw ``binary`` settings block.

        Raises:
            MdnLspConfigError: If the block or its fields have the wrong type.
        """
        if not isinstance(data, Mapping):
            raise MdnLspConfigError(
                f"binary settings must be a mapping, got: {type(data).__name__}"
            )

        arguments = data.get("arguments")
        if arguments is not None:
            if isinstance(arguments, str) or not isinstance(arguments, (list, tuple)):
                raise MdnLspConfigError(
                    f"binary.arguments must be a list of strings, got: {arguments!r}"
                )
            arguments = tuple(arguments)

        return cls(path=data.get("path"), arguments=arguments)


@dataclass(frozen=True)
class LspSettings:
    """Language server settings scoped to one project.

    Attributes:
        binary: Binary override block, or None when absent.
    """

    binary: BinarySettings | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> LspSettings:
        """Build from a raw ``lsp.<server-id>`` settings block.

        A missing block yields empty settings; it is not an error.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise MdnLspConfigError(
                f"lsp settings must be a mapping, got: {type(data).__name__}"
            )

        binary = data.get("binary")
        if binary is None:
            return cls()
        return cls(binary=BinarySettings.from_mapping(binary))


@dataclass(frozen=True)
class BootstrapConfig:
    """Configuration for the binary bootstrap.

    Attributes:
        server_id: Language server identifier used to look up settings.
        tool_name: Executable name, also the release artifact prefix.
        repository: Release repository as 'owner/name'.
        working_dir: Directory that holds downloaded versions. Everything in
            it except the current version is deleted after an install, so it
            defaults to a dedicated per-user cache directory.
        content_subdir: Subdirectory of the project root exported as CONTENT_ROOT.
        settings_file: Settings file path relative to the project root.
    """

    server_id: str = DEFAULT_SERVER_ID
    tool_name: str = DEFAULT_TOOL_NAME
    repository: str = DEFAULT_REPOSITORY
    working_dir: Path = field(default_factory=default_working_dir)
    content_subdir: str = DEFAULT_CONTENT_SUBDIR
    settings_file: str = DEFAULT_SETTINGS_FILE

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("server_id", "tool_name", "content_subdir", "settings_file"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise MdnLspConfigError(f"{name} cannot be empty")
        self._validate_repository()

    def _validate_repository(self) -> None:
        owner, sep, name = self.repository.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise MdnLspConfigError(
                f"repository must be in 'owner/name' form, got: {self.repository!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BootstrapConfig:
        """Create a config with environment variable overrides.

        Reads MDN_LSP_WORK_DIR, MDN_LSP_REPOSITORY and MDN_LSP_SETTINGS_FILE;
        unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}

        if env.get("MDN_LSP_WORK_DIR"):
            kwargs["working_dir"] = Path(env["MDN_LSP_WORK_DIR"])
        if env.get("MDN_LSP_REPOSITORY"):
            kwargs["repository"] = env["MDN_LSP_REPOSITORY"]
        if env.get("MDN_LSP_SETTINGS_FILE"):
            kwargs["settings_file"] = env["MDN_LSP_SETTINGS_FILE"]

        return cls(**kwargs)
