"""Command-line entry point printing the mdn-lsp launch command.

Resolves (downloading if necessary) the rari binary for a project and
prints the command the editor would run.
"""

from __future__ import annotations

import argparse
import json
import logging
import shlex
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from mdn_lsp import __version__
from mdn_lsp.adapters.local_worktree import LocalWorktree
from mdn_lsp.domain.command import ServerCommand
from mdn_lsp.domain.exceptions import MdnLspError
from mdn_lsp.domain.settings import BootstrapConfig
from mdn_lsp.factories import create_extension

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdn-lsp-command",
        description="Resolve the rari binary and print the mdn-lsp launch command",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Project root directory (default: current directory)",
    )
    parser.add_argument(
        "--work-dir",
        type=Path,
        default=None,
        help=(
            "Directory holding downloaded rari versions "
            "(default: $MDN_LSP_WORK_DIR or the per-user cache directory)"
        ),
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the command as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_command(command: ServerCommand, as_json: bool = False) -> str:
    """Render a ServerCommand for display."""
    if as_json:
        return json.dumps(
            {"command": command.command, "args": list(command.args), "env": command.env},
            indent=2,
            sort_keys=True,
        )
    return shlex.join(command.argv())


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    """Run the CLI.

    Returns:
        0 on success, 1 when configuration or resolution fails.
    """
    out = stdout or sys.stdout
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = BootstrapConfig.from_env()
        if args.work_dir is not None:
            config = replace(config, working_dir=args.work_dir)
        config.working_dir.mkdir(parents=True, exist_ok=True)

        extension = create_extension(config)
        command = extension.language_server_command(LocalWorktree(args.root))
    except (MdnLspError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_command(command, as_json=args.json), file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
