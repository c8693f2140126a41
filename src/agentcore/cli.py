"""CLI entry point for agentcore."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import cast

from agentcore import __version__
from agentcore.config import configure_logging, load_paths
from agentcore.dispatcher import CommandDispatcher, Invocation


def build_parser() -> argparse.ArgumentParser:
    # Help is routed through the dispatcher so "agent help" and "-h" print the same text
    parser = argparse.ArgumentParser(
        prog="agent",
        description="Command-line dispatcher for the .agent knowledge base",
        add_help=False,
    )
    _ = parser.add_argument("-V", "--version", action="version", version=f"agent {__version__}")
    _ = parser.add_argument("command", nargs="?", help="Command to run (see 'agent help')")
    _ = parser.add_argument("target", nargs="?", help="Optional command target (e.g. dx mode)")
    _ = parser.add_argument("-h", "--help", action="store_true", dest="help")
    _ = parser.add_argument("-v", "--verbose", action="store_true")
    _ = parser.add_argument("--dry-run", action="store_true", dest="dry_run")
    _ = parser.add_argument("--force", action="store_true")
    _ = parser.add_argument("--all", action="store_true", dest="all")
    _ = parser.add_argument("--project-root", type=Path, default=None, dest="project_root")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(verbose=cast(bool, args.verbose))

    paths = load_paths(cast(Path | None, args.project_root))
    invocation = Invocation(
        command=cast(str | None, args.command),
        target=cast(str | None, args.target),
        help=cast(bool, args.help),
        verbose=cast(bool, args.verbose),
        dry_run=cast(bool, args.dry_run),
        force=cast(bool, args.force),
        all=cast(bool, args.all),
    )
    code = CommandDispatcher(paths).dispatch(invocation)
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
