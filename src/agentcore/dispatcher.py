"""Command dispatcher: maps a verb and flags to one operation."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass

from agentcore.bootstrap.commands import cmd_init
from agentcore.catalog.commands import cmd_agents, cmd_skills, cmd_status, cmd_workflows
from agentcore.config import AgentPaths
from agentcore.delegation.commands import DELEGATED_COMMANDS, ForwardOptions, cmd_delegate
from agentcore.delegation.runner import ScriptRunner, SubprocessScriptRunner

logger = logging.getLogger(__name__)

HELP_VERB = "help"

COMMAND_GROUPS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Setup",
        (
            ("init [--force] [--dry-run]", "Detect tech stack and write .agent/project.json"),
            ("status", "Show .agent summary"),
        ),
    ),
    (
        "Catalog",
        (
            ("agents", "List agents"),
            ("skills", "List skills"),
            ("workflows", "List workflows"),
        ),
    ),
    (
        "Quality",
        (
            ("health [-v]", DELEGATED_COMMANDS["health"].help),
            ("validate", DELEGATED_COMMANDS["validate"].help),
            ("scan [--all]", DELEGATED_COMMANDS["scan"].help),
            ("perf", DELEGATED_COMMANDS["perf"].help),
        ),
    ),
    (
        "Automation",
        (
            ("heal [--dry-run]", DELEGATED_COMMANDS["heal"].help),
            ("dx [roi|quality|bottlenecks]", DELEGATED_COMMANDS["dx"].help),
        ),
    ),
)


class UnknownCommandError(Exception):
    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command


@dataclass(frozen=True)
class Invocation:
    command: str | None = None
    target: str | None = None
    help: bool = False
    verbose: bool = False
    dry_run: bool = False
    force: bool = False
    all: bool = False


def usage_text(prog: str = "agent") -> str:
    lines = [f"Usage: {prog} <command> [target] [options]", ""]
    width = max(len(name) for _, cmds in COMMAND_GROUPS for name, _ in cmds)
    for group, cmds in COMMAND_GROUPS:
        lines.append(f"{group}:")
        lines.extend(f"  {name.ljust(width)}  {desc}" for name, desc in cmds)
        lines.append("")
    lines.append("Options:")
    lines.append("  -h, --help          Show this help")
    lines.append("  -v, --verbose       Verbose output")
    lines.append("  --project-root DIR  Project root (default: current directory)")
    return "\n".join(lines)


class CommandDispatcher:
    _paths: AgentPaths
    _runner: ScriptRunner
    _handlers: dict[str, Callable[[Invocation], int]]

    def __init__(self, paths: AgentPaths, runner: ScriptRunner | None = None) -> None:
        self._paths = paths
        self._runner = runner or SubprocessScriptRunner(paths.scripts_dir, cwd=paths.project_root)
        self._handlers = {
            "init": lambda inv: cmd_init(paths, force=inv.force, dry_run=inv.dry_run),
            "status": lambda _inv: cmd_status(paths),
            "agents": lambda _inv: cmd_agents(paths),
            "skills": lambda _inv: cmd_skills(paths),
            "workflows": lambda _inv: cmd_workflows(paths),
        }
        for verb in DELEGATED_COMMANDS:
            self._handlers[verb] = self._delegate_handler(verb)

    @property
    def verbs(self) -> list[str]:
        return list(self._handlers)

    def resolve(self, command: str) -> Callable[[Invocation], int]:
        handler = self._handlers.get(command.strip().lower())
        if handler is None:
            raise UnknownCommandError(command)
        return handler

    def dispatch(self, inv: Invocation) -> int:
        """Run one command and return its exit code."""
        if not inv.command or inv.help or inv.command.strip().lower() == HELP_VERB:
            print(usage_text())
            return 0

        try:
            handler = self.resolve(inv.command)
        except UnknownCommandError as e:
            print(f"Error: {e}", file=sys.stderr)
            print(f"Run 'agent {HELP_VERB}' to see available commands", file=sys.stderr)
            return 1

        logger.debug(f"Dispatching {inv.command!r} (target={inv.target!r})")
        return handler(inv)

    def _delegate_handler(self, verb: str) -> Callable[[Invocation], int]:
        command = DELEGATED_COMMANDS[verb]

        def handle(inv: Invocation) -> int:
            opts = ForwardOptions(
                target=inv.target, verbose=inv.verbose, dry_run=inv.dry_run, all=inv.all
            )
            return cmd_delegate(command, self._runner, opts)

        return handle
