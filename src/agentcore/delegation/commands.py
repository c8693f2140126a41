"""Delegated commands: health, validate, scan, perf, heal, dx."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from agentcore.delegation.runner import ScriptNotFoundError, ScriptRunner

DX_MODES: frozenset[str] = frozenset({"roi", "quality", "bottlenecks"})
DX_DEFAULT_MODE = "dashboard"


@dataclass(frozen=True)
class ForwardOptions:
    target: str | None = None
    verbose: bool = False
    dry_run: bool = False
    all: bool = False


ArgBuilder = Callable[[ForwardOptions], list[str]]


def _no_args(_opts: ForwardOptions) -> list[str]:
    return []


def dx_mode(target: str | None) -> str:
    """Known dx view, falling back to the dashboard for anything else."""
    mode = (target or "").strip().lower()
    return mode if mode in DX_MODES else DX_DEFAULT_MODE


@dataclass(frozen=True)
class DelegatedCommand:
    verb: str
    script: str
    help: str
    build_args: ArgBuilder = _no_args


DELEGATED_COMMANDS: dict[str, DelegatedCommand] = {
    cmd.verb: cmd
    for cmd in (
        DelegatedCommand(
            "health", "health-check", "Run system health check",
            lambda o: ["-v"] if o.verbose else [],
        ),
        DelegatedCommand("validate", "validate-compliance", "Validate agent/skill compliance"),
        DelegatedCommand(
            "scan", "secret-scan", "Scan for leaked secrets",
            lambda o: ["--all"] if o.all else [],
        ),
        DelegatedCommand("perf", "performance-check", "Run performance checks"),
        DelegatedCommand(
            "heal", "auto-heal", "Auto-fix common issues",
            lambda o: ["--dry-run"] if o.dry_run else [],
        ),
        DelegatedCommand(
            "dx", "dx-analytics", "Developer experience analytics [roi|quality|bottlenecks]",
            lambda o: [dx_mode(o.target)],
        ),
    )
}


def cmd_delegate(command: DelegatedCommand, runner: ScriptRunner, opts: ForwardOptions) -> int:
    """Run the command's script; a missing script is reported, not fatal."""
    try:
        return runner.run(command.script, command.build_args(opts))
    except ScriptNotFoundError as e:
        print(str(e))
        return 0
