"""Delegation of commands to helper scripts in .agent/scripts."""

from agentcore.delegation.commands import DELEGATED_COMMANDS, DelegatedCommand, ForwardOptions
from agentcore.delegation.runner import ScriptNotFoundError, ScriptRunner, SubprocessScriptRunner

__all__ = [
    "DELEGATED_COMMANDS",
    "DelegatedCommand",
    "ForwardOptions",
    "ScriptNotFoundError",
    "ScriptRunner",
    "SubprocessScriptRunner",
]
