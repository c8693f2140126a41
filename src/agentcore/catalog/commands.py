"""CLI command handlers for the catalog: status, agents, skills, workflows."""

from __future__ import annotations

from agentcore.catalog.models import CatalogEntry
from agentcore.catalog.registry import CatalogRegistry
from agentcore.config import AgentPaths


def cmd_status(paths: AgentPaths) -> int:
    summary = CatalogRegistry(paths).summary()

    print(f".agent status ({paths.root})")
    print(f"  Version:     {summary.version}")
    print(f"  Agents:      {summary.agents}")
    print(f"  Skills:      {summary.skills}")
    print(f"  Workflows:   {summary.workflows}")
    print(f"  Scripts:     {summary.scripts}")
    print(f"  Initialized: {'yes' if summary.initialized else 'no (run: agent init)'}")
    return 0


def cmd_agents(paths: AgentPaths) -> int:
    _print_entries("Agents", CatalogRegistry(paths).agents())
    return 0


def cmd_skills(paths: AgentPaths) -> int:
    _print_entries("Skills", CatalogRegistry(paths).skills())
    return 0


def cmd_workflows(paths: AgentPaths) -> int:
    _print_entries("Workflows", CatalogRegistry(paths).workflows())
    return 0


def _print_entries(title: str, entries: list[CatalogEntry]) -> None:
    print(f"{title}:")
    for entry in entries:
        suffix = " [DEPRECATED]" if entry.deprecated else ""
        print(f"  - {entry.name}{suffix}")
    print(f"\nTotal: {len(entries)}")
