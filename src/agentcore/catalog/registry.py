"""Catalog registry: enumerates agents, skills, workflows, and scripts."""

from __future__ import annotations

import logging
from pathlib import Path

from agentcore.catalog.models import CatalogEntry, CatalogSummary, EntryKind
from agentcore.config import DEPRECATED_MARKER, AgentPaths, read_version

logger = logging.getLogger(__name__)


class CatalogRegistry:
    _paths: AgentPaths

    def __init__(self, paths: AgentPaths) -> None:
        self._paths = paths

    def agents(self) -> list[CatalogEntry]:
        return _markdown_entries(self._paths.agents_dir, EntryKind.AGENT)

    def workflows(self) -> list[CatalogEntry]:
        return _markdown_entries(self._paths.workflows_dir, EntryKind.WORKFLOW)

    def skills(self) -> list[CatalogEntry]:
        """One entry per skill directory, flagged when DEPRECATED.md is present."""
        return [
            CatalogEntry(
                name=d.name,
                kind=EntryKind.SKILL,
                path=str(d),
                deprecated=(d / DEPRECATED_MARKER).is_file(),
            )
            for d in _children(self._paths.skills_dir)
            if d.is_dir()
        ]

    def script_count(self) -> int:
        return sum(1 for p in _children(self._paths.scripts_dir) if p.is_file())

    def summary(self) -> CatalogSummary:
        return CatalogSummary(
            version=read_version(self._paths) or "unknown",
            agents=len(self.agents()),
            skills=len(self.skills()),
            workflows=len(self.workflows()),
            scripts=self.script_count(),
            initialized=self._paths.config_file.is_file(),
        )


def _children(directory: Path) -> list[Path]:
    """Sorted direct children; empty if the directory is missing."""
    if not directory.is_dir():
        logger.debug(f"Directory not found, counting as empty: {directory}")
        return []
    return sorted(directory.iterdir())


def _markdown_entries(directory: Path, kind: EntryKind) -> list[CatalogEntry]:
    return [
        CatalogEntry(name=p.stem, kind=kind, path=str(p))
        for p in _children(directory)
        if p.is_file() and p.suffix == ".md"
    ]
