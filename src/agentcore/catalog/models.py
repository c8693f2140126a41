"""Pydantic models for the .agent catalog."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class EntryKind(StrEnum):
    AGENT = "agent"
    SKILL = "skill"
    WORKFLOW = "workflow"


class CatalogEntry(BaseModel):
    name: str
    kind: EntryKind
    path: str
    deprecated: bool = False


class CatalogSummary(BaseModel):
    version: str
    agents: int = 0
    skills: int = 0
    workflows: int = 0
    scripts: int = 0
    initialized: bool = False
