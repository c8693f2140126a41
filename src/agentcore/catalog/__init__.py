"""Catalog of agents, skills, and workflows under the .agent root."""

from agentcore.catalog.models import CatalogEntry, CatalogSummary, EntryKind
from agentcore.catalog.registry import CatalogRegistry

__all__ = [
    "CatalogEntry",
    "CatalogSummary",
    "EntryKind",
    "CatalogRegistry",
]
