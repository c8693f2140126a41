"""Pydantic models for project bootstrap (tech stack, project config)."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

BASELINE_AGENTS: tuple[str, ...] = ("security-auditor", "test-engineer")
DEFAULT_WORKFLOWS: tuple[str, ...] = ("plan", "scaffold", "test", "review", "deploy")


class StackCategory(StrEnum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    MOBILE = "mobile"


class TechStack(BaseModel):
    frontend: str = ""
    backend: str = ""
    database: str = ""
    mobile: str = ""


class WorkflowSettings(BaseModel):
    enabled: list[str] = Field(default_factory=lambda: list(DEFAULT_WORKFLOWS))


class ProjectConfig(BaseModel):
    version: str
    initialized: str
    tech_stack: TechStack = TechStack()
    active_agents: list[str] = Field(default_factory=lambda: list(BASELINE_AGENTS))
    workflows: WorkflowSettings = WorkflowSettings()


class DetectionResult(BaseModel):
    """Labels per category and personas, both in rule order."""

    labels: dict[StackCategory, list[str]] = Field(default_factory=dict)
    personas: list[str] = Field(default_factory=list)

    def add(self, category: StackCategory, label: str, persona: str | None) -> None:
        self.labels.setdefault(category, []).append(label)
        if persona:
            self.personas.append(persona)

    @property
    def detected(self) -> bool:
        return any(self.labels.values())

    def tech_stack(self) -> TechStack:
        return TechStack(
            **{category.value: " ".join(labels) for category, labels in self.labels.items()}
        )

    def active_agents(self) -> list[str]:
        """Baseline personas first, then detected ones, first occurrence wins."""
        return list(dict.fromkeys([*BASELINE_AGENTS, *self.personas]))
