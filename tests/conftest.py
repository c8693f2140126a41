"""Shared fixtures for agentcore tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from agentcore.config import AgentPaths
from agentcore.delegation.runner import ScriptNotFoundError


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class FakeRunner:
    """ScriptRunner that records calls instead of spawning processes."""

    def __init__(self, available: set[str] | None = None, exit_code: int = 0) -> None:
        self.available = available
        self.exit_code = exit_code
        self.calls: list[tuple[str, list[str]]] = []

    def run(self, name: str, args: list[str]) -> int:
        if self.available is not None and name not in self.available:
            raise ScriptNotFoundError(name, Path("/fake/scripts"))
        self.calls.append((name, args))
        return self.exit_code


@pytest.fixture
def paths(tmp_path: Path) -> AgentPaths:
    """Project root with an empty .agent directory."""
    agent_paths = AgentPaths.for_project(tmp_path)
    agent_paths.root.mkdir()
    return agent_paths


@pytest.fixture
def populated(paths: AgentPaths) -> AgentPaths:
    """.agent tree with agents, skills (one deprecated), workflows, and scripts."""
    write(paths.agents_dir / "frontend-specialist.md", "# Frontend")
    write(paths.agents_dir / "backend-specialist.md", "# Backend")
    write(paths.agents_dir / "notes.txt", "not an agent")
    write(paths.skills_dir / "react-performance" / "SKILL.md", "---\nname: react\n---")
    write(paths.skills_dir / "old-skill" / "SKILL.md", "---\nname: old\n---")
    write(paths.skills_dir / "old-skill" / "DEPRECATED.md", "Use react-performance")
    write(paths.skills_dir / "README.md", "not a skill")
    write(paths.workflows_dir / "plan.md", "---\n---")
    write(paths.workflows_dir / "deploy.md", "---\n---")
    write(paths.workflows_dir / "review.md", "---\n---")
    write(paths.scripts_dir / "health-check.sh", "echo ok")
    write(paths.version_file, "4.0.0\n")
    return paths


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
