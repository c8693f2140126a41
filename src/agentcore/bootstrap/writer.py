"""Bootstrap config writer: .agent/project.json."""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

from agentcore.bootstrap.models import DetectionResult, ProjectConfig

logger = logging.getLogger(__name__)


class ConfigWriteError(Exception):
    """project.json could not be written."""


def _atomic_write(path: Path, content: str) -> None:
    """Write content to path atomically using tempfile + os.replace."""
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def build_project_config(result: DetectionResult, version: str) -> ProjectConfig:
    return ProjectConfig(
        version=version,
        initialized=datetime.now().isoformat(timespec="seconds"),
        tech_stack=result.tech_stack(),
        active_agents=result.active_agents(),
    )


def render_project_config(config: ProjectConfig) -> str:
    return config.model_dump_json(indent=2) + "\n"


def write_project_config(path: Path, config: ProjectConfig, *, force: bool = False) -> Path | None:
    """Write project.json if not exists (or force=True), replacing it whole.

    Returns None if skipped. Raises ConfigWriteError on any OS failure.
    """
    if path.exists() and not force:
        return None
    try:
        _atomic_write(path, render_project_config(config))
    except OSError as e:
        raise ConfigWriteError(f"Cannot write {path}: {e.strerror or e}") from e
    logger.debug(f"Wrote {path}")
    return path


def render_project_readme(config: ProjectConfig) -> str:
    """Quick-start notes for the initialized project."""
    stack = config.tech_stack.model_dump()
    stack_lines = [f"- {key.capitalize()}: {value}" for key, value in stack.items() if value]
    lines = [
        "# .agent Configuration for This Project",
        "",
        f"**Initialized:** {config.initialized}",
        f"**Version:** {config.version}",
        "",
        "## Tech Stack",
        "",
        *(stack_lines or ["- Not detected"]),
        "",
        "## Active Agents",
        "",
        *(f"- {agent}" for agent in config.active_agents),
        "",
        "## Enabled Workflows",
        "",
        *(f"- {wf}" for wf in config.workflows.enabled),
        "",
        "## Quick Commands",
        "",
        "```bash",
        "agent status        # Summary of agents, skills, workflows",
        "agent agents        # List agents",
        "agent skills        # List skills",
        "agent health        # System health check",
        "agent validate      # Compliance check",
        "agent init --force  # Re-detect tech stack",
        "```",
        "",
    ]
    return "\n".join(lines)


def write_project_readme(path: Path, config: ProjectConfig) -> Path:
    """Write PROJECT-README.md atomically, replacing any previous copy."""
    try:
        _atomic_write(path, render_project_readme(config))
    except OSError as e:
        raise ConfigWriteError(f"Cannot write {path}: {e.strerror or e}") from e
    logger.debug(f"Wrote {path}")
    return path
