"""Path layout, environment overrides, and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

AGENT_DIR_NAME = ".agent"
CONFIG_FILE_NAME = "project.json"
README_FILE_NAME = "PROJECT-README.md"
VERSION_FILE_NAME = "VERSION"
DEPRECATED_MARKER = "DEPRECATED.md"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AgentPaths:
    project_root: Path
    root: Path

    @property
    def agents_dir(self) -> Path:
        return self.root / "agents"

    @property
    def skills_dir(self) -> Path:
        return self.root / "skills"

    @property
    def workflows_dir(self) -> Path:
        return self.root / "workflows"

    @property
    def scripts_dir(self) -> Path:
        return self.root / "scripts"

    @property
    def version_file(self) -> Path:
        return self.root / VERSION_FILE_NAME

    @property
    def config_file(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    @property
    def readme_file(self) -> Path:
        return self.root / README_FILE_NAME

    @classmethod
    def for_project(cls, project_root: Path) -> AgentPaths:
        return cls(project_root=project_root, root=project_root / AGENT_DIR_NAME)


def load_paths(project_root: Path | None = None) -> AgentPaths:
    """Resolve paths: explicit argument, then env vars, then the current directory."""
    if project_root is None:
        env_project = os.environ.get("AGENT_PROJECT_ROOT")
        project_root = Path(env_project) if env_project else Path.cwd()

    env_home = os.environ.get("AGENT_HOME")
    if env_home:
        logger.debug(f"Using AGENT_HOME override: {env_home}")
        return AgentPaths(project_root=project_root, root=Path(env_home))
    return AgentPaths.for_project(project_root)


def read_version(paths: AgentPaths) -> str | None:
    """Return the stripped VERSION marker, or None if missing or empty."""
    try:
        text = paths.version_file.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    return text or None


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
