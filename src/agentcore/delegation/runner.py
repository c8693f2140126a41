"""Script runners: resolve and execute helper scripts under .agent/scripts."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Lookup order for a script name without suffix
SCRIPT_SUFFIXES: tuple[str, ...] = (".py", ".sh", ".ps1")

_INTERPRETERS: dict[str, list[str]] = {
    ".py": [sys.executable],
    ".sh": ["bash"],
    ".ps1": ["pwsh", "-NoProfile", "-File"],
}


class ScriptNotFoundError(Exception):
    """No script with the requested name exists."""

    def __init__(self, name: str, location: Path) -> None:
        super().__init__(f"Script not found: {location / name}")
        self.name = name
        self.location = location


class ScriptRunner(Protocol):
    def run(self, name: str, args: list[str]) -> int: ...


class SubprocessScriptRunner:
    """Runs scripts as child processes, passing stdout/stderr through."""

    _scripts_dir: Path
    _cwd: Path | None

    def __init__(self, scripts_dir: Path, cwd: Path | None = None) -> None:
        self._scripts_dir = scripts_dir
        self._cwd = cwd

    def resolve(self, name: str) -> Path | None:
        for suffix in SCRIPT_SUFFIXES:
            candidate = self._scripts_dir / f"{name}{suffix}"
            if candidate.is_file():
                return candidate
        bare = self._scripts_dir / name
        return bare if bare.is_file() else None

    def command_for(self, script: Path, args: list[str]) -> list[str]:
        return [*_INTERPRETERS.get(script.suffix, []), str(script), *args]

    def run(self, name: str, args: list[str]) -> int:
        script = self.resolve(name)
        if script is None:
            raise ScriptNotFoundError(name, self._scripts_dir)
        if self._cwd is not None and not self._cwd.is_dir():
            print(f"Error: working directory not found: {self._cwd}", file=sys.stderr)
            return 1
        cmd = self.command_for(script, args)
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=self._cwd, check=False)
        except OSError as e:
            # Missing interpreter, non-executable script, ...
            print(f"Error: cannot run {script.name}: {e}", file=sys.stderr)
            return 126 if isinstance(e, PermissionError) else 127
        return result.returncode
