"""CLI command handler for bootstrap: init."""

from __future__ import annotations

import sys

from agentcore import __version__
from agentcore.bootstrap.detector import detect_tech_stack
from agentcore.bootstrap.models import StackCategory
from agentcore.bootstrap.writer import (
    ConfigWriteError,
    build_project_config,
    render_project_config,
    write_project_config,
    write_project_readme,
)
from agentcore.config import AgentPaths, read_version


def cmd_init(paths: AgentPaths, *, force: bool = False, dry_run: bool = False) -> int:
    """Detect the tech stack and write project.json plus PROJECT-README.md."""
    config_path = paths.config_file

    if not paths.root.is_dir():
        print(f"Error: .agent directory not found: {paths.root}", file=sys.stderr)
        print("Copy the .agent folder into the project root first:", file=sys.stderr)
        print("  cp -r path/to/.agent .", file=sys.stderr)
        return 1

    if config_path.exists() and not force:
        print(f"Warning: project already initialized ({config_path})")
        print("Use --force to reinitialize")
        return 0

    print("Detecting tech stack...")
    result = detect_tech_stack(paths.project_root)
    config = build_project_config(result, read_version(paths) or __version__)

    if result.detected:
        print("\nTech stack detected:")
        for category in StackCategory:
            value = getattr(config.tech_stack, category.value)
            if value:
                print(f"  {category.value.capitalize()}: {value}")
    else:
        print("\nNo known manifests found; using baseline agents only")

    print("\nActive agents:")
    for agent in config.active_agents:
        print(f"  - {agent}")

    if dry_run:
        print(f"\n[dry-run] Would write {config_path}:")
        print(render_project_config(config), end="")
        print(f"[dry-run] Would write {paths.readme_file}")
        return 0

    try:
        _ = write_project_config(config_path, config, force=force)
        _ = write_project_readme(paths.readme_file, config)
    except ConfigWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nConfig: {config_path}")
    print(f"Readme: {paths.readme_file}")
    return 0
