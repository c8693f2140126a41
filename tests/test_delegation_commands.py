"""Tests for delegated commands and argument forwarding."""

from __future__ import annotations

import pytest

from agentcore.delegation.commands import (
    DELEGATED_COMMANDS,
    ForwardOptions,
    cmd_delegate,
    dx_mode,
)
from tests.conftest import FakeRunner


class TestTable:
    def test_verbs(self):
        assert set(DELEGATED_COMMANDS) == {"health", "validate", "scan", "perf", "heal", "dx"}

    def test_scripts(self):
        scripts = {verb: cmd.script for verb, cmd in DELEGATED_COMMANDS.items()}
        assert scripts == {
            "health": "health-check",
            "validate": "validate-compliance",
            "scan": "secret-scan",
            "perf": "performance-check",
            "heal": "auto-heal",
            "dx": "dx-analytics",
        }


class TestForwarding:
    @pytest.mark.parametrize(
        ("verb", "opts", "expected"),
        [
            ("health", ForwardOptions(), []),
            ("health", ForwardOptions(verbose=True), ["-v"]),
            ("validate", ForwardOptions(verbose=True, all=True), []),
            ("scan", ForwardOptions(all=True), ["--all"]),
            ("heal", ForwardOptions(dry_run=True), ["--dry-run"]),
            ("heal", ForwardOptions(), []),
            ("dx", ForwardOptions(target="quality"), ["quality"]),
        ],
    )
    def test_args(self, verb, opts, expected):
        runner = FakeRunner()
        cmd_delegate(DELEGATED_COMMANDS[verb], runner, opts)
        assert runner.calls == [(DELEGATED_COMMANDS[verb].script, expected)]


class TestDxMode:
    @pytest.mark.parametrize("target", ["roi", "quality", "bottlenecks"])
    def test_known_modes(self, target):
        assert dx_mode(target) == target

    def test_case_insensitive(self):
        assert dx_mode("ROI") == "roi"

    @pytest.mark.parametrize("target", [None, "", "  ", "weekly", "dashboard"])
    def test_fallback_to_dashboard(self, target):
        assert dx_mode(target) == "dashboard"


class TestCmdDelegate:
    def test_exit_code_propagates(self):
        runner = FakeRunner(exit_code=2)
        assert cmd_delegate(DELEGATED_COMMANDS["perf"], runner, ForwardOptions()) == 2

    def test_missing_script_is_not_fatal(self, capsys):
        runner = FakeRunner(available=set())
        assert cmd_delegate(DELEGATED_COMMANDS["scan"], runner, ForwardOptions()) == 0
        assert "Script not found" in capsys.readouterr().out
        assert runner.calls == []
