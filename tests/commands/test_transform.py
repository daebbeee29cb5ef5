"""Tests for the transform CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mintcompat.cli import cli
from tests.conftest import COMPONENT_PAGE


@pytest.mark.usefixtures("_isolated_project")
class TestTransformCommand:
    def test_default_rewrites_in_place(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["transform"])
        assert result.exit_code == 0, result.output
        assert "OK: transform" in result.output
        assert '<Columns cols="2">' in (project_root / "docs" / "index.md").read_text()

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "transform", "--dry-run"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["mode"] == "dry-run"
        assert data["data"]["changed"] == 2

    def test_check_exits_nonzero_when_dirty(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["transform", "--check"])
        assert result.exit_code == 1
        assert (project_root / "docs" / "index.md").read_text() == COMPONENT_PAGE

    def test_check_exits_zero_when_clean(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["transform"])
        result = cli_runner.invoke(cli, ["transform", "--check"])
        assert result.exit_code == 0

    def test_explicit_path_and_out(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["transform", "docs/index.md", "--out", "build"])
        assert result.exit_code == 0, result.output
        assert '<Columns cols="2">' in (project_root / "build" / "index.md").read_text()
        assert (project_root / "docs" / "index.md").read_text() == COMPONENT_PAGE

    def test_missing_path_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "transform", "missing"])
        assert result.exit_code == 1

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "transform", "--dry-run"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: transform"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["transform", "--examples"])
        assert result.exit_code == 0
        assert "mintcompat --json transform --check" in result.output


class TestRootCli:
    def test_help_without_subcommand(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "transform" in result.output
        assert "elements" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        from mintcompat import __version__

        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
