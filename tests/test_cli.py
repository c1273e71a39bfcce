"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from buddybot.cli import cli


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    return CliRunner()


def test_cli_help(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("check", "watch", "panel", "rules"):
        assert command in result.output


def test_check_clean_file(cli_runner, sample_python_file: Path):
    result = cli_runner.invoke(cli, ["check", str(sample_python_file)])

    assert result.exit_code == 0
    assert "happy" in result.output
    assert "Summary: 1 file(s), 0 errors, 0 warnings" in result.output


def test_check_broken_file(cli_runner, broken_python_file: Path):
    result = cli_runner.invoke(cli, ["check", str(broken_python_file)])

    assert result.exit_code == 1
    assert "Line 1: Missing colon after function definition" in result.output
    assert "frustrated" in result.output


def test_check_json_format(cli_runner, broken_python_file: Path):
    result = cli_runner.invoke(cli, ["check", "--format", "json", str(broken_python_file)])

    payload = json.loads(result.stdout)
    assert payload["summary"]["errors"] == 1
    assert payload["results"][str(broken_python_file)]["quality"] == "needs_work"


def test_check_skips_non_python_files(cli_runner, temp_dir: Path):
    notes = temp_dir / "notes.txt"
    notes.write_text("if x\n")
    result = cli_runner.invoke(cli, ["check", str(notes)])

    assert result.exit_code == 0
    assert "Skipped 1 non-Python file(s)" in result.output


def test_panel_command_writes_html(cli_runner, broken_python_file: Path, temp_dir: Path):
    output = temp_dir / "panel.html"
    result = cli_runner.invoke(cli, ["panel", str(broken_python_file), "-o", str(output)])

    assert result.exit_code == 0
    html = output.read_text(encoding="utf-8")
    assert "frustrated" in html
    assert "Found 1 syntax error(s) in broken.py" in html


def test_watch_single_poll(cli_runner, broken_python_file: Path):
    result = cli_runner.invoke(
        cli, ["watch", str(broken_python_file), "--interval", "0", "--max-polls", "1"]
    )

    assert result.exit_code == 0
    assert "Coding session started" in result.output
    assert "frustrated" in result.output


def test_rules_command_lists_rules(cli_runner):
    result = cli_runner.invoke(cli, ["rules"])

    assert result.exit_code == 0
    assert "MISSING-COLON" in result.output
    assert "TODO-NOTE" in result.output
    assert "rules enabled" in result.output
