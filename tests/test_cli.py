"""Tests for the command line entry point."""

import sys

import pytest
from pydantic_settings import CliApp

from commitprobe.cli import CliState

from conftest import requires_bash


@pytest.fixture
def in_project(project, monkeypatch):
    monkeypatch.chdir(project)
    monkeypatch.setattr(sys, "argv", ["commitprobe"])
    return project


@requires_bash
def test_verify_exit_status(in_project, capsys):
    with pytest.raises(SystemExit) as exc:
        CliApp.run(CliState, cli_args=["verify"])

    assert exc.value.code == 0
    assert "Success rate: 100.0%" in capsys.readouterr().out
    assert not (in_project / "test-temp").exists()


@requires_bash
def test_verify_reports_failure(in_project, capsys):
    (in_project / ".github" / "workflows" / "auto-commit.yml").unlink()

    with pytest.raises(SystemExit) as exc:
        CliApp.run(CliState, cli_args=["verify"])

    assert exc.value.code == 1
    assert "❌ Workflow file exists" in capsys.readouterr().out


@requires_bash
def test_config_option_on_command_line(in_project, tmp_path, capsys):
    other = tmp_path / "elsewhere"
    other.mkdir()

    with pytest.raises(SystemExit) as exc:
        CliApp.run(
            CliState,
            cli_args=["--config.project_root", str(other), "verify"],
        )

    assert exc.value.code == 1
    assert "Total checks: 3" in capsys.readouterr().out


def test_clean(in_project):
    (in_project / "test-temp").mkdir()

    with pytest.raises(SystemExit) as exc:
        CliApp.run(CliState, cli_args=["clean"])

    assert exc.value.code == 0
    assert not (in_project / "test-temp").exists()


def test_log_directory_named_after_subcommand(in_project, tmp_path, monkeypatch):
    log_root = tmp_path / "logs"
    monkeypatch.setenv("COMMITPROBE_CONFIG__LOG_ROOT", str(log_root))
    monkeypatch.setenv("COMMITPROBE_CONFIG__LOGGER__FILE__ENABLED", "true")

    with pytest.raises(SystemExit):
        CliApp.run(CliState, cli_args=["clean"])

    assert (log_root / "clean" / "commitprobe.log").is_file()
    assert not (log_root / "verify").exists()
