"""Pytest configuration and fixtures for commitprobe tests."""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest
from invoke import Result, UnexpectedExit

from commitprobe.core.log import ConsoleSink, setup_logger

GOOD_SCRIPT = """#!/bin/bash
set -e
git add -A
git commit --no-verify -m "chore: automated commit"
git push
"""

GOOD_WORKFLOW = """name: Auto Commit
on:
  schedule:
    - cron: '0 * * * *'
  workflow_dispatch:
jobs:
  commit:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - run: node dist/index.js
"""

requires_bash = pytest.mark.skipif(
    shutil.which("bash") is None, reason="bash not available"
)


@pytest.fixture(autouse=True, scope="session")
def configure_logging():
    """Console-only logging at debug level for the whole session."""
    setup_logger(
        log_root=Path(tempfile.gettempdir()) / "commitprobe-tests",
        run_name="test",
        console=ConsoleSink(level="debug"),
    )


class FakeRunner:
    """CommandRunner stand-in that records commands.

    The syntax check answers with syntax_exit/syntax_stderr; every
    other command succeeds unless fail_chmod is set.
    """

    def __init__(self, syntax_exit=0, syntax_stderr="", fail_chmod=False):
        self.syntax_exit = syntax_exit
        self.syntax_stderr = syntax_stderr
        self.fail_chmod = fail_chmod
        self.commands = []

    def execute(self, command, cwd=None, timeout=None, check=True):
        self.commands.append(command)
        if command.startswith("bash -n"):
            result = Result(
                command=command,
                exited=self.syntax_exit,
                stderr=self.syntax_stderr,
            )
        elif command.startswith("chmod") and self.fail_chmod:
            result = Result(
                command=command, exited=1, stderr="chmod: permission denied"
            )
        else:
            result = Result(command=command, exited=0)

        if check and result.exited != 0:
            raise UnexpectedExit(result)
        return result


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def project(tmp_path):
    """A project root holding a good git.sh and workflow file."""
    root = tmp_path / "project"
    workflows = root / ".github" / "workflows"
    workflows.mkdir(parents=True)
    (root / "git.sh").write_text(GOOD_SCRIPT)
    (workflows / "auto-commit.yml").write_text(GOOD_WORKFLOW)
    return root


@pytest.fixture
def make_state(tmp_path, monkeypatch):
    """Build a State rooted at a project directory.

    sys.argv is replaced so pydantic-settings does not parse
    pytest's arguments, and the working directory moves to an
    empty directory so no stray commitprobe.yaml is picked up.
    """
    from commitprobe.core.config import State

    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setattr(sys, "argv", ["commitprobe"])

    def _make(root, runner=None, **config):
        state = State(config={"project_root": str(root), **config})
        state.runtime.verify.runner = runner
        return state

    return _make
