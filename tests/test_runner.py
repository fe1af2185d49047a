"""Tests for Runner."""

import shutil

import pytest
from invoke import UnexpectedExit

from commitprobe.core.runner import CommandRunner, Runner

pytestmark = pytest.mark.skipif(
    shutil.which("sh") is None, reason="POSIX shell required"
)


def test_successful_command():
    result = Runner().execute("echo 'Hello World'", check=False)

    assert result.exited == 0
    assert "Hello World" in result.stdout


def test_failed_command_without_check():
    result = Runner().execute("false", check=False)
    assert result.exited != 0


def test_failed_command_with_check_raises():
    with pytest.raises(UnexpectedExit):
        Runner().execute("false", check=True)


def test_stderr_is_captured():
    result = Runner().execute("echo oops >&2; exit 3", check=False)

    assert result.exited == 3
    assert "oops" in result.stderr


def test_cwd(tmp_path):
    result = Runner().execute("pwd", cwd=tmp_path, check=False)
    assert result.stdout.strip() == str(tmp_path.resolve())


def test_timeout_handling():
    result = Runner().execute("sleep 10", timeout=1, check=False)
    assert result.exited == -1


def test_runner_satisfies_protocol():
    assert isinstance(Runner(), CommandRunner)
