"""Tests for scratch directory setup and cleanup."""

import pytest
from invoke import UnexpectedExit

from commitprobe.checks.scratch import (
    SETUP_CHECK,
    prepare_scratch,
    remove_scratch,
)

from conftest import GOOD_SCRIPT, FakeRunner


def test_prepare_copies_and_chmods(tmp_path):
    source = tmp_path / "git.sh"
    source.write_text(GOOD_SCRIPT)
    scratch = tmp_path / "test-temp"
    runner = FakeRunner()

    result = prepare_scratch(source, scratch, "chmod +x {path}", runner)

    assert result.name == SETUP_CHECK
    assert result.passed is True
    assert (scratch / "git.sh").read_text() == GOOD_SCRIPT
    assert runner.commands == [f"chmod +x {scratch / 'git.sh'}"]


def test_prepare_real_chmod_makes_copy_executable(tmp_path):
    import os
    import shutil

    from commitprobe.core.runner import Runner

    if shutil.which("chmod") is None:
        pytest.skip("chmod not available")

    source = tmp_path / "git.sh"
    source.write_text(GOOD_SCRIPT)
    scratch = tmp_path / "test-temp"

    prepare_scratch(source, scratch, "chmod +x {path}", Runner())

    assert os.access(scratch / "git.sh", os.X_OK)


def test_prepare_reuses_existing_directory(tmp_path):
    source = tmp_path / "git.sh"
    source.write_text(GOOD_SCRIPT)
    scratch = tmp_path / "test-temp"
    scratch.mkdir()

    result = prepare_scratch(source, scratch, "chmod +x {path}", FakeRunner())

    assert result.passed is True


def test_prepare_without_source_fails_softly(tmp_path):
    scratch = tmp_path / "test-temp"
    runner = FakeRunner()

    result = prepare_scratch(
        tmp_path / "git.sh", scratch, "chmod +x {path}", runner
    )

    assert result.passed is False
    assert not scratch.exists()
    assert runner.commands == []


def test_prepare_raises_when_directory_cannot_be_created(tmp_path):
    source = tmp_path / "git.sh"
    source.write_text(GOOD_SCRIPT)
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")

    with pytest.raises(OSError):
        prepare_scratch(
            source, blocker / "test-temp", "chmod +x {path}", FakeRunner()
        )


def test_prepare_raises_when_chmod_fails(tmp_path):
    source = tmp_path / "git.sh"
    source.write_text(GOOD_SCRIPT)

    with pytest.raises(UnexpectedExit):
        prepare_scratch(
            source, tmp_path / "test-temp", "chmod +x {path}",
            FakeRunner(fail_chmod=True),
        )


def test_remove_scratch(tmp_path):
    scratch = tmp_path / "test-temp"
    (scratch / "nested").mkdir(parents=True)
    (scratch / "nested" / "git.sh").write_text("x")

    assert remove_scratch(scratch) is True
    assert not scratch.exists()


def test_remove_scratch_is_idempotent(tmp_path):
    scratch = tmp_path / "test-temp"
    assert remove_scratch(scratch) is False
    assert remove_scratch(scratch) is False


def test_remove_scratch_swallows_errors(tmp_path, monkeypatch):
    import shutil

    scratch = tmp_path / "test-temp"
    scratch.mkdir()

    def boom(path):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(shutil, "rmtree", boom)

    assert remove_scratch(scratch) is False
    assert scratch.exists()
