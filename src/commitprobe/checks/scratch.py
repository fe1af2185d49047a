"""Scratch directory management."""

from __future__ import annotations

import shlex
import shutil
from pathlib import Path

from commitprobe.core.log import logger
from commitprobe.core.result import CheckResult
from commitprobe.core.runner import CommandRunner

SETUP_CHECK = "Environment setup"


def prepare_scratch(
    source: Path,
    scratch_dir: Path,
    chmod_command: str,
    runner: CommandRunner,
    timeout: int | None = None,
) -> CheckResult:
    """Copy the script into scratch_dir and make the copy executable.

    A missing source script is a failed check, not an error, so the
    remaining checks still run.

    Raises:
        OSError: If the directory cannot be created or the copy fails
        invoke.UnexpectedExit: If the chmod command exits non-zero
    """
    if not source.is_file():
        return CheckResult(
            name=SETUP_CHECK,
            passed=False,
            message=f"{source.name} not found, nothing to copy",
        )

    scratch_dir.mkdir(parents=True, exist_ok=True)
    copy = scratch_dir / source.name
    shutil.copyfile(source, copy)
    logger.debug(f"Copied {source} to {copy}")

    runner.execute(
        chmod_command.format(path=shlex.quote(str(copy))),
        timeout=timeout,
        check=True,
    )

    return CheckResult(
        name=SETUP_CHECK,
        passed=True,
        message="scratch environment created",
    )


def remove_scratch(scratch_dir: Path) -> bool:
    """Delete scratch_dir and everything in it.

    Never raises; a failure is logged as a warning.

    Returns:
        True if a directory was removed
    """
    try:
        if not scratch_dir.exists():
            return False
        shutil.rmtree(scratch_dir)
    except OSError as e:
        logger.warning(f"Could not remove scratch directory {scratch_dir}: {e}")
        return False

    logger.debug(f"Removed scratch directory {scratch_dir}")
    return True
