"""Existence, marker and syntax checks for collaborator files.

Every function here returns its CheckResults instead of recording
them anywhere; the workflow nodes decide where they go.
"""

from __future__ import annotations

import shlex
from pathlib import Path

from commitprobe.core.config import Marker, ScriptConfig, WorkflowConfig
from commitprobe.core.log import logger
from commitprobe.core.result import CheckResult
from commitprobe.core.runner import CommandRunner

SYNTAX_CHECK = "Script syntax check"


def check_exists(name: str, path: Path, noun: str = "file") -> CheckResult:
    """Record whether path is an existing file."""
    exists = path.is_file()
    message = f"{noun} exists" if exists else f"{noun} does not exist"
    return CheckResult(name=name, passed=exists, message=message)


def check_markers(text: str, markers: list[Marker]) -> list[CheckResult]:
    """One result per marker, in marker order.

    Plain substring containment: a marker inside a comment counts.
    """
    results = []
    for marker in markers:
        found = marker.text in text
        results.append(CheckResult(
            name=marker.name,
            passed=found,
            message=marker.found if found else marker.missing,
        ))
    return results


def check_syntax(
    path: Path,
    command: str,
    runner: CommandRunner,
    timeout: int | None = None,
) -> CheckResult:
    """Run the syntax checker on path and judge by its exit status."""
    result = runner.execute(
        command.format(path=shlex.quote(str(path))),
        timeout=timeout,
        check=False,
    )
    if result.exited == 0:
        return CheckResult(
            name=SYNTAX_CHECK, passed=True, message="script syntax is valid"
        )

    detail = (
        result.stderr.strip()
        or result.stdout.strip()
        or f"exit code {result.exited}"
    )
    return CheckResult(
        name=SYNTAX_CHECK,
        passed=False,
        message=f"script syntax error: {detail}",
    )


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def check_script(
    path: Path,
    config: ScriptConfig,
    runner: CommandRunner,
    timeout: int | None = None,
) -> list[CheckResult]:
    """Check the commit script: existence, markers, then syntax.

    Marker and syntax checks are skipped when the script is
    missing.
    """
    exists = check_exists(f"{path.name} file exists", path)
    if not exists.passed:
        logger.warning(f"Script not found: {path}")
        return [exists]

    results = [exists, *check_markers(read_text(path), config.markers)]
    results.append(
        check_syntax(path, config.syntax_command, runner, timeout)
    )
    return results


def check_workflow(path: Path, config: WorkflowConfig) -> list[CheckResult]:
    """Check the CI workflow file: existence, then markers."""
    exists = check_exists("Workflow file exists", path, "workflow file")
    if not exists.passed:
        logger.warning(f"Workflow file not found: {path}")
        return [exists]

    return [exists, *check_markers(read_text(path), config.markers)]


def log_results(results: list[CheckResult]) -> None:
    for result in results:
        if result.passed:
            logger.info(str(result))
        else:
            logger.warning(str(result))
