"""Checks run against the collaborator files."""

from commitprobe.checks.files import check_script, check_workflow
from commitprobe.checks.report import Report, success_rate
from commitprobe.checks.scratch import prepare_scratch, remove_scratch

__all__ = [
    "check_script",
    "check_workflow",
    "prepare_scratch",
    "remove_scratch",
    "Report",
    "success_rate",
]
