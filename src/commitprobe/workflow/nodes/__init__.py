"""Workflow nodes for the verify graph."""

from commitprobe.workflow.nodes.check_script import CheckScript
from commitprobe.workflow.nodes.check_workflow import CheckWorkflow
from commitprobe.workflow.nodes.cleanup import Cleanup
from commitprobe.workflow.nodes.setup import Setup
from commitprobe.workflow.nodes.summarize import Summarize

__all__ = [
    "Setup",
    "CheckScript",
    "CheckWorkflow",
    "Cleanup",
    "Summarize",
]
