"""Summarize node - print the report and pick the exit code."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, GraphRunContext

from commitprobe.checks.report import Report
from commitprobe.core.config import State
from commitprobe.core.log import logger


@dataclass
class Summarize(BaseNode[State, None, int]):
    """Print the report for every recorded check."""

    async def run(self, ctx: GraphRunContext[State]) -> End[int]:
        """
        Returns:
            End[int]: 0 when every check passed, 1 otherwise
        """
        verify = ctx.state.runtime.verify
        report = Report(verify.results)

        print()
        print(report.render())

        verify.status = "complete"
        logger.info(
            f"{report.passed}/{report.total} checks passed "
            f"({report.success_rate}%)"
        )
        return End(0 if report.all_passed else 1)
