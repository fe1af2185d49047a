"""CheckScript node - inspect the commit shell script."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from commitprobe.checks.files import check_script, log_results
from commitprobe.core.config import State
from commitprobe.core.log import logger
from commitprobe.core.runner import Runner


@dataclass
class CheckScript(BaseNode[State, None, int]):
    """Check the script exists, carries its markers and parses."""

    async def run(self, ctx: GraphRunContext[State]) -> CheckWorkflow:
        config = ctx.state.config
        verify = ctx.state.runtime.verify

        logger.info(f"Checking {config.script_path}")
        results = check_script(
            config.script_path,
            config.script,
            verify.runner or Runner(),
            config.timeout,
        )
        log_results(results)
        verify.results.extend(results)

        from commitprobe.workflow.nodes.check_workflow import CheckWorkflow
        return CheckWorkflow()
