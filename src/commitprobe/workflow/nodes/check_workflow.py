"""CheckWorkflow node - inspect the CI workflow file."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from commitprobe.checks.files import check_workflow, log_results
from commitprobe.core.config import State
from commitprobe.core.log import logger


@dataclass
class CheckWorkflow(BaseNode[State, None, int]):
    """Check the workflow file exists and carries its markers."""

    async def run(self, ctx: GraphRunContext[State]) -> Cleanup:
        config = ctx.state.config

        logger.info(f"Checking {config.workflow_path}")
        results = check_workflow(config.workflow_path, config.workflow)
        log_results(results)
        ctx.state.runtime.verify.results.extend(results)

        from commitprobe.workflow.nodes.cleanup import Cleanup
        return Cleanup()
