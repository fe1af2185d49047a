"""Setup node - rehearse installing the script in a scratch directory."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from commitprobe.checks.files import log_results
from commitprobe.checks.scratch import prepare_scratch
from commitprobe.core.config import State
from commitprobe.core.log import logger
from commitprobe.core.runner import Runner


@dataclass
class Setup(BaseNode[State, None, int]):
    """Copy the script into the scratch directory and chmod it."""

    async def run(self, ctx: GraphRunContext[State]) -> CheckScript:
        config = ctx.state.config
        verify = ctx.state.runtime.verify
        verify.status = "running"
        verify.scratch_dir = config.scratch_dir

        logger.info("Setting up scratch environment")
        result = prepare_scratch(
            config.script_path,
            config.scratch_dir,
            config.scratch.chmod_command,
            verify.runner or Runner(),
            config.timeout,
        )
        log_results([result])
        verify.results.append(result)

        from commitprobe.workflow.nodes.check_script import CheckScript
        return CheckScript()
