"""Cleanup node - remove the scratch directory."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, GraphRunContext

from commitprobe.checks.scratch import remove_scratch
from commitprobe.core.config import State
from commitprobe.core.log import logger


@dataclass
class Cleanup(BaseNode[State, None, int]):
    """Remove the scratch directory; failures only warn."""

    async def run(self, ctx: GraphRunContext[State]) -> Summarize:
        scratch_dir = ctx.state.runtime.verify.scratch_dir
        if scratch_dir is not None:
            logger.info("Cleaning up scratch environment")
            remove_scratch(scratch_dir)

        from commitprobe.workflow.nodes.summarize import Summarize
        return Summarize()
