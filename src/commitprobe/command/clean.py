"""Clean command - remove a leftover scratch directory."""

from pydantic import BaseModel

from commitprobe.checks.scratch import remove_scratch
from commitprobe.core.log import logger


class CleanCommand(BaseModel):
    """Remove the scratch directory left behind by an aborted run.

    Safe to run at any time; a missing directory is not an error.
    """

    async def run_workflow(self, state: "State") -> int:
        """
        Returns:
            Exit code (always 0)
        """
        scratch_dir = state.config.scratch_dir
        state.runtime.clean.removed = remove_scratch(scratch_dir)

        if state.runtime.clean.removed:
            logger.info(f"Removed {scratch_dir}")
        else:
            logger.info(f"Nothing to clean at {scratch_dir}")
        return 0
