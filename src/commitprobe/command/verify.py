"""Verify command - run every check and print the report."""

from __future__ import annotations

from pydantic import BaseModel, Field

from commitprobe.checks.scratch import remove_scratch
from commitprobe.core.config import State
from commitprobe.core.log import logger

EXIT_ABORTED = 2


class VerifyCommand(BaseModel):
    """Check the Auto Commit script and CI workflow.

    Copies git.sh into a scratch directory and makes it executable,
    checks that git.sh contains the expected git commands and passes
    `bash -n`, checks that the workflow file declares its schedule,
    cron, manual trigger and Node.js entry point, then prints a
    summary. Exits 0 when every check passed, 1 when any failed and
    2 when the run was aborted by an unexpected error.
    """

    exit_code: bool = Field(
        default=True,
        alias="exit-code",
        description=(
            "Reflect the result in the exit status. "
            "Use --exit-code=false to always exit 0 after a report."
        ),
    )

    async def run_workflow(self, state: State) -> int:
        """Run the verify workflow.

        Args:
            state: State instance

        Returns:
            Exit code
        """
        from commitprobe.workflow.graph import create_workflow
        from commitprobe.workflow.nodes.setup import Setup

        logger.info("Starting Auto Commit verification")
        workflow = create_workflow()

        try:
            code = await workflow.run(state=state, inputs=Setup())
        except Exception as e:
            state.runtime.verify.status = "failed"
            logger.error(f"Verification aborted: {e}", _exc_info=True)
            remove_scratch(state.config.scratch_dir)
            return EXIT_ABORTED

        return code if self.exit_code else 0
