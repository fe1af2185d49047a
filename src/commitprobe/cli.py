#!/usr/bin/env python3
"""commitprobe CLI - verify an Auto Commit script and CI workflow."""

import asyncio
import sys

from pydantic_settings import CliApp, CliSubCommand, get_subcommand

from commitprobe.command.clean import CleanCommand
from commitprobe.command.verify import VerifyCommand
from commitprobe.core.config import State
from commitprobe.core.log import logger


class CliState(State):
    """Verify an Auto Commit setup: the git.sh commit script and the
    GitHub Actions workflow that runs it.

    Configuration sources (in priority order):
    1. Command-line arguments (--config.script.path value)
    2. Environment variables
       (COMMITPROBE_CONFIG__PROJECT_ROOT=value)
    3. .env file
    4. --include files, then commitprobe.yaml in the current directory
    5. ~/.config/commitprobe/commitprobe.yaml
    6. Package defaults
    """

    verify: CliSubCommand[VerifyCommand]
    clean: CliSubCommand[CleanCommand]

    def run_name(self) -> str:
        """Name the run after the chosen subcommand."""
        for name in ("verify", "clean"):
            if getattr(self, name) is not None:
                return name
        return super().run_name()

    def cli_cmd(self):
        """Dispatch to the active subcommand, or show help."""
        subcommand = get_subcommand(self, is_required=False)

        if subcommand is None:
            CliApp.run(CliState, cli_args=['--help'])
            sys.exit(1)

        # Closing the logger flushes and closes any log files
        with logger:
            exit_code = asyncio.run(subcommand.run_workflow(self))
        raise SystemExit(exit_code)


def main():
    CliApp.run(CliState)


if __name__ == "__main__":
    main()
