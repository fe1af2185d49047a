"""Command execution using invoke."""

from __future__ import annotations

import contextlib
import os
import platform
from pathlib import Path
from typing import Protocol, runtime_checkable

from invoke import Context, Result
from invoke.exceptions import CommandTimedOut

from commitprobe.core.log import logger


@runtime_checkable
class CommandRunner(Protocol):
    """Anything that can run a shell command and report back.

    Runner is the real implementation; tests pass stand-ins that
    return canned invoke.Result objects.
    """

    def execute(
        self,
        command: str,
        cwd: Path | None = None,
        timeout: int | None = None,
        check: bool = True,
    ) -> Result:
        ...


class Runner(Context):
    """invoke.Context with an execute() method that captures
    output instead of echoing it."""

    def kill(self) -> None:
        """Kill the running subprocess.

        invoke's kill() sends signal.SIGKILL, which the signal
        module does not define on Windows. os.kill() there accepts
        a plain number and hands it to TerminateProcess(), so send
        9 directly and let invoke handle POSIX.
        """
        if platform.system() == "Windows":
            pid = self.pid if self.using_pty else self.process.pid
            with contextlib.suppress(ProcessLookupError):
                os.kill(pid, 9)
            return

        super().kill()

    def execute(
        self,
        command: str,
        cwd: Path | None = None,
        timeout: int | None = None,
        check: bool = True,
    ) -> Result:
        """Execute a command and capture its output.

        Args:
            command: Command string to execute
            cwd: Working directory for command execution
            timeout: Maximum execution time in seconds
            check: If True, raise on non-zero exit code

        Returns:
            invoke.Result with stdout, stderr and exited. A timed
            out command comes back with exited == -1.

        Raises:
            invoke.UnexpectedExit: If check=True and command
                returns non-zero
        """
        kwargs = {
            "hide": True,
            "warn": not check,
            "in_stream": False,
        }
        if timeout:
            kwargs["timeout"] = timeout

        logger.debug(f"Running: {command}")

        try:
            if cwd:
                with self.cd(str(cwd)):
                    result = self.run(command, **kwargs)
            else:
                result = self.run(command, **kwargs)
        except CommandTimedOut as e:
            logger.warning(f"Command timed out after {timeout}s: {command}")
            result = e.result
            result.exited = -1

        for line in (result.stdout + result.stderr).splitlines():
            logger.spew(line.rstrip())

        return result
