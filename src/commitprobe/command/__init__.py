"""CLI command modules for commitprobe."""

from commitprobe.command.clean import CleanCommand
from commitprobe.command.verify import VerifyCommand

__all__ = ["CleanCommand", "VerifyCommand"]
