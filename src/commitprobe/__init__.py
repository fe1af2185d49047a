"""commitprobe - checks an Auto Commit setup for the expected commands,
triggers and shell syntax."""

__version__ = "0.1.0"
