"""Platform abstraction layer."""

from .process import CommandFailed, run_line

__all__ = [
    "CommandFailed",
    "run_line",
]
