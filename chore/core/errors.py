"""Exit codes owned by chore itself.

A failing recipe exits with the failing command's own status, so these
codes only cover what chore decides on its own: bad input and a broken
project setup.
"""

from enum import IntEnum

__all__ = ["ErrorCode", "SPAWN_FAILED", "signal_exit_code"]

# POSIX shells use 127 for "command not found"; reused when the shell
# itself cannot be started.
SPAWN_FAILED = 127


class ErrorCode(IntEnum):
    """Exit codes for the chore CLI.

    - 0: Success
    - 1: Generic failure
    - 2: Usage error (unknown recipe, missing argument)
    - 3: Setup error (invalid chore.toml, invalid project root)
    """

    OK = 0
    FAILURE = 1
    USAGE_ERROR = 2
    SETUP_ERROR = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


def signal_exit_code(returncode: int) -> int:
    """Map a subprocess return code to a shell-style exit status.

    ``subprocess`` reports death by signal N as ``-N``; shells report
    ``128 + N``.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode
