"""Error presentation utilities.

Centralized error formatting and exit code mapping for the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chore.core.errors import ErrorCode
from chore.core.recipes import UnknownRecipe
from chore.output.console import Style
from chore.services.runner import RecipeFailed

if TYPE_CHECKING:
    from chore.services.runner import RunError
    from chore.output.console import ConsoleProtocol

__all__ = ["print_run_error", "run_error_exit_code"]


def print_run_error(error: RunError, console: ConsoleProtocol) -> None:
    match error:
        case UnknownRecipe():
            console.error(error.message)
            if error.available:
                console.print(error.hint, Style.DIM)
        case RecipeFailed(failure=failure):
            if failure.reason:
                console.error(str(failure))
            console.error(error.message)


def run_error_exit_code(error: RunError) -> int:
    """Exit status for a failed run.

    A failed command's own status is forwarded unchanged.
    """
    match error:
        case UnknownRecipe():
            return int(ErrorCode.USAGE_ERROR)
        case RecipeFailed():
            return error.returncode
    return int(ErrorCode.FAILURE)
