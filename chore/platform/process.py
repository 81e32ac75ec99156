"""Shell command execution with Result-based error handling.

Command lines run through a shell with the parent's stdin, stdout and
stderr inherited, so tool output streams straight to the terminal.
Ctrl-C is left to the child; its exit status is what gets reported.

Usage:
    result = run_line("cargo fmt", cwd=Path("."))
    match result:
        case Ok(_):
            pass
        case Err(error):
            sys.exit(error.returncode)
"""

from __future__ import annotations

import signal
import subprocess
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from chore.core.config import DEFAULT_SHELL
from chore.core.errors import SPAWN_FAILED, signal_exit_code
from chore.core.result import Err, Ok, Result

__all__ = ["CommandFailed", "run_line"]


@dataclass(frozen=True, slots=True)
class CommandFailed:
    """A command line that exited non-zero.

    Attributes:
        line: The command line as written in the recipe.
        returncode: Shell-style exit status (128 + N for signal N).
        reason: OS error text when the shell could not be started.
    """

    line: str
    returncode: int
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"{self.line}: {self.reason}"
        return f"{self.line} failed (exit {self.returncode})"


def run_line(
    line: str,
    cwd: Path,
    *,
    shell: Sequence[str] = DEFAULT_SHELL,
) -> Result[None, CommandFailed]:
    """Run one command line and wait for it.

    SIGINT is ignored here while the child runs. The terminal delivers
    Ctrl-C to the whole foreground process group, so only the child acts
    on it and its own status (130 when it dies of SIGINT) is forwarded.

    Args:
        line: Command line, passed unchanged as the shell's last argument.
        cwd: Working directory for the command.
        shell: Shell argv prefix, e.g. ``("sh", "-cu")``.

    Returns:
        Ok(None) on exit status 0, Err(CommandFailed) otherwise.
    """
    try:
        proc = subprocess.Popen([*shell, line], cwd=str(cwd))
    except OSError as e:
        return Err(CommandFailed(line=line, returncode=SPAWN_FAILED, reason=str(e)))

    # Installed after spawning: an ignored disposition would survive exec in the child.
    with proc, _interrupts_ignored():
        returncode = proc.wait()

    if returncode != 0:
        return Err(CommandFailed(line=line, returncode=signal_exit_code(returncode)))

    return Ok(None)


@contextmanager
def _interrupts_ignored() -> Iterator[None]:
    # signal.signal only works from the main thread.
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, signal.SIG_DFL if previous is None else previous)
