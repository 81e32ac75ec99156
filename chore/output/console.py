"""Console output abstraction.

Everything chore says on its own behalf (echoed command lines, errors,
the recipe list) goes through ``ConsoleProtocol``. The Rich backend is
used on a real terminal; ``MockConsole`` captures output in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    COMMAND = auto()  # Echoed command line
    DIM = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def error(self, message: str) -> None:
        """Print an ``error:`` prefixed message."""
        ...

    def command(self, line: str) -> None:
        """Echo a command line before it runs."""
        ...


class RichConsole:
    """Console implementation using Rich.

    Writes to stderr by default so that the stdout of recipe commands is
    never interleaved with chore's own messages.
    """

    def __init__(self, *, stderr: bool = True) -> None:
        from rich.console import Console

        self._console = Console(stderr=stderr, highlight=False, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.COMMAND: "dim",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def error(self, message: str) -> None:
        self._console.print("[red bold]error:[/red bold] ", end="")
        self._console.print(message, markup=False)

    def command(self, line: str) -> None:
        # Command lines contain [] often (e.g. globs); never parse as markup.
        self._console.print(line, style=self._style_map[Style.COMMAND], markup=False)


@dataclass
class OutputRecord:
    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def command(self, line: str) -> None:
        self.outputs.append(OutputRecord(line, Style.COMMAND))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    @property
    def commands(self) -> list[str]:
        """Echoed command lines, in order."""
        return [o.message for o in self.outputs if o.style == Style.COMMAND]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
