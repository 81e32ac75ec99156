"""Result type for explicit error handling.

Every layer below the CLI returns either ``Ok(value)`` or ``Err(error)``
instead of raising. The CLI is the only place where an ``Err`` turns into
an exit code.

Usage:
    match find_recipe("lint"):
        case Ok(recipe):
            print(recipe.commands)
        case Err(error):
            print(f"no such recipe: {error.name}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
E = TypeVar("E")

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
