"""The recipe table.

A recipe is a named, ordered sequence of shell command lines. The table
is fixed at import time and read-only afterwards; commands run in the
exact order listed here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .result import Err, Ok, Result

__all__ = [
    "Recipe",
    "UnknownRecipe",
    "RECIPES",
    "recipe_names",
    "find_recipe",
]


@dataclass(frozen=True, slots=True)
class Recipe:
    """A named sequence of command lines.

    Attributes:
        name: Unique recipe name used on the command line.
        commands: Command lines, each handed verbatim to the shell.
        doc: One-line description shown by ``chore --list``.
    """

    name: str
    commands: tuple[str, ...]
    doc: str = ""


@dataclass(frozen=True, slots=True)
class UnknownRecipe:
    name: str
    available: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Unknown recipe: {self.name}"

    @property
    def hint(self) -> str:
        return f"Available recipes: {', '.join(self.available)}"


def _table(*recipes: Recipe) -> Mapping[str, Recipe]:
    table: dict[str, Recipe] = {}
    for recipe in recipes:
        if recipe.name in table:
            raise ValueError(f"duplicate recipe name: {recipe.name}")
        table[recipe.name] = recipe
    return MappingProxyType(table)


RECIPES: Mapping[str, Recipe] = _table(
    Recipe(
        name="lint",
        commands=(
            "cargo fmt --all -- --check",
            "taplo format --check",
            "cargo clippy -- -D warnings",
        ),
        doc="Check formatting and run clippy with warnings as errors",
    ),
    Recipe(
        name="format",
        commands=(
            "cargo fmt",
            "taplo format",
        ),
        doc="Format Rust sources and TOML files in place",
    ),
    Recipe(
        name="release",
        commands=("cargo build --release",),
        doc="Build the optimized release binary",
    ),
)


def recipe_names(recipes: Mapping[str, Recipe] = RECIPES) -> tuple[str, ...]:
    """Recipe names in declaration order."""
    return tuple(recipes)


def find_recipe(
    name: str,
    recipes: Mapping[str, Recipe] = RECIPES,
) -> Result[Recipe, UnknownRecipe]:
    """Look up a recipe by exact name."""
    recipe = recipes.get(name)
    if recipe is None:
        return Err(UnknownRecipe(name=name, available=recipe_names(recipes)))
    return Ok(recipe)
