"""The recipe runner.

Runs a recipe's command lines one after another in the project root and
stops at the first one that exits non-zero. There is no retry, timeout
or parallelism: each command blocks until it exits.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from chore.core.config import Config
from chore.core.project import Project
from chore.core.recipes import RECIPES, Recipe, UnknownRecipe, find_recipe
from chore.core.result import Err, Ok, Result
from chore.output.console import ConsoleProtocol
from chore.platform.process import CommandFailed, run_line

__all__ = ["Executor", "RecipeFailed", "RecipeRunner", "RunError"]

Executor = Callable[..., Result[None, CommandFailed]]


@dataclass(frozen=True, slots=True)
class RecipeFailed:
    """A recipe stopped because one of its commands failed.

    Attributes:
        recipe: Name of the recipe.
        position: 1-based index of the failing command within the recipe.
        failure: The failing command and its status.
    """

    recipe: str
    position: int
    failure: CommandFailed

    @property
    def returncode(self) -> int:
        return self.failure.returncode

    @property
    def message(self) -> str:
        return (
            f"Recipe `{self.recipe}` failed on line {self.position} "
            f"with exit code {self.returncode}"
        )


type RunError = UnknownRecipe | RecipeFailed


class RecipeRunner:
    def __init__(
        self,
        *,
        project: Project,
        config: Config,
        console: ConsoleProtocol,
        dry_run: bool = False,
        recipes: Mapping[str, Recipe] = RECIPES,
        execute: Executor = run_line,
    ) -> None:
        self._project = project
        self._config = config
        self._console = console
        self._dry_run = dry_run
        self._recipes = recipes
        self._execute = execute

    @property
    def cwd(self) -> Path:
        return self._project.root

    def run(self, name: str) -> Result[Recipe, RunError]:
        """Run the named recipe.

        Returns:
            Ok(recipe) when every command exited 0 (or on a dry run),
            Err(UnknownRecipe) without running anything for an unknown name,
            Err(RecipeFailed) for the first command that exited non-zero.
        """
        found = find_recipe(name, self._recipes)
        if isinstance(found, Err):
            return found

        recipe = found.value
        result = self._run_commands(recipe.name, recipe.commands)
        if isinstance(result, Err):
            return result
        return Ok(recipe)

    def _run_commands(self, name: str, commands: Sequence[str]) -> Result[None, RecipeFailed]:
        for position, line in enumerate(commands, start=1):
            if self._config.echo or self._dry_run:
                self._console.command(line)
            if self._dry_run:
                continue

            result = self._execute(line, self.cwd, shell=self._config.shell)
            if isinstance(result, Err):
                return Err(RecipeFailed(recipe=name, position=position, failure=result.error))
        return Ok(None)
