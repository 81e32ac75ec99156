"""Run command - execute one recipe, or list them."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import typer

from chore import __version__
from chore.cli.context import CLIContext, build_context
from chore.core.errors import ErrorCode
from chore.core.recipes import RECIPES, Recipe, find_recipe
from chore.core.result import Err
from chore.output.console import ConsoleProtocol, RichConsole, Style
from chore.output.errors import print_run_error, run_error_exit_code
from chore.services.runner import RecipeRunner


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def run(
    ctx: typer.Context,
    recipe: str | None = typer.Argument(
        None,
        metavar="RECIPE",
        help=f"Recipe to run: {', '.join(RECIPES)}",
        show_default=False,
    ),
    list_: bool = typer.Option(False, "--list", "-l", help="List available recipes and exit."),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the commands without running them."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not echo commands."),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Project root (overrides auto detection)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Run a project recipe. Stops at the first failing command."""
    if list_:
        list_recipes(RichConsole(stderr=False))
        return

    if recipe is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ErrorCode.USAGE_ERROR))

    # An unknown name is a usage error whatever state the project is in.
    found = find_recipe(recipe)
    if isinstance(found, Err):
        console = RichConsole()
        print_run_error(found.error, console)
        raise typer.Exit(code=run_error_exit_code(found.error))

    run_recipe(build_context(root=root, quiet=quiet), recipe, dry_run=dry_run)


def run_recipe(ctx: CLIContext, name: str, *, dry_run: bool = False) -> None:
    """Run ``name``, raising typer.Exit with the forwarded status on failure."""
    runner = RecipeRunner(
        project=ctx.project,
        config=ctx.config,
        console=ctx.console,
        dry_run=dry_run,
    )
    result = runner.run(name)
    if isinstance(result, Err):
        print_run_error(result.error, ctx.console)
        raise typer.Exit(code=run_error_exit_code(result.error))


def list_recipes(console: ConsoleProtocol, recipes: Mapping[str, Recipe] = RECIPES) -> None:
    console.print("Available recipes:")
    width = max((len(name) for name in recipes), default=0)
    for recipe in recipes.values():
        if recipe.doc:
            console.print(f"    {recipe.name:<{width}} # {recipe.doc}")
        else:
            console.print(f"    {recipe.name}")
    if not recipes:
        console.print("    (none)", Style.DIM)
