from __future__ import annotations

import typer

from chore.cli.commands.run_cmd import run


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)

# Single command with no callback: typer runs it directly, so `chore lint`
# selects the recipe rather than a subcommand.
app.command()(run)


def main() -> None:
    app()
