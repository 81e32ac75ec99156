from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import typer

from chore.core.config import Config, load_config_or_default
from chore.core.errors import ErrorCode
from chore.core.project import Project, detect_project
from chore.core.result import Err
from chore.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: Config
    console: ConsoleProtocol


def build_context(*, root: Path | None = None, quiet: bool = False) -> CLIContext:
    console = RichConsole()

    project_result = detect_project(root=root)
    if isinstance(project_result, Err):
        console.error(project_result.error.message)
        raise typer.Exit(code=int(ErrorCode.SETUP_ERROR))
    project = project_result.value

    config_result = load_config_or_default(project.config_path)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.SETUP_ERROR))

    config = config_result.value
    if quiet:
        config = replace(config, echo=False)

    return CLIContext(project=project, config=config, console=console)
