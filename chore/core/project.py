"""Project root detection.

Recipe commands run in the project root: the nearest directory, walking
upward from the current directory, that holds ``chore.toml`` or
``Cargo.toml``. When neither is found the current directory is used.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import CONFIG_FILENAME
from .result import Err, Ok, Result

__all__ = [
    "ROOT_ENV_VAR",
    "ROOT_MARKERS",
    "Project",
    "ProjectError",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

ROOT_ENV_VAR = "CHORE_ROOT"
ROOT_MARKERS: tuple[str, ...] = (CONFIG_FILENAME, "Cargo.toml")


@dataclass(frozen=True, slots=True)
class ProjectError:
    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    root: Path

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    return any((path / marker).is_file() for marker in ROOT_MARKERS)


def find_project_upward(start: Path) -> Path | None:
    for parent in (start, *start.parents):
        if is_project_root(parent):
            return parent
    return None


def _explicit_root(value: Path | str, label: str) -> Result[Project, ProjectError]:
    try:
        root = Path(value).expanduser().resolve()
    except OSError as e:
        return Err(ProjectError(message=f"invalid {label}: {e}"))
    if not root.is_dir():
        return Err(
            ProjectError(
                message=f"{label} is set to '{value}' but it is not a directory",
                searched_from=root,
            )
        )
    return Ok(Project(root=root))


def detect_project(
    *,
    root: Path | None = None,
    start_dir: Path | None = None,
    env_var: str = ROOT_ENV_VAR,
) -> Result[Project, ProjectError]:
    """Resolve the directory recipe commands run in.

    Detection order:
    1. Explicit ``root`` (the ``--root`` option)
    2. The ``CHORE_ROOT`` environment variable
    3. Search upward from start_dir (or cwd) for a root marker
    4. start_dir (or cwd) itself
    """
    if root is not None:
        return _explicit_root(root, "--root")

    env_value = os.environ.get(env_var)
    if env_value:
        return _explicit_root(env_value, f"${env_var}")

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is not None:
        return Ok(Project(root=found))
    return Ok(Project(root=search_start))
