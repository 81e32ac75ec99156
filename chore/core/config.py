"""Optional project settings from chore.toml.

Only the way commands are executed is configurable. The recipe table
itself is fixed in ``chore.core.recipes``.

Example chore.toml:

    [settings]
    shell = ["bash", "-cu"]
    echo = false
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str_list, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_SHELL",
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "chore.toml"

# -u makes unset variables fatal inside a command line.
DEFAULT_SHELL: tuple[str, ...] = ("sh", "-cu")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when chore.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Execution settings.

    Attributes:
        shell: Argv prefix; each command line is appended as the last argument.
        echo: Print each command line to stderr before running it.
    """

    shell: tuple[str, ...] = DEFAULT_SHELL
    echo: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        settings: StrDict = get_table(data, "settings") or {}

        if "shell" in settings:
            shell = get_str_list(settings, "shell")
            if not shell:
                raise ValueError("settings.shell must be a non-empty list of strings")
        else:
            shell = DEFAULT_SHELL

        echo = get_bool(settings, "echo")
        if "echo" in settings and echo is None:
            raise ValueError("settings.echo must be a boolean")

        return cls(shell=shell, echo=True if echo is None else echo)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load settings from a chore.toml file.

    Args:
        path: Path to chore.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the defaults.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
