"""Core domain types and logic."""

from .config import Config, ConfigError, load_config, load_config_or_default
from .errors import ErrorCode
from .project import Project, ProjectError, detect_project
from .recipes import RECIPES, Recipe, UnknownRecipe, find_recipe, recipe_names
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    # errors
    "ErrorCode",
    # project
    "Project",
    "ProjectError",
    "detect_project",
    # recipes
    "RECIPES",
    "Recipe",
    "UnknownRecipe",
    "find_recipe",
    "recipe_names",
    # result
    "Err",
    "Ok",
    "Result",
]
