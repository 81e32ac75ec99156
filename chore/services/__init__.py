"""Application services."""

from .runner import RecipeFailed, RecipeRunner, RunError

__all__ = [
    "RecipeFailed",
    "RecipeRunner",
    "RunError",
]
