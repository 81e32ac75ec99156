"""chore - run the project's lint, format and release recipes."""

__version__ = "0.1.0"
