"""Command-line interface."""

from .main import main, run

__all__ = [
    "main",
    "run",
]
