"""CLI command implementations for steprun.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .init import init
from .steps import list_steps, show_steps
from .run import execute, run

__all__ = [
    "execute",
    "init",
    "list_steps",
    "run",
    "show_steps",
]
