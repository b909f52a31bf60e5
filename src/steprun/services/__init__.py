"""External I/O used by step files.

- shell: shell-command actions and file-exists skip predicates
"""

from .shell import path_exists, run_command, shell_action

__all__ = ["path_exists", "run_command", "shell_action"]
