"""Shell command actions for step files."""

import logging
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

from ..errors import ShellCommandError

logger = logging.getLogger(__name__)

# Lines of stderr kept in failure messages
STDERR_TAIL_LINES = 5


def run_command(command: str, cwd: Path) -> str:
    """Run a single command and return its stdout.

    Args:
        command: Command line (parsed with shlex, never through a shell)
        cwd: Working directory

    Returns:
        Captured stdout

    Raises:
        ShellCommandError: If the command is malformed, cannot be executed in
            cwd, or exits non-zero
    """
    try:
        args = shlex.split(command)
    except ValueError as e:
        raise ShellCommandError(command, f"Invalid command syntax: {e}") from e
    if not args:
        raise ShellCommandError(command, "Empty command")

    if not cwd.is_dir():
        raise ShellCommandError(command, f"Working directory not found: {cwd}")

    logger.debug("Running %s in %s", args, cwd)
    try:
        result = subprocess.run(args, cwd=cwd, capture_output=True, text=True)
    except FileNotFoundError:
        raise ShellCommandError(command, f"Command not found: {args[0]}") from None
    except OSError as e:
        raise ShellCommandError(command, f"Could not execute {args[0]}: {e}") from e

    if result.returncode != 0:
        tail = "\n".join(result.stderr.strip().splitlines()[-STDERR_TAIL_LINES:])
        message = f"Command exited with {result.returncode}: {command}"
        if tail:
            message += f"\n{tail}"
        raise ShellCommandError(command, message, exit_code=result.returncode)
    return result.stdout


def shell_action(command: str, cwd: Path) -> Callable[[], str]:
    """Bind a command and working directory into a zero-argument action."""

    def action() -> str:
        return run_command(command, cwd)

    return action


def path_exists(path: Path) -> Callable[[], bool]:
    """Skip predicate that is true once ``path`` exists."""

    def predicate() -> bool:
        return path.exists()

    return predicate
