"""Tests for shell step actions."""

from pathlib import Path

import pytest

from steprun.errors import ShellCommandError
from steprun.services.shell import path_exists, run_command, shell_action


class TestRunCommand:
    """Tests for run_command."""

    def test_returns_stdout(self, tmp_path: Path, python_cmd) -> None:
        assert run_command(python_cmd("print('hello')"), tmp_path).strip() == "hello"

    def test_runs_in_cwd(self, tmp_path: Path, python_cmd) -> None:
        out = run_command(python_cmd("import os; print(os.getcwd())"), tmp_path)
        assert Path(out.strip()).resolve() == tmp_path.resolve()

    def test_non_zero_exit(self, tmp_path: Path, python_cmd) -> None:
        code = "import sys; sys.stderr.write('bad thing'); sys.exit(2)"
        with pytest.raises(ShellCommandError) as exc_info:
            run_command(python_cmd(code), tmp_path)
        assert exc_info.value.exit_code == 2
        assert "exited with 2" in str(exc_info.value)
        assert "bad thing" in str(exc_info.value)

    def test_command_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ShellCommandError, match="Command not found"):
            run_command("definitely-not-a-real-command-xyz", tmp_path)

    def test_invalid_syntax(self, tmp_path: Path) -> None:
        with pytest.raises(ShellCommandError, match="Invalid command syntax"):
            run_command('echo "unterminated', tmp_path)

    def test_empty_command(self, tmp_path: Path) -> None:
        with pytest.raises(ShellCommandError, match="Empty command"):
            run_command("   ", tmp_path)

    def test_missing_working_directory(self, tmp_path: Path) -> None:
        """A missing cwd is reported as such, not as a missing command."""
        with pytest.raises(ShellCommandError, match="Working directory not found"):
            run_command("echo hi", tmp_path / "nope")

    def test_working_directory_is_a_file(self, tmp_path: Path) -> None:
        not_a_dir = tmp_path / "file.txt"
        not_a_dir.write_text("x")
        with pytest.raises(ShellCommandError, match="Working directory not found"):
            run_command("echo hi", not_a_dir)

    def test_non_executable_file(self, tmp_path: Path) -> None:
        """OS errors other than a missing executable are wrapped too."""
        script = tmp_path / "script.sh"
        script.write_text("#!/bin/sh\necho hi\n")
        script.chmod(0o644)
        with pytest.raises(ShellCommandError, match="Could not execute"):
            run_command(str(script), tmp_path)


def test_shell_action_is_deferred(tmp_path: Path, python_cmd) -> None:
    """Building an action does not run the command."""
    action = shell_action(python_cmd("open('made.txt', 'w')"), tmp_path)
    assert not (tmp_path / "made.txt").exists()
    action()
    assert (tmp_path / "made.txt").exists()


def test_path_exists_checks_at_call_time(tmp_path: Path) -> None:
    marker = tmp_path / "done"
    predicate = path_exists(marker)
    assert predicate() is False
    marker.touch()
    assert predicate() is True
