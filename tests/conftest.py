"""Shared test fixtures for steprun tests."""

import shlex
import sys
from collections.abc import Callable
from pathlib import Path

import pytest
import tomli_w
from typer.testing import CliRunner

from steprun import RecordingSink, Step, StepSequence


class CallLog:
    """Records which step actions ran, in order."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def succeed(self, name: str) -> Callable[[], None]:
        def action() -> None:
            self.calls.append(name)

        return action

    def fail(self, name: str, error: Exception | None = None) -> Callable[[], None]:
        def action() -> None:
            self.calls.append(name)
            raise error or RuntimeError(f"{name} failed")

        return action

    def count(self, name: str) -> int:
        return self.calls.count(name)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def call_log() -> CallLog:
    """Fresh action call log."""
    return CallLog()


@pytest.fixture
def sink() -> RecordingSink:
    """Sink that keeps every event."""
    return RecordingSink()


@pytest.fixture
def three_steps(call_log: CallLog, sink: RecordingSink) -> StepSequence:
    """Sequence of first/second/third, all succeeding."""
    return StepSequence(
        [
            Step(name="first", action=call_log.succeed("first")),
            Step(name="second", action=call_log.succeed("second")),
            Step(name="third", action=call_log.succeed("third")),
        ],
        sink=sink,
    )


def python_command(code: str) -> str:
    """Command line running ``code`` with the current interpreter."""
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"


@pytest.fixture
def python_cmd() -> Callable[[str], str]:
    """Build command lines that run Python code with the current interpreter."""
    return python_command


@pytest.fixture
def steps_file(tmp_path: Path) -> Path:
    """Step file whose steps each write a marker file.

    Step "build" is skipped once build.done exists; "publish" is dependent.
    """
    data = {
        "steps": [
            {
                "name": "prepare",
                "run": python_command("open('prepare.txt', 'w').write('ok')"),
            },
            {
                "name": "build",
                "run": python_command("open('build.txt', 'w').write('ok')"),
                "skip_if_exists": "build.done",
            },
            {
                "name": "publish",
                "run": python_command("open('publish.txt', 'w').write('ok')"),
                "dependent": True,
            },
            {"name": "report"},
        ]
    }
    path = tmp_path / "steps.toml"
    path.write_text(tomli_w.dumps(data))
    return path
