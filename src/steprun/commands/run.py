"""Run command: execute a sequence from a chosen step."""

from pathlib import Path

import typer

from ..core import StepSequence
from ..errors import CommandParseError, DependentStartError, InvalidStartIndex, StepExecutionError
from ..models import EventKind
from ..output import OutputContext, get_output_context
from ..sinks import RecordingSink
from ._files import STEPS_FILE_OPTION, load_sequence

START_ARGUMENT = typer.Argument(
    None,
    help="Step number or name to start from (defaults to the first step)",
    show_default=False,
)


def execute(sequence: StepSequence, start: str | None, ctx: OutputContext) -> None:
    """Run ``sequence`` from ``start`` and report the outcome.

    Exit codes: 1 when a step fails, 2 when the start is not usable.
    """
    recorder = RecordingSink(forward=sequence.sink)
    original_sink = sequence.sink
    sequence.sink = recorder
    try:
        if start is None:
            sequence.run_all()
        else:
            sequence.run_from_command(start)
    except (CommandParseError, InvalidStartIndex) as e:
        ctx.error(str(e), {"steps": sequence.names()})
        raise typer.Exit(2) from None
    except DependentStartError as e:
        ctx.error(str(e), {"index": e.index, "name": e.name})
        raise typer.Exit(2) from None
    except StepExecutionError as e:
        ctx.error(
            str(e),
            {
                "index": e.index,
                "name": e.name,
                "events": [event.model_dump(mode="json") for event in recorder.events],
            },
        )
        raise typer.Exit(1) from None
    finally:
        sequence.sink = original_sink

    performed = sum(1 for event in recorder.events if event.kind is EventKind.DO)
    ctx.success(
        f"Ran {performed} of {len(sequence)} steps",
        {"events": [event.model_dump(mode="json") for event in recorder.events]},
    )


def run(
    start: str | None = START_ARGUMENT,
    file: Path = STEPS_FILE_OPTION,
) -> None:
    """Run the steps in a step file, optionally from a given step."""
    ctx = get_output_context()
    execute(load_sequence(file, ctx), start, ctx)
