"""List command for step files."""

from pathlib import Path

from rich.markup import escape

from ..core import StepSequence
from ..output import OutputContext, get_output_context
from ._files import STEPS_FILE_OPTION, load_sequence


def show_steps(sequence: StepSequence, ctx: OutputContext) -> None:
    """Print one label per step, marking dependent steps."""
    labels = sequence.names()
    if ctx.json_mode:
        ctx.print_json(
            {
                "steps": [
                    {"index": i, "name": step.name, "label": label, "dependent": step.dependent}
                    for i, (step, label) in enumerate(zip(sequence, labels, strict=True))
                ]
            }
        )
        return

    if not labels:
        ctx.print("No steps defined", style="yellow")
        return
    for step, label in zip(sequence, labels, strict=True):
        suffix = "  (dependent)" if step.dependent else ""
        ctx.print(f"{escape(label)}{suffix}", style="dim" if step.dependent else None)


def list_steps(file: Path = STEPS_FILE_OPTION) -> None:
    """List steps with the numbers and names accepted by 'run'."""
    ctx = get_output_context()
    show_steps(load_sequence(file, ctx), ctx)
