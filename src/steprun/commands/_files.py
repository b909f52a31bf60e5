"""Step-file option shared by file-based commands."""

from pathlib import Path

import typer

from ..config import load_config, load_steps_file
from ..constants import STEPS_FILE
from ..core import StepSequence
from ..errors import ConfigError
from ..output import OutputContext

STEPS_FILE_OPTION = typer.Option(
    Path(STEPS_FILE),
    "--file",
    "-f",
    help="Path to the TOML step file",
)


def load_sequence(path: Path, ctx: OutputContext) -> StepSequence:
    """Load a step file and its sibling config, exiting with code 3 on failure."""
    try:
        steps_file = load_steps_file(path)
        config = load_config(path.parent)
    except ConfigError as e:
        ctx.error(str(e))
        raise typer.Exit(3) from None
    return steps_file.to_sequence(path.resolve().parent, sink=config.make_sink())
