"""steprun CLI: run a step file from any step."""

import typer

from steprun import __version__

from .commands import execute, init, list_steps, run, show_steps
from .core import StepSequence
from .logging import configure_logging
from .output import OutputContext, get_output_context, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"steprun {__version__}")
        raise typer.Exit()


def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress step progress and other non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Sequential step runner with resumable starts."""
    console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    set_output_context(OutputContext(console=console, json_mode=json_output))


app = typer.Typer(
    name="steprun",
    help="Run ordered steps from a TOML step file, starting from any step",
    no_args_is_help=True,
)
app.callback()(main)
app.command("run")(run)
app.command("list")(list_steps)
app.command("init")(init)


def build_app(
    sequence: StepSequence,
    name: str = "steps",
    help: str | None = None,
) -> typer.Typer:
    """Wrap an in-process sequence in a Typer app with 'run' and 'list' commands.

    Example:
        >>> steps = StepSequence().add(Step(name="migrate", action=migrate))
        >>> build_app(steps, name="migrator")()
    """
    embedded = typer.Typer(
        name=name,
        help=help or f"Run {name} steps, starting from any step",
        no_args_is_help=True,
    )
    embedded.callback()(main)

    @embedded.command("run")
    def run_sequence(
        start: str | None = typer.Argument(
            None,
            help="Step number or name to start from (defaults to the first step)",
            show_default=False,
        ),
    ) -> None:
        """Run the steps, optionally from a given step."""
        execute(sequence, start, get_output_context())

    @embedded.command("list")
    def list_sequence() -> None:
        """List steps with the numbers and names accepted by 'run'."""
        show_steps(sequence, get_output_context())

    return embedded


if __name__ == "__main__":
    app()
