"""Init command: write a config template."""

from pathlib import Path

import typer

from ..config import write_config_template
from ..constants import CONFIG_FILE
from ..output import get_output_context


def init(
    directory: Path = typer.Option(
        Path("."),
        "--dir",
        "-d",
        help="Directory to write steprun.toml into",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Write a steprun.toml template with the default output formats."""
    ctx = get_output_context()

    if not directory.is_dir():
        ctx.error(f"Not a directory: {directory}")
        raise typer.Exit(1)

    config_path = directory / CONFIG_FILE
    if config_path.exists() and not force:
        ctx.result(
            {"path": str(config_path), "created": False},
            f"[yellow]Config already exists:[/yellow] {config_path}",
        )
        return

    written = write_config_template(directory)
    ctx.success(f"Created config template: {written}", {"path": str(written), "created": True})
