"""Configuration and step-file loading for steprun."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILE, DO_FORMAT, SKIP_FORMAT
from .core import StepSequence
from .errors import ConfigError
from .models import Step
from .services.shell import path_exists, shell_action
from .sinks import EventSink, LoggingSink


class OutputConfig(BaseModel):
    """Textual rendering of runner events.

    Formats receive ``{index}``, ``{last}`` and ``{name}`` (already quoted).
    """

    do_format: str = DO_FORMAT
    skip_format: str = SKIP_FORMAT


class RunnerConfig(BaseModel):
    """Root configuration for steprun."""

    output: OutputConfig = Field(default_factory=OutputConfig)

    def make_sink(self) -> LoggingSink:
        """Build a logging sink using the configured formats."""
        return LoggingSink(do_format=self.output.do_format, skip_format=self.output.skip_format)


class StepDefinition(BaseModel):
    """One ``[[steps]]`` entry of a step file."""

    name: str = Field(min_length=1, description="Step name")
    run: str | None = Field(default=None, description="Shell command; omitted means no-op")
    dependent: bool = Field(default=False, description="Cannot be started from")
    skip_if_exists: str | None = Field(
        default=None, description="Skip the step when this path exists"
    )
    cwd: str | None = Field(default=None, description="Working directory for the command")

    def to_step(self, base_dir: Path) -> Step:
        """Build a runtime Step, resolving relative paths against base_dir."""
        cwd = base_dir / self.cwd if self.cwd else base_dir
        action = shell_action(self.run, cwd) if self.run else None
        skip = path_exists(base_dir / self.skip_if_exists) if self.skip_if_exists else None
        return Step(name=self.name, action=action, dependent=self.dependent, skip=skip)


class StepsFile(BaseModel):
    """A TOML step file."""

    steps: list[StepDefinition] = Field(default_factory=list)

    def to_sequence(self, base_dir: Path, sink: EventSink | None = None) -> StepSequence:
        """Build a StepSequence in file order."""
        sequence = StepSequence(sink=sink)
        for definition in self.steps:
            sequence.add(definition.to_step(base_dir))
        return sequence


def _read_toml(path: Path) -> dict:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def load_steps_file(path: Path) -> StepsFile:
    """Load and validate a step file.

    Raises:
        ConfigError: If the file is missing, is not TOML, or fails validation
    """
    if not path.exists():
        raise ConfigError(f"Step file not found: {path}")
    data = _read_toml(path)
    try:
        return StepsFile.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid step file {path}: {e}") from e


def load_config(directory: Path) -> RunnerConfig:
    """Load config from steprun.toml in directory.

    Args:
        directory: Directory holding steprun.toml

    Returns:
        Loaded configuration, or defaults if steprun.toml doesn't exist
    """
    config_path = directory / CONFIG_FILE
    if not config_path.exists():
        return RunnerConfig()
    data = _read_toml(config_path)
    try:
        return RunnerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(directory: Path) -> Path:
    """Write default steprun.toml template.

    Args:
        directory: Directory to write into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILE
    template = {
        "output": {"do_format": DO_FORMAT, "skip_format": SKIP_FORMAT},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
