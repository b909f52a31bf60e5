"""Errors raised by steprun."""

from .constants import NAMES_DELIMITER


_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def quote(value: str) -> str:
    """Render a string double-quoted with escapes, as step labels show names.

    Other non-printable characters become ``\\xNN``, ``\\uNNNN`` or ``\\UNNNNNNNN``.
    """
    parts = []
    for ch in value:
        code = ord(ch)
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif code <= 0xFF:
            parts.append(f"\\x{code:02x}")
        elif code <= 0xFFFF:
            parts.append(f"\\u{code:04x}")
        else:
            parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


class StepError(Exception):
    """Base exception for runner errors."""


class InvalidStepReference(StepError):
    """Raised when a command matches neither a step index nor a step name."""

    def __init__(self, reference: str, choices: list[str]) -> None:
        self.reference = reference
        self.choices = list(choices)
        super().__init__(
            f"{quote(reference)} is not a valid process step name, "
            f"use: {NAMES_DELIMITER.join(self.choices)}"
        )


class CommandParseError(InvalidStepReference):
    """Raised by run_from_command when the start step cannot be resolved."""

    def __init__(self, reference: str, choices: list[str]) -> None:
        super().__init__(reference, choices)
        self.args = (f"could not parse command: {self.args[0]}",)


class DependentStartError(StepError):
    """Raised when a run would start on a dependent step."""

    def __init__(self, index: int, name: str) -> None:
        self.index = index
        self.name = name
        super().__init__(
            f"step {index}: {quote(name)} cannot be started independently, "
            "it relies on previous steps"
        )


class StepExecutionError(StepError):
    """Raised when a step's action fails.

    The original exception is kept both as ``cause`` and as ``__cause__``.
    """

    def __init__(self, index: int, name: str, cause: BaseException) -> None:
        self.index = index
        self.name = name
        self.cause = cause
        super().__init__(f"could not perform step {index}, {name}: {cause}")


class InvalidStartIndex(StepError, ValueError):
    """Raised when run() is given an index outside the sequence."""

    def __init__(self, index: object, length: int) -> None:
        self.index = index
        self.length = length
        if length == 0:
            message = f"cannot start at {index!r}: the sequence is empty"
        else:
            message = f"start index {index!r} is out of range 0-{length - 1}"
        super().__init__(message)


class ConfigError(StepError):
    """Raised when a step file or config file cannot be loaded."""


class ShellCommandError(StepError):
    """Raised when a shell step command fails or cannot be executed."""

    def __init__(self, command: str, message: str, exit_code: int | None = None) -> None:
        self.command = command
        self.exit_code = exit_code
        super().__init__(message)
