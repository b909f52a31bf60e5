"""steprun: sequential step runner with resumable starts."""

from .core import StepSequence
from .errors import (
    CommandParseError,
    DependentStartError,
    InvalidStartIndex,
    InvalidStepReference,
    StepError,
    StepExecutionError,
)
from .models import EventKind, Step, StepEvent
from .sinks import LoggingSink, RecordingSink

__version__ = "0.1.0"

__all__ = [
    "CommandParseError",
    "DependentStartError",
    "EventKind",
    "InvalidStartIndex",
    "InvalidStepReference",
    "LoggingSink",
    "RecordingSink",
    "Step",
    "StepError",
    "StepEvent",
    "StepExecutionError",
    "StepSequence",
    "__version__",
]
