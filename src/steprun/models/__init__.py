"""Pydantic data models for steprun.

- Step: a named unit of work in a sequence
- StepEvent / EventKind: structured do/skip records streamed to sinks

Example:
    >>> from steprun.models import Step
    >>> step = Step(name="migrate", action=lambda: None)
    >>> step.dependent
    False
"""

from .event import EventKind, StepEvent
from .step import Action, SkipPredicate, Step

__all__ = [
    "Action",
    "EventKind",
    "SkipPredicate",
    "Step",
    "StepEvent",
]
