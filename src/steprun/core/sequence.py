"""Ordered step sequence with resumable starts."""

import logging
import re
from collections.abc import Iterable, Iterator

from ..constants import SKIP_BEFORE_START, SKIP_PREDICATE
from ..errors import (
    CommandParseError,
    DependentStartError,
    InvalidStartIndex,
    InvalidStepReference,
    StepExecutionError,
    quote,
)
from ..models import EventKind, Step, StepEvent
from ..sinks import EventSink, LoggingSink

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"[+-]?[0-9]+")


class StepSequence:
    """Ordered list of steps run synchronously from a chosen start.

    Insertion order is execution order. Step ``i`` is assumed to rely on
    steps ``0..i-1`` unless it is the start of a run, which dependent
    steps may never be.

    Args:
        steps: Initial steps, in order
        sink: Receives a StepEvent per step visited by run(). Defaults to
            a LoggingSink, whose INFO records need configured logging to show.
    """

    def __init__(self, steps: Iterable[Step] | None = None, sink: EventSink | None = None) -> None:
        self._steps: list[Step] = list(steps or [])
        self.sink: EventSink = sink if sink is not None else LoggingSink()

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __getitem__(self, index: int) -> Step:
        return self._steps[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepSequence):
            return NotImplemented
        return self._steps == other._steps

    def __repr__(self) -> str:
        return f"StepSequence({self.names()!r})"

    @property
    def last_index(self) -> int:
        """Index of the final step (-1 when empty)."""
        return len(self._steps) - 1

    def add(self, step: Step) -> "StepSequence":
        """Append a step and return the sequence for chaining."""
        self._steps.append(step)
        return self

    def extend(self, steps: Iterable[Step]) -> "StepSequence":
        """Append several steps in order."""
        for step in steps:
            self.add(step)
        return self

    def names(self) -> list[str]:
        """Display labels, e.g. ``['0:"first"', '1:"second"']``."""
        return [f"{i}:{quote(step.name)}" for i, step in enumerate(self._steps)]

    def resolve_start(self, command: str) -> int:
        """Resolve a start index from a step number or a step name.

        Numbers outside the sequence are not indices; they fall through to
        name matching.

        Raises:
            InvalidStepReference: If nothing matches
        """
        if _NUMBER.fullmatch(command):
            number = int(command)
            if 0 <= number < len(self._steps):
                return number

        for i, step in enumerate(self._steps):
            if step.name == command:
                return i

        raise InvalidStepReference(command, self.names())

    def run(self, start_index: int) -> None:
        """Run every step from ``start_index`` to the end.

        Earlier steps are reported as skipped. The first failing action
        stops the run.

        Raises:
            InvalidStartIndex: If start_index is not a position in the sequence
            DependentStartError: If the start step is dependent
            StepExecutionError: If a step's action raises
        """
        if (
            isinstance(start_index, bool)
            or not isinstance(start_index, int)
            or not 0 <= start_index < len(self._steps)
        ):
            raise InvalidStartIndex(start_index, len(self._steps))

        start = self._steps[start_index]
        if start.dependent:
            raise DependentStartError(start_index, start.name)

        last = self.last_index
        logger.debug("Running %d steps from index %d", len(self._steps), start_index)
        for i, step in enumerate(self._steps):
            if i < start_index:
                self._emit(EventKind.SKIP, i, step, last, SKIP_BEFORE_START)
                continue

            if step.should_skip():
                self._emit(EventKind.SKIP, i, step, last, SKIP_PREDICATE)
                continue

            self._emit(EventKind.DO, i, step, last)
            try:
                step.perform()
            except Exception as e:
                raise StepExecutionError(i, step.name, e) from e

    def run_all(self) -> None:
        """Run every step from the first."""
        self.run(0)

    def run_from_command(self, command: str) -> None:
        """Resolve ``command`` to a start step and run from there.

        Raises:
            CommandParseError: If the command names no step
        """
        try:
            start = self.resolve_start(command)
        except InvalidStepReference as e:
            raise CommandParseError(e.reference, e.choices) from e
        self.run(start)

    def _emit(
        self, kind: EventKind, index: int, step: Step, last: int, reason: str | None = None
    ) -> None:
        self.sink(StepEvent(kind=kind, index=index, name=step.name, last=last, reason=reason))
