"""Runner events streamed to sinks."""

from enum import Enum

from pydantic import BaseModel, Field

from ..constants import DO_FORMAT, SKIP_FORMAT
from ..errors import quote


class EventKind(str, Enum):
    """Whether a step is about to run or was bypassed."""

    DO = "do"
    SKIP = "skip"


class StepEvent(BaseModel):
    """One do/skip record for a step.

    Attributes:
        kind: DO when the action is about to be invoked, SKIP otherwise
        index: Zero-based position of the step
        name: Step name
        last: Index of the last step in the sequence
        reason: Why a step was skipped ("before_start" or "predicate")
    """

    kind: EventKind
    index: int = Field(ge=0)
    name: str
    last: int = Field(ge=0)
    reason: str | None = None

    def render(self, do_format: str = DO_FORMAT, skip_format: str = SKIP_FORMAT) -> str:
        """Render the event as text, e.g. ``DO\\t[1/0-2]\\t"build"``."""
        fmt = do_format if self.kind is EventKind.DO else skip_format
        return fmt.format(index=self.index, last=self.last, name=quote(self.name))
