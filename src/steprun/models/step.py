"""Step model for runner sequences.

A step is a plain record: a name, a zero-argument action, a dependent
flag and an optional skip predicate.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

Action = Callable[[], Any]
SkipPredicate = Callable[[], bool]


class Step(BaseModel):
    """Named unit of work.

    Attributes:
        name: Identifying label used for display and name-based lookup.
        action: Zero-argument callable. Raising signals failure. ``None``
            is a no-op that always succeeds.
        dependent: A dependent step cannot be the start of a run.
        skip: Optional predicate evaluated at run time; when it returns
            True the action is not invoked.

    Example:
        >>> Step(name="build", action=lambda: None, skip=lambda: False)
    """

    name: str = Field(min_length=1, description="Step name")
    action: Action | None = Field(default=None, description="Work to perform")
    dependent: bool = Field(default=False, description="Cannot be started from")
    skip: SkipPredicate | None = Field(default=None, description="Skip predicate")

    def should_skip(self) -> bool:
        """Evaluate the skip predicate, False when there is none."""
        if self.skip is None:
            return False
        return bool(self.skip())

    def perform(self) -> None:
        """Invoke the action, if any."""
        if self.action is not None:
            self.action()
