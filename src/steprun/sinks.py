"""Event sinks for runner output.

A sink is any callable that accepts a StepEvent. The runner never
formats or transports events itself.
"""

import logging
from typing import Protocol

from .constants import DO_FORMAT, SKIP_FORMAT
from .models import StepEvent

logger = logging.getLogger("steprun.runner")


class EventSink(Protocol):
    """Consumer of runner events."""

    def __call__(self, event: StepEvent) -> None: ...


class LoggingSink:
    """Write each event as one INFO log record.

    Records go to the ``steprun.runner`` logger unless another is given.
    Python's last-resort handler only shows WARNING and above, so an
    application that never configures logging sees no events; call
    ``steprun.logging.configure_logging()`` or attach a handler first.
    """

    def __init__(
        self,
        log: logging.Logger | None = None,
        do_format: str = DO_FORMAT,
        skip_format: str = SKIP_FORMAT,
    ) -> None:
        self.log = log or logger
        self.do_format = do_format
        self.skip_format = skip_format

    def __call__(self, event: StepEvent) -> None:
        self.log.info(event.render(self.do_format, self.skip_format))


class RecordingSink:
    """Collect events in memory, optionally forwarding them to another sink."""

    def __init__(self, forward: EventSink | None = None) -> None:
        self.events: list[StepEvent] = []
        self.forward = forward

    def __call__(self, event: StepEvent) -> None:
        self.events.append(event)
        if self.forward is not None:
            self.forward(event)

    def clear(self) -> None:
        """Forget recorded events."""
        self.events.clear()
