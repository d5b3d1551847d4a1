"""Cooperative cancellation handles.

The evaluator polls an interrupt once per tree node; number primitives with
long loops (factorial) poll it as well. Handles are read-only from the
evaluator's point of view.
"""

import logging
import threading
import time
from typing import Protocol

from reckon.expressions.errors import Interrupted

logger = logging.getLogger(__name__)


class Interrupt(Protocol):
    """Anything that can answer "has cancellation been requested?"."""

    def should_interrupt(self) -> bool: ...


class NeverInterrupt:
    """Interrupt that is never signalled."""

    def should_interrupt(self) -> bool:
        return False


class EventInterrupt:
    """Interrupt backed by a threading.Event set from another thread.

    Usage:
        cancel = threading.Event()
        interrupt = EventInterrupt(cancel)
        # elsewhere: cancel.set()
    """

    def __init__(self, event: threading.Event | None = None):
        self.event = event if event is not None else threading.Event()

    def cancel(self) -> None:
        self.event.set()

    def should_interrupt(self) -> bool:
        return self.event.is_set()


class DeadlineInterrupt:
    """Interrupt that fires once a timeout (in milliseconds) has elapsed."""

    def __init__(self, timeout_ms: int, clock=time.monotonic):
        self.timeout_ms = timeout_ms
        self._clock = clock
        self._deadline = clock() + timeout_ms / 1000

    def should_interrupt(self) -> bool:
        return self._clock() >= self._deadline


def check_interrupt(interrupt: Interrupt) -> None:
    """Raise Interrupted if cancellation has been requested."""
    if interrupt.should_interrupt():
        logger.debug("Interrupt requested, aborting evaluation")
        raise Interrupted()
