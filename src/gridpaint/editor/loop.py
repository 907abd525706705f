"""Single-consumer event queue driving the state machine."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from gridpaint.editor.events import Event
from gridpaint.editor.machine import Task, update
from gridpaint.editor.state import EditorState

logger = logging.getLogger(__name__)


class EventLoop:
    """
    Feed events to ``update`` strictly in arrival order.

    Input and command results share one FIFO queue. When an event yields a
    ``Task``, the task runs once that event has been fully handled and its
    result is appended to the back of the queue, behind anything that was
    already waiting.
    """

    def __init__(self, state: EditorState) -> None:
        self.state = state
        self._queue: deque[Event] = deque()

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def running(self) -> bool:
        return self.state.running

    def post(self, event: Event) -> None:
        """Queue an event for processing."""
        self._queue.append(event)

    def post_all(self, events: Iterable[Event]) -> None:
        self._queue.extend(events)

    def run_task(self, task: Task) -> None:
        """Run a deferred command and queue its result event."""
        result = task.run()
        logger.debug("task %r -> %r", task.command, result)
        self.post(result)

    def step(self) -> bool:
        """Process the next queued event; returns False if there was none."""
        if not self._queue or not self.state.running:
            return False

        task = update(self.state, self._queue.popleft())
        if task is not None:
            self.run_task(task)
        return True

    def process(self) -> bool:
        """Drain the queue, including results queued along the way.

        Returns True if at least one event was handled.
        """
        handled = False
        while self.step():
            handled = True
        return handled
