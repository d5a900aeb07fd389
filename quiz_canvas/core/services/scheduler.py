"""One-shot timer capability used for delayed quiz transitions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class Scheduler(Protocol):
    """Runs a callback once after a delay, on the thread that drives the quiz."""

    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> None: ...


@dataclass(slots=True)
class _PendingCall:
    due_ms: int
    sequence: int
    callback: Callable[[], None] = field(compare=False)


class ManualScheduler:
    """Scheduler driven by an explicit clock instead of wall time.

    Callbacks fire only when ``advance_time`` moves the clock past their due
    time or when ``fire_all`` is called, so quiz flows can be replayed
    deterministically.
    """

    def __init__(self) -> None:
        self._now_ms: int = 0
        self._sequence: int = 0
        self._pending: list[_PendingCall] = []

    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> None:
        if delay_ms < 0:
            raise ValueError("Delay must not be negative.")
        self._sequence += 1
        self._pending.append(_PendingCall(self._now_ms + delay_ms, self._sequence, callback))

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def advance_time(self, elapsed_ms: int) -> int:
        """Move the clock forward and fire every callback that became due."""
        if elapsed_ms < 0:
            raise ValueError("Time cannot move backwards.")
        target = self._now_ms + elapsed_ms
        fired = 0
        while True:
            due = [call for call in self._pending if call.due_ms <= target]
            if not due:
                break
            call = min(due, key=lambda c: (c.due_ms, c.sequence))
            self._pending.remove(call)
            self._now_ms = call.due_ms
            call.callback()
            fired += 1
        self._now_ms = target
        return fired

    def fire_all(self) -> int:
        """Fire every pending callback in due order, including ones they schedule."""
        fired = 0
        while self._pending:
            latest = max(call.due_ms for call in self._pending)
            fired += self.advance_time(latest - self._now_ms)
        return fired
