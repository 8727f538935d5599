"""Short-lived user-facing messages.

The store decides *what* to say and *when*; displaying the message is up to
whoever subscribes. Messages expire on their own after ``ttl`` seconds.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from .ids import new_id
from .models import Severity

log = logging.getLogger(__name__)

Subscriber = Callable[["Notification"], None]


@dataclass(frozen=True)
class Notification:
    id: str
    message: str
    severity: Severity
    created_at: float
    expires_at: float

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


class Notifier:
    """Fire-and-forget notification emitter."""

    def __init__(
        self,
        ttl: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
        history_size: int = 50,
    ) -> None:
        self.ttl = ttl
        self.clock = clock
        # most recent notifications, oldest dropped first
        self.history: deque[Notification] = deque(maxlen=history_size)
        self._active: list[Notification] = []
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self, message: str, severity: Severity = "success") -> Notification:
        now = self.clock()
        note = Notification(
            id=new_id(),
            message=message,
            severity=severity,
            created_at=now,
            expires_at=now + self.ttl,
        )
        self.history.append(note)
        self._prune(now)
        self._active.append(note)
        for callback in list(self._subscribers):
            try:
                callback(note)
            except Exception:
                # subscriber failures never reach the caller
                log.exception("Notification subscriber failed for %r", message)
        return note

    def active(self) -> list[Notification]:
        """Return notifications that have not yet expired."""
        self._prune(self.clock())
        return list(self._active)

    def _prune(self, now: float) -> None:
        self._active = [n for n in self._active if not n.expired(now)]

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None
