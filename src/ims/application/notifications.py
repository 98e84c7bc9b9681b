"""Transient notifications with an automatic expiry.

Each notification gets its own identity. Its expiry timer only hides
that notification: once a newer one is shown, the old timer is cancelled
and a late firing is ignored.
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)

NOTIFICATION_TTL = 3.0  # seconds


@dataclass(frozen=True)
class Notification:
    id: int
    message: str


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[..., Any], tuple], Timer]


def _thread_timer(interval: float, function: Callable[..., Any], args: tuple) -> Timer:
    timer = threading.Timer(interval, function, args=args)
    # never keep the process alive just to hide a message
    timer.daemon = True
    return timer


class Notifier:

    def __init__(
        self,
        ttl: float = NOTIFICATION_TTL,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        self._ttl = ttl
        self._timer_factory = timer_factory
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._current: Notification | None = None
        self._timer: Timer | None = None

    @property
    def current(self) -> Notification | None:
        with self._lock:
            return self._current

    def show(self, message: str) -> Notification:
        """Make ``message`` the visible notification and schedule its expiry."""
        with self._lock:
            self._cancel_timer()
            notification = Notification(id=next(self._ids), message=message)
            self._current = notification
            self._timer = self._timer_factory(self._ttl, self._expire, (notification.id,))
            self._timer.start()
        logger.debug("Notification #%d shown: %s", notification.id, message)
        return notification

    def dismiss(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._current = None

    def _expire(self, notification_id: int) -> None:
        with self._lock:
            if self._current is None or self._current.id != notification_id:
                return
            self._current = None
            self._timer = None
        logger.debug("Notification #%d expired", notification_id)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
