"""
Bounded, self-expiring notification queue.

At most `limit` messages are held; each push evicts from the front until the
cap holds again. Messages with a positive duration are removed after that
delay, either by a timer on the running asyncio loop or, when no loop is
running (e.g. inside a Streamlit rerun), lazily on the next read.
"""
from __future__ import annotations

import asyncio
import time
import uuid
from typing import Callable, Dict, List, Optional, Tuple, get_args

from ..config import get_config
from ..data.models import Notification, Severity
from ..logging import get_logger

logger = get_logger(__name__)

SEVERITIES = get_args(Severity)


class NotificationQueue:
    def __init__(
        self,
        limit: Optional[int] = None,
        default_duration_ms: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        config = get_config()
        self.limit = config.notification_limit if limit is None else limit
        self.default_duration_ms = (
            config.notification_duration_ms if default_duration_ms is None else default_duration_ms
        )
        self._clock = clock
        self._entries: List[Notification] = []
        self._deadlines: Dict[str, float] = {}
        self._timers: Dict[str, asyncio.TimerHandle] = {}

    # ---------- reads ----------

    @property
    def notifications(self) -> Tuple[Notification, ...]:
        self._expire()
        return tuple(self._entries)

    def __iter__(self):
        return iter(self.notifications)

    def __len__(self) -> int:
        return len(self.notifications)

    # ---------- writes ----------

    def push(self, message, severity: Severity = "info", duration_ms: Optional[int] = None) -> Optional[str]:
        """Append a message and return its id, or None if the message is empty or not text.

        Unknown severities are shown as info; a duration of 0 or less keeps the
        message until it is dismissed.
        """
        if not isinstance(message, str) or not message.strip():
            logger.debug(f"Ignoring notification with empty or non-text message: {message!r}")
            return None

        if severity not in SEVERITIES:
            logger.debug(f"Unknown notification severity {severity!r}; showing as info")
            severity = "info"
        duration_ms = self.default_duration_ms if duration_ms is None else duration_ms
        # Non-positive durations mean no auto-dismiss
        duration_ms = max(int(duration_ms), 0)
        notification = Notification(
            id=f"notice-{uuid.uuid4().hex[:12]}",
            message=message.strip(),
            severity=severity,
            duration_ms=duration_ms,
        )
        self._entries.append(notification)
        while len(self._entries) > self.limit:
            self._forget(self._entries.pop(0).id)

        if duration_ms > 0:
            self._schedule(notification.id, duration_ms)
        return notification.id

    def success(self, message, duration_ms: Optional[int] = None) -> Optional[str]:
        return self.push(message, "success", duration_ms)

    def error(self, message, duration_ms: Optional[int] = None) -> Optional[str]:
        return self.push(message, "error", duration_ms)

    def warning(self, message, duration_ms: Optional[int] = None) -> Optional[str]:
        return self.push(message, "warning", duration_ms)

    def info(self, message, duration_ms: Optional[int] = None) -> Optional[str]:
        return self.push(message, "info", duration_ms)

    def remove(self, notification_id: str) -> None:
        """Remove a message by id; absent ids are ignored."""
        self._entries = [n for n in self._entries if n.id != notification_id]
        self._forget(notification_id)

    def clear(self) -> None:
        self._entries.clear()
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()
        self._deadlines.clear()

    # ---------- expiry ----------

    def _schedule(self, notification_id: str, duration_ms: int) -> None:
        self._deadlines[notification_id] = self._clock() + duration_ms / 1000
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._timers[notification_id] = loop.call_later(duration_ms / 1000, self.remove, notification_id)

    def _expire(self) -> None:
        now = self._clock()
        expired = [nid for nid, deadline in self._deadlines.items() if deadline <= now]
        for notification_id in expired:
            self.remove(notification_id)

    def _forget(self, notification_id: str) -> None:
        handle = self._timers.pop(notification_id, None)
        if handle is not None:
            handle.cancel()
        self._deadlines.pop(notification_id, None)
