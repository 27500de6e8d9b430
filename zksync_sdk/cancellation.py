"""Cancellation signal shared between a caller and a blocking wait."""
from __future__ import annotations

import threading
import time
from typing import Optional

CANCELLED = "cancelled"
DEADLINE_EXCEEDED = "deadline_exceeded"


class Cancellation:
    """Signal that ends a wait early, either on request or at a deadline.

    The deadline is measured on the monotonic clock from construction. One
    instance may be shared by several concurrent waits.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._reason: Optional[str] = None
        self._deadline = None if timeout is None else time.monotonic() + timeout

    @classmethod
    def with_timeout(cls, seconds: float) -> "Cancellation":
        return cls(timeout=seconds)

    def cancel(self, reason: str = CANCELLED) -> None:
        with self._lock:
            if self._reason is None:
                self._reason = reason
        self._event.set()

    @property
    def reason(self) -> Optional[str]:
        with self._lock:
            if self._reason is None and self._deadline is not None:
                if time.monotonic() >= self._deadline:
                    self._reason = DEADLINE_EXCEEDED
                    self._event.set()
            return self._reason

    @property
    def cancelled(self) -> bool:
        return self.reason is not None

    def remaining(self) -> Optional[float]:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return :attr:`cancelled`."""

        remaining = self.remaining()
        if remaining is not None and (timeout is None or remaining < timeout):
            timeout = remaining
        self._event.wait(timeout)
        return self.cancelled
