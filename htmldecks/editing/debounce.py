"""
Single-slot debounce for plain-text field commits.

At most one write is pending at a time. A newer value for the same field
replaces the pending one; a value for a different field first commits the
pending one, so switching fields never loses text.
"""

from typing import Any, Callable, Hashable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with an asyncio-style ``call_later`` (an event loop, a test clock)."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class Debouncer:
    """
    Cancel-and-replace delayed task with a single slot.

    Args:
        scheduler: Provides call_later(delay, callback)
        delay: Idle time in seconds before the pending write runs
    """

    def __init__(self, scheduler: Scheduler, delay: float = 0.3):
        self.scheduler = scheduler
        self.delay = delay
        self._key: Optional[Hashable] = None
        self._callback: Optional[Callable[[], None]] = None
        self._handle: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._callback is not None

    @property
    def pending_key(self) -> Optional[Hashable]:
        return self._key

    def schedule(self, key: Hashable, callback: Callable[[], None]) -> None:
        """Replace the pending write for ``key``; commit a pending write for another key first."""
        if self.pending and self._key != key:
            self.flush()
        self.cancel()
        self._key = key
        self._callback = callback
        self._handle = self.scheduler.call_later(self.delay, self._fire)

    def flush(self) -> None:
        """Run the pending write now, if any."""
        callback = self._callback
        self.cancel()
        if callback is not None:
            callback()

    def cancel(self) -> None:
        """Drop the pending write without running it."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._callback = None
        self._key = None

    def _fire(self) -> None:
        callback = self._callback
        self._handle = None
        self._callback = None
        self._key = None
        if callback is not None:
            callback()
