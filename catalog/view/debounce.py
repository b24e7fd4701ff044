from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class QueryDebouncer(Generic[T]):
    """Run ``callback`` with the latest submitted value after ``delay_sec`` of quiet.

    Each submit cancels the pending call, so only the last value of a burst of
    keystrokes reaches the callback. Must be used from a running event loop.
    """

    def __init__(self, delay_sec: float, callback: Callable[[T], None]):
        self.delay_sec = delay_sec
        self.callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def submit(self, value: T) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay_sec, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: T) -> None:
        self._handle = None
        self.callback(value)
