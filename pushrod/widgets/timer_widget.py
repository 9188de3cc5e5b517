"""An invisible widget that calls a function each time a timeout elapses."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Sequence

from pushrod.render.widget import Widget

TimeoutCallback = Callable[["TimerWidget", Sequence[Any]], None]


def _time_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class TimerWidget(Widget):
    """Calls the `on_timeout` callback every `timeout` milliseconds while enabled.

    The timer is checked on each frame tick, so it fires no more precisely than
    the frame rate allows.
    """

    def __init__(self, timeout: int, enabled: bool) -> None:
        super().__init__(0, 0, 0, 0)
        self._enabled = enabled
        self.timeout = timeout
        self._initiated = _time_ms()
        self._on_timeout: Optional[TimeoutCallback] = None

    def enable(self) -> None:
        """Enable the timer and restart the elapsed time."""
        self._initiated = _time_ms()
        self._enabled = True

    def disable(self) -> None:
        """Disable the timer; the callback is not called while disabled."""
        self._enabled = False

    @property
    def enabled(self) -> bool:
        """True while the timer is running."""
        return self._enabled

    def on_timeout(self, callback: TimeoutCallback) -> None:
        """Set the function called with the widget and widget list on each timeout."""
        self._on_timeout = callback

    def tick(self, widgets: Sequence[Any]) -> None:
        if not self._enabled:
            return
        if _time_ms() - self._initiated > self.timeout:
            self._initiated = _time_ms()
            if self._on_timeout is not None:
                self._on_timeout(self, widgets)