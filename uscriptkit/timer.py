"""Context manager that logs the time spent inside it."""

from __future__ import annotations

import time

from .logger import LogLevel, log_print

_HEADER = "TIMER      :"


class Timer:
    """Measures wall time from construction and logs it at DEBUG on exit."""

    def __init__(self, context: str = "") -> None:
        self.context = context
        self._start = time.perf_counter()
        self._end: float | None = None

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()
        label = f"[{self.context}]" if self.context else None
        log_print(LogLevel.DEBUG, _HEADER, label, "Elapsed Time (sec):", self.elapsed())

    def elapsed(self) -> float:
        """Seconds since start, or the final duration once the block has exited."""
        end = self._end if self._end is not None else time.perf_counter()
        return end - self._start