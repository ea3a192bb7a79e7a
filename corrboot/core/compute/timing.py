"""
Wall-clock timing for backends.

A backend times its named phases (point estimate, replicate loop,
summary statistics) and stores Timer.result() in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall timer plus accumulating named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('bootstrap_replicates'):
            ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.41, 'bootstrap_replicates': 0.40}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the elapsed time of the block to section ``name``."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - t0
            )

    def result(self) -> dict[str, float]:
        """
        Seconds spent overall ('total_seconds') and per section.

        Raises RuntimeError if the timer was never stopped.
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
