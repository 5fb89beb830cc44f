"""
Wall-clock timing for backends.

Backends time their phases with named sections; the totals end up in
Result.timing, e.g.

    {'total_seconds': 0.21, 'full_model': 0.0004,
     'enumeration': 0.20, 'statistics': 0.003}
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall timer with accumulating named sections.

    Usable as a context manager, which starts and stops it:

        with Timer() as timer:
            with timer.section('enumeration'):
                best = search(y, X, max_size, keep)
        timing = timer.result()

    start() and stop() can also be called directly.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def start(self) -> None:
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - start
            )

    def result(self) -> dict[str, float]:
        """
        'total_seconds' plus one entry per section.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
