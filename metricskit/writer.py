"""Periodic writer of metric aggregates to a log file."""

from __future__ import annotations

import os
import threading
import time
from datetime import datetime
from typing import Iterable, Optional, Union

from metricskit.metrics import Metric
from metricskit.registry import Registry


def format_line(metrics: Iterable[Metric], now: datetime) -> str:
    """Build one log line: a millisecond timestamp, then quoted names and values."""
    parts = [f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"]
    for metric in metrics:
        parts.append(f'"{metric.name}" {metric.aggregate_and_reset()}')
    return " ".join(parts)


class MetricsWriter:
    """Appends the state of all registered metrics to a file at a fixed interval.

    The writer runs in its own thread between :meth:`start` and :meth:`stop`;
    used as a context manager it is started on entry and stopped on exit.
    """

    def __init__(
        self,
        path: Union[str, "os.PathLike[str]"],
        interval: float = 1.0,
        registry: Optional[Registry] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.registry = registry if registry is not None else Registry.instance()
        self._file = open(path, "a", encoding="utf-8")
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None

    def start(self) -> None:
        """Start the background thread; does nothing if it is already running."""
        with self._lock:
            if self._thread is not None:
                return
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._write_loop, name="metrics-writer", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop the background thread and wait for it; does nothing if stopped."""
        with self._lock:
            thread, self._thread = self._thread, None
            if thread is None:
                return
            self._stop_event.set()
        thread.join()

    def close(self) -> None:
        """Stop writing and close the file."""
        self.stop()
        self._file.close()

    def write_once(self) -> str:
        """Aggregate every registered metric now and append the line to the file."""
        line = format_line(self.registry.metrics, datetime.now())
        self._file.write(line + "\n")
        self._file.flush()
        return line

    def _write_loop(self) -> None:
        next_wake = time.monotonic()
        while not self._stop_event.is_set():
            self.write_once()
            next_wake += self.interval
            if self._stop_event.wait(max(0.0, next_wake - time.monotonic())):
                break

    def __enter__(self) -> "MetricsWriter":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()