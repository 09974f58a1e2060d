"""Demonstration programs that record metrics from worker threads."""

from __future__ import annotations

import argparse
import os
import random
import threading
import time
from typing import Callable, List, Optional, Sequence, Union

from metricskit.metrics import AverageMetric, CountMetric, OrderedMetric
from metricskit.registry import Registry
from metricskit.writer import MetricsWriter

PathLike = Union[str, "os.PathLike[str]"]


class SequenceMetric(OrderedMetric):
    """Reports every recorded value, oldest first, as a bracketed list."""

    def aggregate_and_reset(self) -> str:
        return "[" + ", ".join(str(v) for v in self.buffer.drain()) + "]"


def _run_workers(count: int, work: Callable[[int], None]) -> None:
    threads: List[threading.Thread] = [
        threading.Thread(target=work, args=(index,)) for index in range(count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def run_cpu_and_http(
    path: PathLike = "example.log", duration: float = 15.0, workers: int = 4
) -> None:
    """Record random CPU loads and request counts while a writer logs them."""
    registry = Registry()
    cpu1 = registry.register(AverageMetric, "CPU1")
    cpu2 = registry.register(AverageMetric, "CPU2")
    rps = registry.register(CountMetric, "HTTP requests RPS")

    rng = random.Random()
    deadline = time.monotonic() + duration

    def work(_index: int) -> None:
        while time.monotonic() < deadline:
            cpu1.record(rng.uniform(0.0, 2.0))
            cpu2.record(rng.uniform(0.0, 2.0))
            rps.record(rng.randint(0, 100))
            time.sleep(0.1)

    with MetricsWriter(path, registry=registry):
        _run_workers(workers, work)


def run_sequences(
    path: PathLike = "example.log", duration: float = 15.0, workers: int = 4
) -> None:
    """Record increasing counters, split into even and odd sequences."""
    registry = Registry()
    seq_even = registry.register(SequenceMetric, "Even")
    seq_odd = registry.register(SequenceMetric, "Odd")

    deadline = time.monotonic() + duration

    def work(index: int) -> None:
        value = index * 1000
        while time.monotonic() < deadline:
            value += 1
            (seq_even if value % 2 == 0 else seq_odd).record(value)
            time.sleep(0.25)

    with MetricsWriter(path, registry=registry):
        _run_workers(workers, work)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a metrics demonstration.")
    parser.add_argument("demo", choices=("cpu", "sequence"))
    parser.add_argument("-o", "--output", default="example.log")
    parser.add_argument("-d", "--duration", type=float, default=15.0)
    parser.add_argument("-w", "--workers", type=int, default=4)
    args = parser.parse_args(argv)

    run = run_cpu_and_http if args.demo == "cpu" else run_sequences
    run(args.output, args.duration, args.workers)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())