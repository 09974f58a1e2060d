"""Thread-safe metrics that collect values and aggregate them on demand."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from metricskit.buffers import ConcurrentQueue, ConcurrentStack


def _to_string(value: Any) -> str:
    """Render a number the way aggregated values are reported."""
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def _truncating_div(total: int, count: int) -> int:
    quotient = abs(total) // count
    return -quotient if total < 0 else quotient


class Metric(ABC):
    """Common interface of every metric: a name and a periodic aggregate."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def aggregate_and_reset(self) -> str:
        """Summarise the values recorded since the last call and forget them."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class OrderedMetric(Metric):
    """Base for metrics whose recorded values are kept in arrival order."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._buffer: ConcurrentQueue[Any] = ConcurrentQueue()

    def record(self, value: Any) -> None:
        self._buffer.push(value)

    @property
    def buffer(self) -> ConcurrentQueue[Any]:
        return self._buffer


class UnorderedMetric(Metric):
    """Base for metrics that do not care about the order of recorded values."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._buffer: ConcurrentStack[Any] = ConcurrentStack()

    def record(self, value: Any) -> None:
        self._buffer.push(value)

    @property
    def buffer(self) -> ConcurrentStack[Any]:
        return self._buffer


class AverageMetric(UnorderedMetric):
    """Reports the mean of the values recorded since the last aggregation.

    With ``value_type=int`` the mean is truncated toward zero.
    """

    def __init__(self, name: str, value_type: Callable[[], Any] = float) -> None:
        super().__init__(name)
        self.value_type = value_type

    def aggregate_and_reset(self) -> str:
        total = self.value_type()
        count = 0
        for value in self.buffer.drain():
            total += value
            count += 1
        if not count:
            return _to_string(self.value_type())
        if self.value_type is int:
            return _to_string(_truncating_div(int(total), count))
        return _to_string(self.value_type(total / count))


class CountMetric(UnorderedMetric):
    """Reports the sum of the values recorded since the last aggregation."""

    def aggregate_and_reset(self) -> str:
        return _to_string(sum(self.buffer.drain(), 0))