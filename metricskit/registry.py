"""Process-wide registry of metrics."""

from __future__ import annotations

import threading
from typing import Any, Iterator, List, Optional, Type, TypeVar

from metricskit.metrics import Metric

M = TypeVar("M", bound=Metric)


class Registry:
    """Keeps track of registered metrics in registration order.

    :meth:`instance` returns the shared registry; separate registries can be
    created directly.
    """

    _shared: Optional["Registry"] = None
    _shared_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._metrics: List[Metric] = []

    @classmethod
    def instance(cls) -> "Registry":
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    def register(self, metric_type: Type[M], *args: Any, **kwargs: Any) -> M:
        """Create a metric of ``metric_type`` and add it to the registry."""
        metric = metric_type(*args, **kwargs)
        with self._lock:
            self._metrics.append(metric)
        return metric

    @property
    def metrics(self) -> List[Metric]:
        """A snapshot of the registered metrics."""
        with self._lock:
            return list(self._metrics)

    def clear(self) -> None:
        """Forget every registered metric."""
        with self._lock:
            self._metrics.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)

    def __iter__(self) -> Iterator[Metric]:
        return iter(self.metrics)


def get_metrics() -> List[Metric]:
    """Metrics registered in the shared registry."""
    return Registry.instance().metrics


def register_metric(metric_type: Type[M], *args: Any, **kwargs: Any) -> M:
    """Register a new metric in the shared registry."""
    return Registry.instance().register(metric_type, *args, **kwargs)