"""Thread-safe unbounded buffers used to collect recorded values."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ConcurrentQueue(Generic[T]):
    """Unbounded multi-producer, multi-consumer FIFO queue."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def push(self, value: T) -> None:
        """Add ``value`` at the tail."""
        self._items.append(value)

    def try_pop(self) -> Optional[T]:
        """Remove and return the head value, or ``None`` if the queue is empty."""
        try:
            return self._items.popleft()
        except IndexError:
            return None

    def drain(self) -> Iterator[T]:
        """Pop values oldest first until the queue is empty."""
        while True:
            try:
                yield self._items.popleft()
            except IndexError:
                return


class ConcurrentStack(Generic[T]):
    """Unbounded multi-producer, multi-consumer LIFO stack."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def push(self, value: T) -> None:
        """Place ``value`` on top."""
        self._items.append(value)

    def try_pop(self) -> Optional[T]:
        """Remove and return the top value, or ``None`` if the stack is empty."""
        try:
            return self._items.pop()
        except IndexError:
            return None

    def drain(self) -> Iterator[T]:
        """Pop values newest first until the stack is empty."""
        while True:
            try:
                yield self._items.pop()
            except IndexError:
                return