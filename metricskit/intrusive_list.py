"""Circular doubly-linked intrusive list."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T", bound="IntrusiveListNode")


class IntrusiveListNode:
    """Base for objects that link themselves into an :class:`IntrusiveList`.

    Subclasses need not call ``super().__init__()``: an unlinked node simply
    has ``prev`` and ``next`` equal to ``None``.
    """

    prev: Optional["IntrusiveListNode"] = None
    next: Optional["IntrusiveListNode"] = None

    def link_before(self, that: "IntrusiveListNode") -> None:
        """Insert this node immediately before ``that``."""
        if self.is_linked():
            raise ValueError("node is already linked")
        self.prev = that.prev
        self.prev.next = self
        self.next = that
        that.prev = self

    def is_linked(self) -> bool:
        return self.next is not None

    def unlink(self) -> None:
        """Remove this node from the list it belongs to."""
        if not self.is_linked():
            raise ValueError("node is not linked")
        self.next.prev = self.prev
        self.prev.next = self.next
        self.next = None
        self.prev = None


class _Sentinel(IntrusiveListNode):
    def __init__(self) -> None:
        self.next = self
        self.prev = self


class IntrusiveList(Generic[T]):
    """A list whose items are themselves the links."""

    def __init__(self) -> None:
        self._enter = _Sentinel()

    def push_back(self, node: T) -> None:
        node.link_before(self._enter)

    def push_front(self, node: T) -> None:
        node.link_before(self._enter.next)

    def pop_front(self) -> T:
        """Remove and return the first item; raise IndexError if empty."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        front = self._enter.next
        front.unlink()
        return front

    def try_pop_front(self) -> Optional[T]:
        return None if self.is_empty() else self.pop_front()

    def pop_back(self) -> T:
        """Remove and return the last item; raise IndexError if empty."""
        if self.is_empty():
            raise IndexError("pop from empty list")
        back = self._enter.prev
        back.unlink()
        return back

    def try_pop_back(self) -> Optional[T]:
        return None if self.is_empty() else self.pop_back()

    def is_empty(self) -> bool:
        return self._enter.next is self._enter

    def front(self) -> T:
        if self.is_empty():
            raise IndexError("front of empty list")
        return self._enter.next

    def try_front(self) -> Optional[T]:
        return None if self.is_empty() else self.front()

    def back(self) -> T:
        if self.is_empty():
            raise IndexError("back of empty list")
        return self._enter.prev

    def try_back(self) -> Optional[T]:
        return None if self.is_empty() else self.back()

    def append(self, that: "IntrusiveList[T]") -> None:
        """Move every item of ``that`` to the end of this list, leaving it empty."""
        if that is self or that.is_empty():
            return
        that_front = that._enter.next
        that_back = that._enter.prev
        back = self._enter.prev

        that_back.next = self._enter
        that_front.prev = back
        self._enter.prev = that_back
        back.next = that_front

        that._enter.next = that._enter
        that._enter.prev = that._enter

    def swap(self, that: "IntrusiveList[T]") -> None:
        """Exchange contents with ``that`` in constant time."""
        tmp: IntrusiveList[T] = IntrusiveList()
        tmp.append(self)
        self.append(that)
        that.append(tmp)

    def __iter__(self) -> Iterator[T]:
        node = self._enter.next
        while node is not self._enter:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return not self.is_empty()