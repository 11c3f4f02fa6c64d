"""A singly linked FIFO queue and a node iterator shared by linked containers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class QueueNode(Generic[T]):
    """A node of a singly linked structure."""

    data: T
    next: QueueNode[T] | None = None


class QueueIterator(Generic[T]):
    """A position in a chain of nodes.

    ``begin`` is the container's first node; without it the iterator can only
    move forward, and ``distance`` and ``before`` report that they cannot tell.
    """

    def __init__(
        self,
        node: QueueNode[T] | None = None,
        begin: QueueNode[T] | None = None,
    ) -> None:
        self._current = node
        self._begin = begin

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueueIterator):
            return NotImplemented
        return self._current is other._current

    def __repr__(self) -> str:
        where = "end" if self._current is None else repr(self._current.data)
        return f"QueueIterator({where})"

    def value(self) -> T:
        """Return the element under the iterator."""
        if self._current is None:
            raise IndexError("Iterator dereferencing null pointer")
        return self._current.data

    def is_valid(self) -> bool:
        """Whether the iterator points at an element."""
        return self._current is not None

    def step_forward(self) -> QueueIterator[T]:
        """Move to the next node; stays put at the end."""
        if self._current is not None:
            self._current = self._current.next
        return self

    def step_back(self) -> QueueIterator[T]:
        """Move to the previous node by walking from the start."""
        if self._current is None or self._begin is None:
            return self
        if self._current is self._begin:
            return self
        previous = None
        node = self._begin
        while node is not None and node is not self._current:
            previous = node
            node = node.next
        self._current = previous
        return self

    def advance(self, n: int) -> QueueIterator[T]:
        """Move ``n`` steps, backwards when ``n`` is negative."""
        step = self.step_forward if n > 0 else self.step_back
        for _ in range(abs(n)):
            if self._current is None:
                break
            step()
        return self

    def _position(self, target: QueueNode[T] | None) -> int:
        position = 0
        node = self._begin
        while node is not None and node is not target:
            node = node.next
            position += 1
        return position

    def distance(self, other: QueueIterator[T]) -> int:
        """Return the number of steps from this iterator to ``other``.

        Returns -1 when the iterator does not know its container's start.
        """
        if self._begin is None:
            return -1
        steps = 0
        node = self._current
        while node is not None and node is not other._current:
            node = node.next
            steps += 1
        if node is other._current:
            return steps
        return self._position(other._current) - self._position(self._current)

    def reset_to_begin(self) -> None:
        """Move back to the container's first node."""
        self._current = self._begin

    def before(self, other: QueueIterator[T]) -> bool:
        """Whether ``other`` can be reached by moving forward from here."""
        if self._begin is None:
            return False
        node = self._current
        while node is not None:
            if node is other._current:
                return True
            node = node.next
        return False


class Queue(Generic[T]):
    """A first-in, first-out queue built from linked nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._front: QueueNode[T] | None = None
        self._rear: QueueNode[T] | None = None
        self._size = 0
        for item in items:
            self.enqueue(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __copy__(self) -> Queue[T]:
        return Queue(self)

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

    def enqueue(self, item: T) -> None:
        """Add an item at the back."""
        node = QueueNode(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self._front is None:
            raise IndexError("Queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if self._front is None:
            raise IndexError("Queue is empty")
        return self._front.data

    def begin(self) -> QueueIterator[T]:
        """Return an iterator at the front.

        Queue iterators carry no start node, so they cannot step back,
        measure distances or compare order.
        """
        return QueueIterator(self._front)

    def end(self) -> QueueIterator[T]:
        """Return the past-the-end iterator."""
        return QueueIterator(None)

    def clear(self) -> None:
        """Remove every item."""
        self._front = self._rear = None
        self._size = 0