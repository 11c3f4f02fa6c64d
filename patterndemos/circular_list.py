"""A singly linked circular list, plus an iterator that can go round it several times."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from patterndemos.linked_queue import QueueIterator, QueueNode

T = TypeVar("T")


class CircularList(Generic[T]):
    """A list whose last node links back to the first."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: QueueNode[T] | None = None
        self._size = 0
        for item in items:
            self.insert_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node.data
            node = node.next

    def __contains__(self, value: object) -> bool:
        return self.find_index(value) >= 0

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __copy__(self) -> CircularList[T]:
        return CircularList(self)

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"

    def __str__(self) -> str:
        if self._head is None:
            return "Empty circular list"
        body = " -> ".join(str(item) for item in self)
        return f"{body} -> (back to {self._head.data})"

    def _node_at(self, index: int) -> QueueNode[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _tail(self) -> QueueNode[T]:
        return self._node_at(self._size - 1)

    def insert_front(self, item: T) -> None:
        """Insert an item as the new first element."""
        node = QueueNode(item)
        if self._head is None:
            node.next = node
        else:
            tail = self._tail()
            node.next = self._head
            tail.next = node
        self._head = node
        self._size += 1

    def insert_back(self, item: T) -> None:
        """Insert an item as the new last element."""
        if self._head is None:
            self.insert_front(item)
            return
        tail = self._tail()
        tail.next = QueueNode(item, self._head)
        self._size += 1

    def insert_at(self, index: int, item: T) -> None:
        """Insert an item so that it ends up at ``index``."""
        if index < 0 or index > self._size:
            raise IndexError("Index out of range")
        if index == 0:
            self.insert_front(item)
        elif index == self._size:
            self.insert_back(item)
        else:
            previous = self._node_at(index - 1)
            previous.next = QueueNode(item, previous.next)
            self._size += 1

    def remove_front(self) -> bool:
        """Remove the first element; return whether anything was removed."""
        if self._head is None:
            return False
        if self._size == 1:
            self._head = None
        else:
            tail = self._tail()
            self._head = self._head.next
            tail.next = self._head
        self._size -= 1
        return True

    def remove_back(self) -> bool:
        """Remove the last element; return whether anything was removed."""
        if self._head is None:
            return False
        if self._size == 1:
            return self.remove_front()
        previous = self._node_at(self._size - 2)
        previous.next = self._head
        self._size -= 1
        return True

    def remove_at(self, index: int) -> bool:
        """Remove the element at ``index``; False if the index is out of range."""
        if index < 0 or index >= self._size:
            return False
        if index == 0:
            return self.remove_front()
        previous = self._node_at(index - 1)
        assert previous.next is not None
        previous.next = previous.next.next
        self._size -= 1
        return True

    def remove_value(self, value: T) -> bool:
        """Remove the first element equal to ``value``; False if there is none."""
        index = self.find_index(value)
        return self.remove_at(index) if index >= 0 else False

    def front(self) -> T:
        if self._head is None:
            raise IndexError("List is empty")
        return self._head.data

    def back(self) -> T:
        if self._head is None:
            raise IndexError("List is empty")
        return self._tail().data

    def at(self, index: int) -> T:
        if index < 0 or index >= self._size:
            raise IndexError("Index out of range")
        return self._node_at(index).data

    def find_index(self, value: object) -> int:
        """Return the index of the first element equal to ``value``, or -1."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return -1

    def begin(self) -> QueueIterator[T]:
        """Return an iterator at the first element."""
        return QueueIterator(self._head, self._head)

    def end(self) -> QueueIterator[T]:
        """Return the end iterator.

        A full cycle comes back to the first node, so on a non-empty list
        this compares equal to ``begin()``.
        """
        if self._head is None:
            return QueueIterator(None, None)
        return QueueIterator(self._tail().next, self._head)

    def circular_begin(self) -> QueueIterator[T]:
        """Return an iterator at the first element that keeps wrapping round."""
        return QueueIterator(self._head, self._head)

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        if self._size <= 1:
            return
        current = self._head
        previous = self._tail()
        for _ in range(self._size):
            assert current is not None
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def rotate_left(self, positions: int = 1) -> None:
        """Move the start of the list forward by ``positions`` elements."""
        if self._head is None or positions <= 0:
            return
        for _ in range(positions % self._size):
            self._head = self._head.next
            assert self._head is not None

    def rotate_right(self, positions: int = 1) -> None:
        """Move the start of the list back by ``positions`` elements."""
        if self._head is None or positions <= 0:
            return
        self.rotate_left(self._size - positions % self._size)

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def display(self) -> str:
        """Print the elements once, ending with a pointer back to the start.

        Returns the printed text.
        """
        text = str(self)
        print(text)
        return text

    def _circular_text(self, rotations: int) -> str:
        if self._head is None:
            return "Empty circular list"
        iterator = CircularIterator(self._head, max(rotations, 0))
        return " -> ".join(str(item) for item in iterator)

    def display_circular(self, rotations: int = 2) -> str:
        """Print the elements going round the list ``rotations`` times.

        Returns the printed text.
        """
        text = self._circular_text(rotations)
        print(text)
        return text


class CircularIterator(Generic[T]):
    """Walks round a circular chain of nodes a set number of times."""

    def __init__(
        self,
        start: CircularList[T] | QueueNode[T] | None,
        max_loops: int = 1,
    ) -> None:
        if isinstance(start, CircularList):
            start = start._head
        self._current = start
        self._start = start
        self._loop_count = 0
        self._max_loops = max_loops

    def __iter__(self) -> CircularIterator[T]:
        return self

    def __next__(self) -> T:
        if self._current is None or not self.has_more_loops():
            raise StopIteration
        item = self._current.data
        self.step_forward()
        return item

    def value(self) -> T:
        """Return the element under the iterator."""
        if self._current is None:
            raise IndexError("Iterator dereferencing null pointer")
        return self._current.data

    def step_forward(self) -> CircularIterator[T]:
        """Move to the next node, counting a loop each time the start comes round."""
        if self._current is not None:
            self._current = self._current.next
            if self._current is self._start:
                self._loop_count += 1
        return self

    def has_more_loops(self) -> bool:
        return self._loop_count < self._max_loops

    def current_loop(self) -> int:
        """Return how many full loops have been completed."""
        return self._loop_count