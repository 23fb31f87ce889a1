"""Stacks and queues built on arrays, linked nodes and other stacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from or popping an empty stack."""


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class BoundedStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = 3) -> None:
        self._capacity = capacity
        self._items: list = []

    def push(self, value) -> None:
        if self.is_full():
            raise StackOverflowError("Stack overflow")
        self._items.append(value)

    def pop(self):
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self):
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def display(self) -> str:
        """Describe the contents from bottom to top."""
        if self.is_empty():
            return "stack is empty"
        return "stack elements: " + " ".join(str(v) for v in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Iterate from bottom to top."""
        return iter(self._items)


class LinkedStack:
    """An unbounded stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self):
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        value = self._top.value
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self):
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def display(self) -> str:
        """Describe the contents from top to bottom."""
        if self.is_empty():
            return "Stack is empty!"
        return "Stack elements: " + " ".join(str(v) for v in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next


class ListStack:
    """A stack backed by a Python list."""

    def __init__(self) -> None:
        self._items: list = []

    def push(self, value) -> None:
        self._items.append(value)

    def pop(self):
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def top(self):
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def copy(self) -> "ListStack":
        """Return an independent stack holding the same items."""
        other = ListStack()
        other._items = list(self._items)
        return other

    def __len__(self) -> int:
        return len(self._items)


class LinkedQueue:
    """A FIFO queue of linked nodes with head and tail references."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def push(self, value) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self):
        if self._head is None:
            raise IndexError("queue is empty")
        value = self._head.value
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return value

    def front(self):
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size


class TwoStackQueue(Generic[T]):
    """A FIFO queue made of an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[T] = []
        self._outbox: list[T] = []

    def _shift(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("Queue is empty")

    def enqueue(self, item: T) -> None:
        self._inbox.append(item)

    def dequeue(self) -> T:
        self._shift()
        return self._outbox.pop()

    def peek(self) -> T:
        self._shift()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class CostlyEnqueueQueue:
    """A FIFO queue whose single stack always holds the front item on top."""

    def __init__(self) -> None:
        self._stack: list = []

    def enqueue(self, item) -> None:
        spare = []
        while self._stack:
            spare.append(self._stack.pop())
        self._stack.append(item)
        while spare:
            self._stack.append(spare.pop())

    def dequeue(self):
        if not self._stack:
            raise IndexError("queue is empty")
        return self._stack.pop()

    def front(self):
        if not self._stack:
            raise IndexError("queue is empty")
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)