"""A bounded array-backed min-heap and a line-oriented command runner for it."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from pathlib import Path

MAX_CAPACITY = 1000

_INTEGER = re.compile(r"[+-]?[0-9]+")


class HeapOverflowError(OverflowError):
    """Raised when the heap cannot hold more values."""


class HeapUnderflowError(LookupError):
    """Raised when reading from or removing out of an empty heap."""


class MinHeap:
    """A binary min-heap holding at most MAX_CAPACITY values."""

    def __init__(self) -> None:
        self._heap: list = []

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._heap[parent] <= self._heap[i]:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = len(self._heap)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and self._heap[child] < self._heap[smallest]:
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._heap):
            raise IndexError("Index out of range")

    def insert(self, x) -> None:
        """Add a value."""
        if len(self._heap) == MAX_CAPACITY:
            raise HeapOverflowError("Heap overflow")
        self._heap.append(x)
        self._sift_up(len(self._heap) - 1)

    def find_min(self):
        """Return the smallest value without removing it."""
        if not self._heap:
            raise HeapUnderflowError("Heap is empty")
        return self._heap[0]

    def extract_min(self):
        """Remove and return the smallest value."""
        if not self._heap:
            raise HeapUnderflowError("Heap is empty")
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return smallest

    def is_empty(self) -> bool:
        return not self._heap

    def decrease_key(self, index: int, new_value) -> None:
        """Lower the value stored at an array index."""
        self._check_index(index)
        if new_value > self._heap[index]:
            raise ValueError("New value is greater than current value")
        self._heap[index] = new_value
        self._sift_up(index)

    def delete_key(self, index: int) -> None:
        """Remove the value stored at an array index."""
        self._check_index(index)
        while index > 0:
            parent = (index - 1) // 2
            self._swap(index, parent)
            index = parent
        self.extract_min()

    def is_valid(self) -> bool:
        """Tell whether every parent is no greater than its children."""
        heap = self._heap
        return all(heap[(i - 1) // 2] <= heap[i] for i in range(1, len(heap)))

    def heapify(self, values: Iterable) -> None:
        """Replace the contents with the given values, arranged bottom-up."""
        items = list(values)
        if len(items) > MAX_CAPACITY:
            raise HeapOverflowError("Array too large")
        self._heap = items
        for i in range(len(items) // 2 - 1, -1, -1):
            self._sift_down(i)

    def sorted_values(self) -> list:
        """Return the values in ascending order, leaving the heap unchanged."""
        scratch = MinHeap()
        for value in self._heap:
            scratch.insert(value)
        result = []
        while not scratch.is_empty():
            result.append(scratch.extract_min())
        return result

    def replace_min(self, x):
        """Put x in place of the smallest value and return the old minimum."""
        if not self._heap:
            raise HeapUnderflowError("Heap is empty")
        smallest = self._heap[0]
        self._heap[0] = x
        self._sift_down(0)
        return smallest

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator:
        """Iterate in array order."""
        return iter(self._heap)


class _Fields:
    """Reads integers from one line; after a failed read every read yields 0."""

    def __init__(self, line: str) -> None:
        self._tokens = deque(line.split())
        self._failed = False

    def integer(self) -> int:
        if self._failed or not self._tokens:
            self._failed = True
            return 0
        token = self._tokens[0]
        match = _INTEGER.match(token)
        if match is None:
            self._failed = True
            return 0
        rest = token[match.end():]
        if rest:
            self._tokens[0] = rest
        else:
            self._tokens.popleft()
        return int(match.group())


def _spaced(values: Iterable) -> str:
    return "".join(f"{value} " for value in values) + "\n"


def run_commands(lines: Iterable[str]) -> str:
    """Run numbered heap commands, one per line, and return the report."""
    heap = MinHeap()
    out: list[str] = []
    write = out.append
    for line in lines:
        fields = _Fields(line)
        command = fields.integer()
        try:
            if command == 1:
                value = fields.integer()
                heap.insert(value)
                write(f"Inserted {value} into the heap.\n")
            elif command == 2:
                write("Extracted Min: ")
                write(f"{heap.extract_min()}\n")
            elif command == 3:
                write("Min: ")
                write(f"{heap.find_min()}\n")
            elif command == 4:
                write(f"Heap size: {len(heap)}\n")
            elif command == 5:
                write(f"Is heap empty? {'Yes' if heap.is_empty() else 'No'}\n")
            elif command == 6:
                index = fields.integer()
                heap.delete_key(index)
                write(f"Deleted element at index {index}\n")
            elif command == 7:
                index = fields.integer()
                value = fields.integer()
                heap.decrease_key(index, value)
                write(f"Decreased key at index {index} to {value}\n")
            elif command == 8:
                write("Heap: " + _spaced(heap))
            elif command == 9:
                verdict = "preserved." if heap.is_valid() else "violated!"
                write(f"Min Heap property is {verdict}\n")
            elif command == 10:
                count = fields.integer()
                if count < 0:
                    raise ValueError("invalid array length")
                heap.heapify([fields.integer() for _ in range(count)])
                write("Heap built from array.\n")
            elif command == 11:
                write("Sorted: " + _spaced(heap.sorted_values()))
            elif command == 12:
                value = fields.integer()
                write("Replaced Min: ")
                write(f"{heap.replace_min(value)} with {value}\n")
            else:
                write(f"Unknown command: {command}\n")
        except (OverflowError, LookupError, ValueError) as exc:
            write(f"Error: {exc}\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    """Run the command file and write the report to the output file."""
    if argv is None:
        argv = sys.argv[1:]
    in_path = argv[0] if argv else "input.txt"
    out_path = argv[1] if len(argv) > 1 else "output.txt"
    try:
        text = Path(in_path).read_text(encoding="utf-8")
        report = run_commands(text.splitlines())
        Path(out_path).write_text(report, encoding="utf-8")
    except OSError:
        print("Error opening input/output file.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())