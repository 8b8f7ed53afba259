"""Producer/consumer over a bounded buffer."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence

BUFFER_SIZE = 20


class BufferEmptyError(Exception):
    """Raised when consuming from an empty buffer."""


class BufferFullError(Exception):
    """Raised when producing into a full buffer."""


class BoundedBuffer:
    """A fixed-capacity buffer of numbered items, consumed in production order."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[int] = deque()
        self._produced = 0

    def __len__(self) -> int:
        return len(self._items)

    def produce(self) -> int:
        """Add the next numbered item and return its number."""
        if len(self._items) >= self.capacity:
            raise BufferFullError("buffer is full")
        self._produced += 1
        self._items.append(self._produced)
        return self._produced

    def consume(self) -> int:
        """Remove and return the oldest item."""
        if not self._items:
            raise BufferEmptyError("buffer is empty")
        return self._items.popleft()


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(prog="ossim-prodcons", description="Producer/consumer.").parse_args(argv)
    buffer = BoundedBuffer()
    print("Enter:\n1. Producer\n2. Consumer\n3. Exit")
    while True:
        print("\nEnter choice: ", end="", flush=True)
        choice = sys.stdin.readline().strip()
        try:
            if choice == "1":
                print(f"Producer has produced: Item {buffer.produce()}")
            elif choice == "2":
                print(f"Consumer has consumed: Item {buffer.consume()}")
            else:
                return 0
        except BufferFullError:
            print("Buffer is full!")
        except BufferEmptyError:
            print("Buffer is empty!")


if __name__ == "__main__":
    sys.exit(main())