"""Contiguous (sequential) file allocation on a disk of fixed-size blocks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


class SequentialDisk:
    """A disk where each file takes the blocks right after the previous one.

    Files are numbered from 1 in the order they are offered, whether or not
    they fit.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("disk size cannot be negative")
        self.size = size
        self._owners: list[int | None] = [None] * size
        self._next_free = 0
        self._files = 0

    @property
    def blocks(self) -> tuple[int | None, ...]:
        """The owning file number of each block, ``None`` for a free block."""
        return tuple(self._owners)

    @property
    def next_free(self) -> int:
        return self._next_free

    def allocate(self, length: int) -> int | None:
        """Place the next file; return its first block, or ``None`` if it does not fit."""
        if length < 0:
            raise ValueError("file size cannot be negative")
        self._files += 1
        start = self._next_free
        end = start + length
        if end > self.size or any(owner is not None for owner in self._owners[start:end]):
            return None
        self._owners[start:end] = [self._files] * length
        self._next_free = end
        return start


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-disk", description="Allocate files contiguously on a disk."
    )
    parser.parse_args(argv)
    reader = _ints(sys.stdin)
    try:
        print("Enter number of blocks: ", end="", flush=True)
        disk = SequentialDisk(next(reader))
        print("Enter number of files: ", end="", flush=True)
        count = next(reader)
        for number in range(1, count + 1):
            print(f"Enter file {number} size: ", end="", flush=True)
            start = disk.allocate(next(reader))
            if start is None:
                print(f"File {number} not allocated")
            else:
                print(f"File {number} allocated from index {start}")
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print("\nDisk Allocation Status:")
    for index, owner in enumerate(disk.blocks):
        if owner is None:
            print(f"Block {index}: Free")
        else:
            print(f"Block {index}: Occupied by File {owner}")
    return 0


if __name__ == "__main__":
    sys.exit(main())