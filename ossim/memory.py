"""Contiguous memory allocation: first fit, best fit and worst fit."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TextIO

_Chooser = Callable[[list[int], list[int]], int]


def _place(
    blocks: Iterable[int], processes: Iterable[int], choose: _Chooser
) -> list[int | None]:
    free = list(blocks)
    allocation: list[int | None] = []
    for size in processes:
        candidates = [index for index, room in enumerate(free) if room >= size]
        if not candidates:
            allocation.append(None)
            continue
        index = choose(candidates, free)
        free[index] -= size
        allocation.append(index)
    return allocation


def first_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[int | None]:
    """Give each process the first block with room for it.

    Returns, per process, the 0-based index of its block or ``None`` when it
    could not be placed. The input block sizes are left untouched.
    """
    return _place(blocks, processes, lambda candidates, free: candidates[0])


def best_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[int | None]:
    """Give each process the smallest block with room for it (earliest on ties)."""
    return _place(
        blocks, processes, lambda candidates, free: min(candidates, key=free.__getitem__)
    )


def worst_fit(blocks: Iterable[int], processes: Iterable[int]) -> list[int | None]:
    """Give each process the largest block with room for it (earliest on ties)."""
    return _place(
        blocks, processes, lambda candidates, free: max(candidates, key=free.__getitem__)
    )


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _print_allocation(title: str, allocation: Sequence[int | None]) -> None:
    print(f"\n{title}:")
    for number, block in enumerate(allocation, 1):
        if block is None:
            print(f"Process {number} -> Not Allocated")
        else:
            print(f"Process {number} -> Block {block + 1}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-memory", description="Compare memory allocation strategies."
    )
    parser.parse_args(argv)
    reader = _ints(sys.stdin)
    try:
        print("Enter number of memory blocks: ", end="", flush=True)
        block_count = next(reader)
        print("Enter block sizes:")
        blocks = [next(reader) for _ in range(block_count)]
        print("Enter number of processes: ", end="", flush=True)
        process_count = next(reader)
        print("Enter process sizes:")
        processes = [next(reader) for _ in range(process_count)]
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    _print_allocation("First-Fit", first_fit(blocks, processes))
    _print_allocation("Best-Fit", best_fit(blocks, processes))
    _print_allocation("Worst-Fit", worst_fit(blocks, processes))
    return 0


if __name__ == "__main__":
    sys.exit(main())