"""Banker's algorithm safety check."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SafetyResult:
    """Outcome of a safety check; ``steps`` pairs each granted process with
    the resources free after it released its allocation."""

    safe: bool
    sequence: tuple[int, ...]
    need: tuple[tuple[int, ...], ...]
    steps: tuple[tuple[int, tuple[int, ...]], ...]
    available: tuple[int, ...]


def check_safety(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> SafetyResult:
    """Find a safe sequence for the given state, if one exists."""
    width = len(available)
    if len(allocation) != len(maximum) or any(
        len(a) != width or len(m) != width for a, m in zip(allocation, maximum)
    ):
        raise ValueError("allocation and maximum must be processes x resources")

    need = tuple(tuple(m - a for a, m in zip(ar, mr)) for ar, mr in zip(allocation, maximum))
    free = tuple(available)
    finished = [False] * len(allocation)
    steps: list[tuple[int, tuple[int, ...]]] = []
    for _ in allocation:
        for pid, (need_row, alloc_row) in enumerate(zip(need, allocation)):
            if finished[pid] or any(n > f for n, f in zip(need_row, free)):
                continue
            free = tuple(f + a for f, a in zip(free, alloc_row))
            finished[pid] = True
            steps.append((pid, free))
    return SafetyResult(
        safe=all(finished),
        sequence=tuple(pid for pid, _ in steps),
        need=need,
        steps=tuple(steps),
        available=free,
    )


def _row(values: Sequence[int]) -> str:
    return "".join(f"{v} " for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(prog="ossim-bankers", description="Banker's algorithm.").parse_args(argv)
    reader = (int(token) for line in sys.stdin for token in line.split())

    def ask(prompt: str, count: int) -> list[int]:
        print(prompt, end="", flush=True)
        return [next(reader) for _ in range(count)]

    try:
        (processes,) = ask("Enter number of processes -- ", 1)
        (resources,) = ask("Enter number of resources -- ", 1)
        allocation, maximum = [], []
        for pid in range(processes):
            allocation.append(ask(f"Enter allocation for P{pid} -- ", resources))
            maximum.append(ask("Enter Max -- ", resources))
        result = check_safety(allocation, maximum, ask("Enter Available Resources -- ", resources))
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print()
    for pid, free in result.steps:
        print(f"P{pid} is visited({_row(free)})")
    if result.safe:
        print("SYSTEM IS IN SAFE STATE")
        print("The Safe Sequence is -- " + " -> ".join(f"P{pid}" for pid in result.sequence))
    else:
        print("SYSTEM IS NOT IN SAFE STATE")
    print("\nProcess    Allocation    Max    Need")
    for pid, rows in enumerate(zip(allocation, maximum, result.need)):
        print(f"P{pid}\t  " + "\t".join(_row(r) for r in rows))
    return 0


if __name__ == "__main__":
    sys.exit(main())