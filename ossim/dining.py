"""Dining philosophers: hungry philosophers eat one or two at a time."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

WAITING = "waiting"
EATING = "eating"

Event = tuple[str, int]


def _validate(total: int, hungry: Iterable[int]) -> list[int]:
    if total <= 0:
        raise ValueError("there must be at least one philosopher")
    order = list(hungry)
    for position in order:
        if not 1 <= position <= total:
            raise ValueError(f"philosopher position {position} is not in 1..{total}")
    if len(set(order)) != len(order):
        raise ValueError("a philosopher may be listed as hungry only once")
    return order


def one_at_a_time(total: int, hungry: Iterable[int]) -> list[Event]:
    """Return ``(WAITING|EATING, position)`` events as each philosopher eats alone.

    Positions are 1-based, in the order the philosophers got hungry. Eating
    finishes before the next is considered, so a fork is always free.
    """
    waiting = _validate(total, hungry)
    return [(WAITING, p) for p in waiting] + [(EATING, p) for p in waiting]


def two_at_a_time(total: int, hungry: Iterable[int]) -> list[Event]:
    """Return the events when up to two philosophers are served per round."""
    waiting = _validate(total, hungry)
    events: list[Event] = []
    while waiting:
        served, waiting = waiting[:2], waiting[2:]
        events += [(EATING, p) for p in served] + [(WAITING, p) for p in waiting]
    return events


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(prog="ossim-dining", description="Dining philosophers.").parse_args(argv)
    reader = (int(token) for line in sys.stdin for token in line.split())

    def ask(prompt: str) -> int:
        print(prompt, end="", flush=True)
        return next(reader)

    try:
        total = ask("Enter total no of philosophers: ")
        count = ask("How many philosophers are hungry? ")
        hungry = [
            ask(f"Enter hungry philosopher {n} position (1 to {total}): ")
            for n in range(1, count + 1)
        ]
        _validate(total, hungry)
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    while True:
        print("\n1. One can eat at a time\n2. Two can eat at a time\n3. Exit")
        try:
            choice = ask("Enter choice: ")
        except (StopIteration, ValueError):
            return 0
        if choice == 3:
            print("Exiting...")
            return 0
        if choice not in (1, 2):
            print("Invalid choice")
            continue
        simulate = one_at_a_time if choice == 1 else two_at_a_time
        for kind, position in simulate(total, hungry):
            if kind == WAITING:
                print(f"Philosopher {position} is waiting")
            else:
                print(f"\nPhilosopher {position} is granted to eat")
                print(f"Philosopher {position} has finished eating")


if __name__ == "__main__":
    sys.exit(main())