"""Real-time scheduling one time unit at a time: earliest deadline first and
rate monotonic."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Task:
    """A periodic task; ``deadline`` is the first absolute deadline (EDF only)."""

    execution: int
    period: int
    deadline: int | None = None

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError("task period must be positive")


@dataclass
class _Running:
    number: int
    execution: int
    period: int
    deadline: int
    remaining: int


def _exchange_sort(items: list[_Running], key: Callable[[_Running], int]) -> None:
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if key(items[i]) > key(items[j]):
                items[i], items[j] = items[j], items[i]


def _simulate(
    tasks: Iterable[Task], total_time: int, key: Callable[[_Running], int]
) -> list[int | None]:
    runners = [
        _Running(
            number=number,
            execution=task.execution,
            period=task.period,
            deadline=task.period if task.deadline is None else task.deadline,
            remaining=task.execution,
        )
        for number, task in enumerate(tasks, 1)
    ]
    timeline: list[int | None] = []
    for now in range(total_time):
        _exchange_sort(runners, key)
        chosen = next((r for r in runners if r.remaining > 0), None)
        if chosen is None:
            timeline.append(None)
        else:
            chosen.remaining -= 1
            timeline.append(chosen.number)
        tick = now + 1
        for runner in runners:
            if tick % runner.period == 0:
                runner.remaining = runner.execution
                runner.deadline = tick + runner.period
    return timeline


def edf_schedule(tasks: Iterable[Task], total_time: int) -> list[int | None]:
    """Return the task number (1-based) run at each time unit, ``None`` when idle.

    A task without a deadline starts with its period as deadline.
    """
    return _simulate(tasks, total_time, key=lambda r: r.deadline)


def rms_schedule(tasks: Iterable[Task], total_time: int) -> list[int | None]:
    """Return the task number (1-based) run at each time unit, ``None`` when idle."""
    return _simulate(tasks, total_time, key=lambda r: r.period)


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _ask(reader: Iterator[int], prompt: str) -> int:
    print(prompt, end="", flush=True)
    return next(reader)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-realtime", description="Simulate real-time task scheduling."
    )
    parser.add_argument("algorithm", choices=["edf", "rms"])
    args = parser.parse_args(argv)
    reader = _ints(sys.stdin)
    try:
        count = _ask(reader, "Enter number of tasks: ")
        total_time = _ask(reader, "Enter total execution time: ")
        tasks = []
        for number in range(1, count + 1):
            if args.algorithm == "edf":
                execution = _ask(
                    reader,
                    f"Enter execution time, deadline, and period for Task {number}: ",
                )
                deadline = next(reader)
                period = next(reader)
                tasks.append(Task(execution, period, deadline))
            else:
                execution = _ask(
                    reader, f"Enter execution time and period for Task {number}: "
                )
                tasks.append(Task(execution, next(reader)))
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    schedule = edf_schedule if args.algorithm == "edf" else rms_schedule
    for now, number in enumerate(schedule(tasks, total_time)):
        if number is None:
            print(f"Time {now}: Idle")
        else:
            print(f"Time {now}: Executing Task {number}")
    print(f"\nExecution completed for {total_time} seconds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())