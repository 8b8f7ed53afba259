"""Non-preemptive CPU scheduling: FCFS, SJF and a system/user two-level queue."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduledProcess:
    """One process as placed in a schedule."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    system: bool = False


@dataclass(frozen=True)
class Schedule:
    """Processes in the order they run, with their timings."""

    processes: tuple[ScheduledProcess, ...]

    def average_waiting(self) -> float:
        return sum(p.waiting for p in self.processes) / len(self.processes)

    def average_turnaround(self) -> float:
        return sum(p.turnaround for p in self.processes) / len(self.processes)


def _run(order: Iterable[tuple[int, int, bool]]) -> Schedule:
    processes = []
    elapsed = 0
    for pid, burst, system in order:
        processes.append(ScheduledProcess(pid, burst, elapsed, elapsed + burst, system))
        elapsed += burst
    if not processes:
        raise ValueError("at least one process is required")
    return Schedule(tuple(processes))


def fcfs(bursts: Iterable[int]) -> Schedule:
    """Run processes in the order given."""
    return _run((pid, burst, False) for pid, burst in enumerate(bursts, 1))


def sjf(bursts: Iterable[int]) -> Schedule:
    """Run processes shortest burst first (exchange sort, so ties may reorder)."""
    entries = list(enumerate(bursts, 1))
    for i in range(len(entries)):
        for j in range(i + 1, len(entries)):
            if entries[i][1] > entries[j][1]:
                entries[i], entries[j] = entries[j], entries[i]
    return _run((pid, burst, False) for pid, burst in entries)


def multilevel_queue(jobs: Iterable[tuple[int, int]]) -> Schedule:
    """Run system jobs (kind 1) before user jobs; each job is ``(kind, burst)``."""
    entries = list(enumerate(jobs, 1))
    system = [(pid, burst, True) for pid, (kind, burst) in entries if kind == 1]
    user = [(pid, burst, False) for pid, (kind, burst) in entries if kind != 1]
    return _run(system + user)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ossim-cpu", description="Simulate CPU scheduling.")
    parser.add_argument("algorithm", choices=["fcfs", "sjf", "multiqueue"])
    algorithm = parser.parse_args(argv).algorithm
    reader = (int(token) for line in sys.stdin for token in line.split())

    def ask(prompt: str) -> int:
        print(prompt, end="", flush=True)
        return next(reader)

    try:
        if algorithm == "multiqueue":
            count = ask("Enter no of processes: ")
            jobs = [
                (ask("Enter System/User process (1/0): "), ask("Enter burst time: "))
                for _ in range(count)
            ]
            schedule = multilevel_queue(jobs)
        else:
            count = ask("Enter number of processes: ")
            print("Enter burst time of processes in order:")
            bursts = [next(reader) for _ in range(count)]
            schedule = (fcfs if algorithm == "fcfs" else sjf)(bursts)
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    if algorithm == "multiqueue":
        print("Process\t System/User Process\t Burst Time\t Waiting Time\t Turn Around Time")
        for p in schedule.processes:
            print(f"{p.pid}\t\t{int(p.system)}\t\t{p.burst}\t\t{p.waiting}\t\t{p.turnaround}")
        print(f"\nAverage waiting time = {schedule.average_waiting():f}")
        print(f"Average turn around time = {schedule.average_turnaround():f}")
    else:
        print("\nProcess\t\tBurst Time\tTurn Around Time\tWaiting Time")
        for p in schedule.processes:
            print(f"{p.pid}\t\t{p.burst}\t\t{p.turnaround}\t\t\t{p.waiting}")
        if algorithm == "fcfs":
            print()
        print(f"Average turn around time = {schedule.average_turnaround():f}")
        print(f"Average wait time = {schedule.average_waiting():f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())