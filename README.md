# ossim

Small, self-contained simulations of the algorithms usually met in an
operating-systems course. Each is a library function or class and an
interactive command that reads whitespace-separated integers from standard
input.

## What is included

| Area | Module | Public names |
| --- | --- | --- |
| CPU scheduling (FCFS, SJF, multilevel queue) | `ossim.cpu_scheduling` | `fcfs`, `sjf`, `multilevel_queue`, `Schedule`, `ScheduledProcess` |
| Real-time scheduling (EDF, rate monotonic) | `ossim.realtime` | `edf_schedule`, `rms_schedule`, `Task` |
| Deadlock avoidance (Banker's algorithm) | `ossim.bankers` | `check_safety`, `SafetyResult` |
| Bounded-buffer producer/consumer | `ossim.prodcons` | `BoundedBuffer`, `BufferEmptyError`, `BufferFullError` |
| Contiguous memory allocation | `ossim.memory` | `first_fit`, `best_fit`, `worst_fit` |
| Page replacement (FIFO, LRU, optimal) | `ossim.paging` | `fifo`, `lru`, `optimal`, `ReplacementResult` |
| Sequential disk allocation | `ossim.disk` | `SequentialDisk` |
| Dining philosophers | `ossim.dining` | `one_at_a_time`, `two_at_a_time`, `WAITING`, `EATING` |

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
from ossim.cpu_scheduling import fcfs, sjf, multilevel_queue
from ossim.realtime import Task, edf_schedule, rms_schedule
from ossim.bankers import check_safety
from ossim.prodcons import BoundedBuffer, BufferEmptyError
from ossim.memory import first_fit, best_fit, worst_fit
from ossim.paging import fifo, lru, optimal
from ossim.disk import SequentialDisk
from ossim.dining import one_at_a_time, two_at_a_time

# Schedules hold ScheduledProcess entries (pid, burst, waiting, turnaround, system).
schedule = sjf([6, 8, 7, 3])
print(schedule.average_waiting(), schedule.average_turnaround())
# Jobs are (kind, burst); kind 1 is a system job and runs before user jobs.
print(multilevel_queue([(0, 5), (1, 3), (0, 2)]).processes)

# One entry per time unit: the 1-based task number, or None when idle.
print(rms_schedule([Task(execution=1, period=4), Task(execution=2, period=6)], 12))
print(edf_schedule([Task(execution=1, period=4, deadline=4)], 8))

result = check_safety(
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
    available=[3, 3, 2],
)
print(result.safe, result.sequence)

buffer = BoundedBuffer(20)
buffer.produce()          # returns 1
buffer.consume()          # returns 1
try:
    buffer.consume()
except BufferEmptyError:
    print("buffer is empty")

# Per process: the 0-based block index, or None when it does not fit.
print(best_fit([100, 500, 200, 300, 600], [212, 417, 112, 426]))

pages = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
for algorithm in (fifo, lru, optimal):
    print(algorithm.__name__, algorithm(pages, 3).faults)

disk = SequentialDisk(10)
print(disk.allocate(4), disk.allocate(8), disk.blocks)

print(two_at_a_time(5, [1, 3, 5]))
```

Invalid input raises `ValueError`: an empty process list, a task period that
is not positive, mismatched Banker's matrices, a frame count or buffer
capacity that is not positive, a negative disk or file size, or a
philosopher position outside `1..total` or listed twice.

## Commands

Installing the package provides one command per simulation. Each prompts
for its input on the terminal and prints the result:

```
ossim-cpu fcfs         # first come, first served
ossim-cpu sjf          # shortest job first
ossim-cpu multiqueue   # system jobs before user jobs
ossim-realtime edf     # earliest deadline first
ossim-realtime rms     # rate monotonic
ossim-bankers          # Banker's algorithm safety check
ossim-prodcons         # producer/consumer on a 20-item buffer
ossim-memory           # first-, best- and worst-fit allocation
ossim-paging           # FIFO, LRU and optimal page replacement
ossim-disk             # sequential file allocation on a disk
ossim-dining           # dining philosophers
```

Input may also be piped, for example `echo "4 6 8 7 3" | ossim-cpu sjf`.

## What it does not do

These are step-by-step simulations run in a single thread. The
producer/consumer and dining-philosophers modules do not start threads or
use real locks; they model the order in which items are produced and
consumed and in which philosophers wait and eat. Scheduling works in whole
time units, and nothing is saved between runs.