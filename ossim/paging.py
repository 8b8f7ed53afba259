"""Page replacement: FIFO, least recently used and optimal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

Frames = tuple["int | None", ...]


@dataclass(frozen=True)
class ReplacementResult:
    """The frame contents after each page fault; ``None`` marks an empty frame."""

    snapshots: tuple[tuple[int | None, ...], ...]

    @property
    def faults(self) -> int:
        return len(self.snapshots)


def _check(frame_count: int) -> None:
    if frame_count <= 0:
        raise ValueError("frame count must be positive")


def fifo(pages: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page that was loaded earliest."""
    _check(frame_count)
    frames: list[int | None] = [None] * frame_count
    front = 0
    snapshots = []
    for page in pages:
        if page in frames:
            continue
        frames[front] = page
        front = (front + 1) % frame_count
        snapshots.append(tuple(frames))
    return ReplacementResult(tuple(snapshots))


def lru(pages: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page whose last use lies furthest back."""
    _check(frame_count)
    frames: list[int | None] = [None] * frame_count
    last_used = [-1] * frame_count
    snapshots = []
    for now, page in enumerate(pages):
        if page in frames:
            last_used[frames.index(page)] = now
            continue
        slot = min(range(frame_count), key=last_used.__getitem__)
        frames[slot] = page
        last_used[slot] = now
        snapshots.append(tuple(frames))
    return ReplacementResult(tuple(snapshots))


def _victim(pages: list[int], frames: list[int | None], start: int) -> int:
    chosen = None
    farthest = start
    for slot, page in enumerate(frames):
        try:
            next_use = pages.index(page, start)  # type: ignore[arg-type]
        except ValueError:
            return slot
        if next_use > farthest:
            farthest = next_use
            chosen = slot
    return 0 if chosen is None else chosen


def optimal(pages: Iterable[int], frame_count: int) -> ReplacementResult:
    """Replace the page not needed for the longest time; unused pages go first."""
    _check(frame_count)
    reference = list(pages)
    frames: list[int | None] = [None] * frame_count
    snapshots = []
    for now, page in enumerate(reference):
        if page in frames:
            continue
        if None in frames:
            slot = frames.index(None)
        else:
            slot = _victim(reference, frames, now + 1)
        frames[slot] = page
        snapshots.append(tuple(frames))
    return ReplacementResult(tuple(snapshots))


def _ints(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _print_result(name: str, result: ReplacementResult) -> None:
    print(f"\n{name} Page Replacement Process:")
    for number, frames in enumerate(result.snapshots, 1):
        cells = "".join("- " if page is None else f"{page} " for page in frames)
        print(f"PF No. {number:2d}: {cells}")
    print(f"{name} Page Faults: {result.faults}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ossim-paging", description="Compare page replacement algorithms."
    )
    parser.parse_args(argv)
    reader = _ints(sys.stdin)
    try:
        print("Enter the number of Frames: ", end="", flush=True)
        frame_count = next(reader)
        print("Enter the length of reference string: ", end="", flush=True)
        length = next(reader)
        print("Enter the reference string: ", end="", flush=True)
        pages = [next(reader) for _ in range(length)]
        results = [
            ("FIFO", fifo(pages, frame_count)),
            ("LRU", lru(pages, frame_count)),
            ("Optimal", optimal(pages, frame_count)),
        ]
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    for name, result in results:
        _print_result(name, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())