"""Simulated CPU scheduling: shortest job first, shortest remaining time, round robin.

Time advances in unit ticks from zero. A process arriving at tick ``t`` may
start at ``t``; the work of each tick is accounted at the start of the next.
"""

from __future__ import annotations

import argparse
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import count
from pathlib import Path
from typing import Optional

MAX_PROCESSES = 100

DEFAULT_OUTPUTS = {
    "sjf": "ans1.txt",
    "srtf": "ans2.txt",
    "rr": "ans3-2.txt",
}


@dataclass(frozen=True)
class Process:
    """Timing of one finished process."""

    id: int
    arrival: int
    burst: int
    waiting: int
    turnaround: int


@dataclass(frozen=True)
class ScheduleResult:
    """Finished processes, in input order."""

    processes: list[Process]

    @property
    def average_waiting(self) -> float:
        return sum(p.waiting for p in self.processes) / len(self.processes)

    @property
    def average_turnaround(self) -> float:
        return sum(p.turnaround for p in self.processes) / len(self.processes)


def format_average(value: float) -> str:
    """Format with five decimals, dropping trailing zeros and a bare point."""
    return f"{value:.5f}".rstrip("0").rstrip(".")


def _validate(arrivals: Iterable[int], bursts: Iterable[int]) -> tuple[list[int], list[int]]:
    arrivals = list(arrivals)
    bursts = list(bursts)
    if len(arrivals) != len(bursts):
        raise ValueError("arrivals and bursts must have the same length")
    if not arrivals:
        raise ValueError("at least one process is needed")
    if len(arrivals) > MAX_PROCESSES:
        raise ValueError(f"at most {MAX_PROCESSES} processes are supported")
    if any(arrival < 0 for arrival in arrivals):
        raise ValueError("arrival times must be non-negative")
    if any(burst < 1 for burst in bursts):
        raise ValueError("burst times must be at least 1")
    return arrivals, bursts


def _arrivals_by_time(arrivals: Sequence[int]) -> dict[int, list[int]]:
    by_time: dict[int, list[int]] = defaultdict(list)
    for pid, arrival in enumerate(arrivals):
        by_time[arrival].append(pid)
    return by_time


def _result(arrivals: Sequence[int], bursts: Sequence[int], completed: dict[int, int]) -> ScheduleResult:
    return ScheduleResult(
        [
            Process(
                id=pid,
                arrival=arrival,
                burst=burst,
                waiting=completed[pid] - arrival - burst,
                turnaround=completed[pid] - arrival,
            )
            for pid, (arrival, burst) in enumerate(zip(arrivals, bursts))
        ]
    )


def sjf(arrivals: Iterable[int], bursts: Iterable[int]) -> ScheduleResult:
    """Non-preemptive shortest job first; ties go to the earlier arrival."""
    arrivals, bursts = _validate(arrivals, bursts)
    arriving = _arrivals_by_time(arrivals)
    remain = list(bursts)
    ready: list[int] = []
    running: Optional[int] = None
    completed: dict[int, int] = {}

    for time in count():
        if len(completed) == len(arrivals):
            break
        ready.extend(arriving.get(time, ()))
        if running is not None:
            remain[running] -= 1
            if remain[running] == 0:
                completed[running] = time
                running = None
        if running is None and ready:
            running = min(ready, key=lambda pid: (bursts[pid], arrivals[pid], pid))
            ready.remove(running)
    return _result(arrivals, bursts, completed)


def srtf(arrivals: Iterable[int], bursts: Iterable[int]) -> ScheduleResult:
    """Preemptive scheduling by remaining time.

    The waiting process with the shortest burst takes the CPU when its
    remaining time is shorter than that of the running process.
    """
    arrivals, bursts = _validate(arrivals, bursts)
    arriving = _arrivals_by_time(arrivals)
    remain = list(bursts)
    ready: dict[int, int] = {}
    running: Optional[int] = None
    completed: dict[int, int] = {}

    def shortest() -> int:
        return min(ready, key=lambda pid: (bursts[pid], pid))

    for time in count():
        if len(completed) == len(arrivals):
            break
        for pid in arriving.get(time, ()):
            ready[pid] = bursts[pid]
        if running is not None:
            remain[running] -= 1
            if remain[running] == 0:
                completed[running] = time
                running = None
            elif ready:
                candidate = shortest()
                if ready[candidate] < remain[running]:
                    del ready[candidate]
                    ready[running] = remain[running]
                    running = candidate
        if running is None and ready:
            running = shortest()
            del ready[running]
    return _result(arrivals, bursts, completed)


def round_robin(arrivals: Iterable[int], bursts: Iterable[int], quantum: int) -> ScheduleResult:
    """Round robin with a fixed time ``quantum``, first come first served."""
    arrivals, bursts = _validate(arrivals, bursts)
    if quantum < 1:
        raise ValueError("quantum must be at least 1")
    arriving = _arrivals_by_time(arrivals)
    remain = list(bursts)
    queue: deque[int] = deque()
    running: Optional[int] = None
    slice_left = quantum
    completed: dict[int, int] = {}

    for time in count():
        if len(completed) == len(arrivals):
            break
        queue.extend(arriving.get(time, ()))
        if running is not None:
            slice_left -= 1
            remain[running] -= 1
            if remain[running] == 0:
                completed[running] = time
                running = None
                slice_left = quantum
            elif slice_left == 0:
                queue.append(running)
                running = queue.popleft()
                slice_left = quantum
        if running is None and queue:
            running = queue.popleft()
            slice_left = quantum
    return _result(arrivals, bursts, completed)


def parse_input(text: str, with_quantum: bool = False) -> tuple[list[int], list[int], Optional[int]]:
    """Read a count, the arrival times, the burst times and optionally a quantum."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"input holds a non-integer token: {exc}") from None
    if not numbers:
        raise ValueError("input is empty")
    n = numbers[0]
    if n < 0:
        raise ValueError("process count must be non-negative")
    needed = 1 + 2 * n + (1 if with_quantum else 0)
    if len(numbers) < needed:
        raise ValueError(f"expected {needed} numbers, found {len(numbers)}")
    arrivals = numbers[1:1 + n]
    bursts = numbers[1 + n:1 + 2 * n]
    quantum = numbers[1 + 2 * n] if with_quantum else None
    return arrivals, bursts, quantum


def render_result(result: ScheduleResult) -> str:
    """Render per-process waiting and turnaround times, then both averages."""
    lines = [f"{p.waiting} {p.turnaround}" for p in result.processes]
    lines.append(format_average(result.average_waiting))
    lines.append(format_average(result.average_turnaround))
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a CPU scheduling algorithm.")
    parser.add_argument("algorithm", choices=sorted(DEFAULT_OUTPUTS), help="scheduling algorithm")
    parser.add_argument("input", type=Path, help="file with the process description")
    parser.add_argument("-o", "--output", type=Path, help="file to write the results to")
    args = parser.parse_args(argv)

    with_quantum = args.algorithm == "rr"
    arrivals, bursts, quantum = parse_input(args.input.read_text(), with_quantum)
    if args.algorithm == "sjf":
        result = sjf(arrivals, bursts)
    elif args.algorithm == "srtf":
        result = srtf(arrivals, bursts)
    else:
        result = round_robin(arrivals, bursts, quantum)

    output = args.output if args.output is not None else Path(DEFAULT_OUTPUTS[args.algorithm])
    output.write_text(render_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())