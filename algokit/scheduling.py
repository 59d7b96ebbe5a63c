"""Non-preemptive shortest-job-first CPU scheduling."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A job with its arrival time and the CPU time it needs."""

    id: int
    arrival_time: int
    burst_time: int


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the time it started and finished running."""

    process: Process
    start_time: int
    completion_time: int

    @property
    def waiting_time(self) -> int:
        """Time spent ready but not running."""
        return self.start_time - self.process.arrival_time

    @property
    def turnaround_time(self) -> int:
        """Time from arrival to completion."""
        return self.completion_time - self.process.arrival_time


@dataclass(frozen=True)
class Schedule:
    """Scheduled processes, listed in order of arrival."""

    entries: tuple[ScheduledProcess, ...]

    @property
    def total_waiting_time(self) -> int:
        return sum(entry.waiting_time for entry in self.entries)

    @property
    def average_waiting_time(self) -> float:
        return self.total_waiting_time / len(self.entries)


_DEMO_PROCESSES = (
    Process(1, 0, 6),
    Process(2, 1, 8),
    Process(3, 2, 7),
    Process(4, 3, 3),
)


def shortest_job_first(processes: Iterable[Process]) -> Schedule:
    """Run the processes one at a time, always picking the shortest ready job.

    Among ready jobs of equal burst time the one that arrived first wins. When
    no job is ready the clock advances to the next arrival.
    """
    ordered = sorted(processes, key=lambda process: process.arrival_time)
    if not ordered:
        raise ValueError("at least one process is required")
    if any(process.burst_time < 0 for process in ordered):
        raise ValueError("burst times must not be negative")

    pending = list(ordered)
    finished: dict[int, ScheduledProcess] = {}
    clock = 0
    while pending:
        ready = [p for p in pending if p.arrival_time <= clock]
        if not ready:
            clock = min(p.arrival_time for p in pending)
            continue
        chosen = min(ready, key=lambda process: process.burst_time)
        pending.remove(chosen)
        finished[id(chosen)] = ScheduledProcess(chosen, clock, clock + chosen.burst_time)
        clock += chosen.burst_time
    return Schedule(tuple(finished[id(process)] for process in ordered))


def format_schedule(schedule: Schedule) -> str:
    """Render the schedule as a tab-separated table with the average wait."""
    lines = ["Process\tArrival Time\tBurst Time\tCompletion Time\tWaiting Time\n"]
    for entry in schedule.entries:
        process = entry.process
        lines.append(
            f"P{process.id}\t{process.arrival_time}\t\t{process.burst_time}"
            f"\t\t{entry.completion_time}\t\t{entry.turnaround_time}\n"
        )
    lines.append(f"Average Waiting Time: {schedule.average_waiting_time:g}\n")
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Schedule the demonstration processes and print the table."""
    parser = argparse.ArgumentParser(description="Shortest-job-first scheduling demo.")
    parser.parse_args(argv)
    print(format_schedule(shortest_job_first(_DEMO_PROCESSES)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())