"""Core data structures for single-machine weighted tardiness instances.

This module defines:
    Job      -- immutable job record (processing time, due date, weight, id).
    Schedule -- mutable machine order of jobs starting at time 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True, eq=False)
class Job:
    """Immutable single-machine job.

    Equality and hashing are by object identity, not by field values: two jobs
    built with identical numbers are still different jobs. Tabu memory relies
    on this when it matches recorded pairs.

    Attributes:
        processing_time: Time units consumed on the machine (> 0).
        due_date: Due date, any integer (may be below processing_time).
        weight: Tardiness cost multiplier (> 0).
        id: Positive job identifier used for display.
    """

    processing_time: int
    due_date: int
    weight: int
    id: int

    def __post_init__(self) -> None:
        if self.processing_time <= 0:
            raise ValueError(f"Job {self.id}: processing_time must be positive")
        if self.weight <= 0:
            raise ValueError(f"Job {self.id}: weight must be positive")
        if self.id <= 0:
            raise ValueError(f"Job id must be positive, got {self.id}")

    def tardiness(self, completion: int) -> int:
        """Return ``max(0, completion - due_date)``."""
        return max(0, completion - self.due_date)


class Schedule:
    """Machine processing order (a permutation of a fixed job set)."""

    __slots__ = ("_jobs",)

    def __init__(self, jobs: Iterable[Job]) -> None:
        self._jobs: list[Job] = list(jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def __getitem__(self, index: int) -> Job:
        return self._jobs[index]

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs)

    def __repr__(self) -> str:
        return f"Schedule({self.ids()})"

    def swap_adjacent(self, position: int) -> None:
        """Exchange jobs at ``position`` and ``position + 1`` in place."""
        if not 0 <= position < len(self._jobs) - 1:
            raise IndexError(f"No adjacent pair at position {position}")
        jobs = self._jobs
        jobs[position], jobs[position + 1] = jobs[position + 1], jobs[position]

    def copy(self) -> "Schedule":
        """Snapshot with independent storage (job references are shared)."""
        return Schedule(self._jobs)

    def ids(self) -> list[int]:
        return [job.id for job in self._jobs]

    def jobs(self) -> list[Job]:
        return list(self._jobs)
