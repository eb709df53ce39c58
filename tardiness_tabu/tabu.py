"""Fixed-capacity tabu memory of recently created adjacencies."""

from __future__ import annotations

from typing import Optional

from tardiness_tabu.exceptions import TabuConfigError
from tardiness_tabu.models import Job

TabuPair = tuple[Job, Job]


def max_tabu_length(jobs_number: int) -> int:
    """Largest legal tabu length for ``jobs_number`` jobs: ``n(n-1)/2 - 1``."""
    return jobs_number * (jobs_number - 1) // 2 - 1


def check_tabu_length(capacity: int, jobs_number: int) -> None:
    """Reject tabu lengths that could forbid every adjacent swap at once.

    Raises:
        TabuConfigError: If ``capacity`` is negative or not strictly below
            ``n(n-1)/2``.
    """
    if capacity < 0:
        raise TabuConfigError(f"Tabu length must be non-negative, got {capacity}")
    bound = jobs_number * (jobs_number - 1) // 2
    if capacity >= bound:
        raise TabuConfigError(
            f"Tabu list is too long: length {capacity} must be < {bound} "
            f"for {jobs_number} jobs"
        )


class TabuMemory:
    """Ring buffer of ordered ``(first, second)`` job pairs.

    ``record`` overwrites the slot under the write cursor and advances it,
    wrapping to 0, so the oldest pair is evicted once the ring is full. Lookups
    compare both jobs by identity. A capacity of 0 forbids nothing.
    """

    __slots__ = ("_slots", "_cursor")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise TabuConfigError(f"Tabu length must be non-negative, got {capacity}")
        self._slots: list[Optional[TabuPair]] = [None] * capacity
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return sum(1 for entry in self._slots if entry is not None)

    def contains(self, job_a: Job, job_b: Job) -> bool:
        for entry in self._slots:
            if entry is not None and entry[0] is job_a and entry[1] is job_b:
                return True
        return False

    def record(self, job_a: Job, job_b: Job) -> None:
        if not self._slots:
            return
        self._slots[self._cursor] = (job_a, job_b)
        self._cursor = (self._cursor + 1) % len(self._slots)

    def entries(self) -> list[TabuPair]:
        """Occupied entries, oldest first."""
        ordered = self._slots[self._cursor:] + self._slots[: self._cursor]
        return [entry for entry in ordered if entry is not None]
