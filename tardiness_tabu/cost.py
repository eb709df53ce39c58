"""Total weighted tardiness: full evaluation and O(1) adjacent-swap delta.

Swapping two adjacent jobs changes only their own completion times; every
job after the pair still finishes at the same moment because the sum of
processing times up to it is unchanged. ``delta_cost`` exploits this to score
a candidate move from the two jobs' local contributions alone.
"""

from __future__ import annotations

from typing import Iterable

from tardiness_tabu.models import Job


def job_cost(job: Job, completion: int) -> int:
    """Weighted tardiness of ``job`` finishing at ``completion``."""
    tardiness = completion - job.due_date
    if tardiness > 0:
        return tardiness * job.weight
    return 0


def completion_times(jobs: Iterable[Job]) -> list[int]:
    """Completion time of every position (prefix sums of processing times)."""
    times: list[int] = []
    elapsed = 0
    for job in jobs:
        elapsed += job.processing_time
        times.append(elapsed)
    return times


def total_cost(jobs: Iterable[Job]) -> int:
    """Total weighted tardiness of jobs processed in the given order from time 0."""
    elapsed = 0
    cost = 0
    for job in jobs:
        elapsed += job.processing_time
        cost += job_cost(job, elapsed)
    return cost


def delta_cost(job_a: Job, job_b: Job, current_cost: int, elapsed_before_a: int) -> int:
    """Cost of the schedule after swapping adjacent ``(job_a, job_b)``.

    Args:
        job_a: Job currently at position ``i``.
        job_b: Job currently at position ``i + 1``.
        current_cost: Total cost of the schedule before the swap.
        elapsed_before_a: Sum of processing times of positions ``0..i-1``.

    Returns:
        Total cost with the pair in order ``(job_b, job_a)``.
    """
    t = elapsed_before_a
    pair_end = t + job_a.processing_time + job_b.processing_time
    cost = current_cost
    cost -= job_cost(job_a, t + job_a.processing_time)
    cost -= job_cost(job_b, pair_end)
    cost += job_cost(job_b, t + job_b.processing_time)
    cost += job_cost(job_a, pair_end)
    return cost
