"""Built-in instances for the weighted tardiness problem."""

import random
from typing import List

from tardiness_tabu.models import Job

# (processing_time, due_date, weight, id) in initial machine order
REFERENCE_TABLE = (
    (16, 67, 45, 2),
    (6, 105, 35, 3),
    (12, 8, 80, 15),
    (19, 124, 28, 6),
    (9, 77, 1, 5),
    (20, 202, 70, 10),
    (13, 157, 14, 8),
    (1, 194, 21, 7),
    (5, 5, 69, 13),
    (18, 7, 62, 14),
    (4, 36, 21, 1),
    (5, 53, 73, 4),
    (19, 61, 23, 12),
    (12, 25, 76, 9),
    (20, 43, 51, 11),
)


def reference_jobs() -> List[Job]:
    """Fresh Job objects for the 15-job reference instance."""
    return [Job(pj, dj, wj, job_id) for pj, dj, wj, job_id in REFERENCE_TABLE]


def generate_instance(
    n: int,
    seed: int = 0,
    tardiness_factor: float = 0.6,
    due_date_range: float = 0.6,
) -> List[Job]:
    """Generate a random instance in the usual OR-Library style.

    Processing times are drawn from 1..20 and weights from 1..10; due dates
    come from ``P * [1 - TF - RDD/2, 1 - TF + RDD/2]`` where ``P`` is the total
    processing time. Job ids are 1..n in generation order.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    rng = random.Random(seed)
    processing_times = [rng.randint(1, 20) for _ in range(n)]
    weights = [rng.randint(1, 10) for _ in range(n)]
    total = sum(processing_times)
    low = int(total * (1 - tardiness_factor - due_date_range / 2))
    high = int(total * (1 - tardiness_factor + due_date_range / 2))
    low = max(0, low)
    high = max(low, high)
    return [
        Job(processing_times[i], rng.randint(low, high), weights[i], i + 1) for i in range(n)
    ]
