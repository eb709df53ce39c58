"""Tabu search over the adjacent-swap neighborhood.

Notes:
    - Full best-of-neighborhood scan each iteration; the chosen move is
      applied even when it worsens the current cost.
    - Ties go to the lowest position (strict ``<`` while scanning left to right).
    - The pair created by a swap is recorded in its post-swap orientation, so
      the immediate swap back is forbidden while the entry stays in memory.
    - When every adjacent pair is tabu the ``NoMovePolicy`` decides the
      iteration's outcome.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from tardiness_tabu.cost import delta_cost, total_cost
from tardiness_tabu.exceptions import NoAdmissibleMoveError, SearchError
from tardiness_tabu.models import Job, Schedule
from tardiness_tabu.reporting import Reporter
from tardiness_tabu.tabu import TabuMemory, check_tabu_length

logger = logging.getLogger("tardiness_tabu")

DEFAULT_TABU_LENGTH = 11
DEFAULT_ITERATIONS = 200


class NoMovePolicy(str, enum.Enum):
    """What to do when all adjacent swaps are tabu.

    SKIP: leave schedule and cost unchanged for this iteration.
    FAIL: raise ``NoAdmissibleMoveError``.
    ASPIRATION: ignore the tabu memory for this iteration only.
    """

    SKIP = "skip"
    FAIL = "fail"
    ASPIRATION = "aspiration"


@dataclass
class SearchState:
    """Mutable state owned by one search run."""

    current: Schedule
    current_cost: int
    best: Schedule
    best_cost: int
    best_iteration: int = 0
    iteration: int = 0

    @classmethod
    def initial(cls, jobs: Sequence[Job]) -> "SearchState":
        schedule = Schedule(jobs)
        cost = total_cost(schedule)
        return cls(current=schedule, current_cost=cost, best=schedule.copy(), best_cost=cost)

    def update_best(self) -> bool:
        """Snapshot the current schedule if strictly better. Returns True if improved."""
        if self.current_cost < self.best_cost:
            self.best_cost = self.current_cost
            self.best = self.current.copy()
            self.best_iteration = self.iteration
            return True
        return False


@dataclass(frozen=True)
class IterationEvent:
    """Trace record emitted once per iteration.

    ``position`` is the swapped position, or None when the iteration was
    skipped because no move was admissible.
    """

    iteration: int
    schedule: tuple[int, ...]
    cost: int
    best_cost: int
    position: Optional[int]
    aspiration: bool = False


@dataclass
class SearchResult:
    best_schedule: Schedule
    best_cost: int
    best_iteration: int
    initial_cost: int
    iterations: int
    history: list[tuple[int, int]] = field(default_factory=list)

    @property
    def best_ids(self) -> list[int]:
        return self.best_schedule.ids()


def find_best_move(
    schedule: Schedule,
    current_cost: int,
    tabu: TabuMemory,
    ignore_tabu: bool = False,
) -> Optional[tuple[int, int]]:
    """Scan all adjacent positions and return ``(position, cost)`` of the best swap.

    Args:
        schedule: Current machine order.
        current_cost: Total cost of ``schedule``.
        tabu: Tabu memory gating candidate pairs.
        ignore_tabu: Evaluate tabu pairs too (aspiration).

    Returns:
        Lowest-cost admissible move (first position on ties), or None if no
        position is admissible.
    """
    best: Optional[tuple[int, int]] = None
    elapsed = 0
    for j in range(len(schedule) - 1):
        job_a = schedule[j]
        job_b = schedule[j + 1]
        if ignore_tabu or not tabu.contains(job_a, job_b):
            cost = delta_cost(job_a, job_b, current_cost, elapsed)
            if best is None or cost < best[1]:
                best = (j, cost)
        elapsed += job_a.processing_time
    return best


def search_step(
    state: SearchState,
    tabu: TabuMemory,
    policy: NoMovePolicy = NoMovePolicy.SKIP,
) -> IterationEvent:
    """Advance the search by one iteration and return its trace event."""
    state.iteration += 1
    it = state.iteration
    aspiration = False

    move = find_best_move(state.current, state.current_cost, tabu)
    if move is None:
        if policy is NoMovePolicy.FAIL:
            raise NoAdmissibleMoveError(it)
        if policy is NoMovePolicy.ASPIRATION:
            move = find_best_move(state.current, state.current_cost, tabu, ignore_tabu=True)
            aspiration = move is not None
        if move is None:
            logger.warning("[tabu] no admissible move iter=%d, schedule unchanged", it)

    position = None
    if move is not None:
        position, cost = move
        state.current.swap_adjacent(position)
        tabu.record(state.current[position], state.current[position + 1])
        state.current_cost = cost
        if state.update_best():
            logger.debug("[tabu] iter %d new best=%d", it, state.best_cost)
        logger.debug(
            "[tabu] iter %d swap pos=%d current=%d best=%d%s",
            it,
            position,
            state.current_cost,
            state.best_cost,
            " aspiration" if aspiration else "",
        )

    return IterationEvent(
        iteration=it,
        schedule=tuple(state.current.ids()),
        cost=state.current_cost,
        best_cost=state.best_cost,
        position=position,
        aspiration=aspiration,
    )


def tabu_search(
    jobs: Sequence[Job],
    tabu_length: int = DEFAULT_TABU_LENGTH,
    iterations: int = DEFAULT_ITERATIONS,
    reporter: Optional[Reporter] = None,
    no_move_policy: NoMovePolicy = NoMovePolicy.SKIP,
) -> SearchResult:
    """Minimise total weighted tardiness starting from the given job order.

    Args:
        jobs: Initial machine order.
        tabu_length: Tabu memory capacity, must be ``< n(n-1)/2``.
        iterations: Exact number of iterations to run (>= 1).
        reporter: Event sink receiving start, per-iteration and finish events.
        no_move_policy: Behaviour when every adjacent swap is tabu.

    Returns:
        SearchResult with the best schedule, its cost and the iteration it was
        found at (0 if the initial order was never beaten).

    Raises:
        TabuConfigError: If ``tabu_length`` is not below ``n(n-1)/2``.
        SearchError: If ``iterations`` < 1 or ``jobs`` is empty.
        NoAdmissibleMoveError: Under ``NoMovePolicy.FAIL`` when no move exists.
    """
    if not jobs:
        raise SearchError("Job list is empty")
    if iterations < 1:
        raise SearchError(f"iterations must be >= 1, got {iterations}")
    if len(jobs) > 1:
        check_tabu_length(tabu_length, len(jobs))
    reporter = reporter if reporter is not None else Reporter()
    policy = NoMovePolicy(no_move_policy)

    state = SearchState.initial(jobs)
    tabu = TabuMemory(tabu_length)
    initial_cost = state.current_cost
    logger.info(
        "[tabu] start jobs=%d tabu_length=%d iterations=%d initial=%d",
        len(jobs),
        tabu_length,
        iterations,
        initial_cost,
    )
    reporter.on_start(state.current.jobs(), initial_cost, iterations)

    history: list[tuple[int, int]] = []
    for _ in range(iterations):
        event = search_step(state, tabu, policy)
        history.append((event.cost, event.best_cost))
        reporter.on_iteration(event)

    result = SearchResult(
        best_schedule=state.best,
        best_cost=state.best_cost,
        best_iteration=state.best_iteration,
        initial_cost=initial_cost,
        iterations=iterations,
        history=history,
    )
    logger.info(
        "[tabu] done best=%d found at iter %d (initial=%d)",
        result.best_cost,
        result.best_iteration,
        initial_cost,
    )
    reporter.on_finish(result)
    return result
