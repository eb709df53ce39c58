import pytest

from tardiness_tabu.cost import completion_times, delta_cost, job_cost, total_cost
from tardiness_tabu.models import Job, Schedule


def brute_force_cost(jobs: list[Job]) -> int:
    cost = 0
    for k, job in enumerate(jobs):
        completion = sum(j.processing_time for j in jobs[: k + 1])
        cost += job.weight * max(0, completion - job.due_date)
    return cost


def test_reference_initial_cost(jobs) -> None:
    assert total_cost(jobs) == 42048
    assert total_cost(jobs) == brute_force_cost(jobs)


def test_completion_times(jobs) -> None:
    times = completion_times(jobs)
    assert times[0] == 16
    assert times[2] == 34
    assert times[-1] == sum(j.processing_time for j in jobs) == 179


def test_job_cost_early_and_negative_due_date() -> None:
    assert job_cost(Job(5, 10, 3, 1), 10) == 0
    assert job_cost(Job(5, 10, 3, 1), 12) == 6
    assert job_cost(Job(4, -2, 2, 1), 4) == 12


def test_delta_matches_full_rescan_for_every_position(jobs) -> None:
    schedule = Schedule(jobs)
    base = total_cost(schedule)
    elapsed = 0
    for j in range(len(schedule) - 1):
        expected = schedule.copy()
        expected.swap_adjacent(j)
        got = delta_cost(schedule[j], schedule[j + 1], base, elapsed)
        assert got == total_cost(expected) == brute_force_cost(expected.jobs())
        elapsed += schedule[j].processing_time


def test_double_swap_restores_schedule_and_cost(jobs) -> None:
    schedule = Schedule(jobs)
    ids_before = schedule.ids()
    cost = total_cost(schedule)
    elapsed = sum(j.processing_time for j in jobs[:7])

    swapped_cost = delta_cost(schedule[7], schedule[8], cost, elapsed)
    schedule.swap_adjacent(7)
    back_cost = delta_cost(schedule[7], schedule[8], swapped_cost, elapsed)
    schedule.swap_adjacent(7)

    assert swapped_cost != cost
    assert back_cost == cost
    assert schedule.ids() == ids_before


@pytest.mark.parametrize("position", [-1, 14, 20])
def test_swap_adjacent_out_of_range(jobs, position: int) -> None:
    with pytest.raises(IndexError):
        Schedule(jobs).swap_adjacent(position)


def test_schedule_copy_is_independent(jobs) -> None:
    schedule = Schedule(jobs)
    snapshot = schedule.copy()
    schedule.swap_adjacent(0)
    assert snapshot.ids()[:2] == [2, 3]
    assert schedule.ids()[:2] == [3, 2]
    assert snapshot[0] is schedule[1]


def test_job_identity_semantics() -> None:
    a = Job(3, 4, 5, 1)
    b = Job(3, 4, 5, 1)
    assert a != b
    assert a == a
    assert len({a, b}) == 2


@pytest.mark.parametrize(
    "args",
    [
        (0, 5, 1, 1),  # non-positive processing time
        (3, 5, 0, 1),  # non-positive weight
        (3, 5, 1, 0),  # non-positive id
    ],
)
def test_job_validation(args) -> None:
    with pytest.raises(ValueError):
        Job(*args)
