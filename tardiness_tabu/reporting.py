"""Event sinks for the search trace.

The search loop calls ``on_start`` once (with the iteration budget),
``on_iteration`` after every iteration (before the next one starts) and
``on_finish`` once. Reporters never influence the search.
"""

from __future__ import annotations

import csv
import sys
from typing import IO, TYPE_CHECKING, Optional, Sequence

from tardiness_tabu.models import Job

if TYPE_CHECKING:  # pragma: no cover
    from tardiness_tabu.search import IterationEvent, SearchResult


class Reporter:
    """No-op base reporter."""

    def on_start(self, jobs: Sequence[Job], cost: int, iterations: int) -> None:
        pass

    def on_iteration(self, event: "IterationEvent") -> None:
        pass

    def on_finish(self, result: "SearchResult") -> None:
        pass


class MultiReporter(Reporter):
    """Forward every event to several reporters, in order."""

    def __init__(self, *reporters: Reporter) -> None:
        self.reporters = list(reporters)

    def on_start(self, jobs: Sequence[Job], cost: int, iterations: int) -> None:
        for r in self.reporters:
            r.on_start(jobs, cost, iterations)

    def on_iteration(self, event: "IterationEvent") -> None:
        for r in self.reporters:
            r.on_iteration(event)

    def on_finish(self, result: "SearchResult") -> None:
        for r in self.reporters:
            r.on_finish(result)


class HistoryReporter(Reporter):
    """Keep the whole trace in memory (tests and plotting)."""

    def __init__(self) -> None:
        self.jobs: list[Job] = []
        self.initial_cost: Optional[int] = None
        self.iterations: Optional[int] = None
        self.events: list["IterationEvent"] = []
        self.result: Optional["SearchResult"] = None

    def on_start(self, jobs: Sequence[Job], cost: int, iterations: int) -> None:
        self.jobs = list(jobs)
        self.initial_cost = cost
        self.iterations = iterations

    def on_iteration(self, event: "IterationEvent") -> None:
        self.events.append(event)

    def on_finish(self, result: "SearchResult") -> None:
        self.result = result

    def costs(self) -> list[int]:
        return [e.cost for e in self.events]

    def best_costs(self) -> list[int]:
        return [e.best_cost for e in self.events]


def _width(values: Sequence[int]) -> int:
    return max((len(str(v)) for v in values), default=1)


class ConsoleReporter(Reporter):
    """Plain-text trace::

        Initial schedule (Id: Pj, Dj, Wj):
         2: 16,  67, 45
        ...
        Fitness: 42048

        Iteration step: best schedule, (fitness):
          0:  2,  3, 15, ..., (42048)
          1:  2,  3, 15, ..., (40880)
        ...

        Best schedule:
         57:  ..., (N)

    Numeric columns are padded to the widest value of the instance; the
    iteration column to the width of the run's iteration budget.
    """

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.iter_width = 1
        self.id_width = 1

    def _line(self, iteration: int, ids: Sequence[int], cost: int) -> str:
        head = f"{iteration:>{self.iter_width}d}: "
        body = "".join(f"{job_id:>{self.id_width}d}, " for job_id in ids)
        return f"{head}{body}({cost})"

    def _write(self, text: str) -> None:
        print(text, file=self.stream)

    def on_start(self, jobs: Sequence[Job], cost: int, iterations: int) -> None:
        self.iter_width = len(str(iterations))
        self.id_width = _width([j.id for j in jobs])
        pj_w = _width([j.processing_time for j in jobs])
        dj_w = _width([j.due_date for j in jobs])
        wj_w = _width([j.weight for j in jobs])
        lines = ["Initial schedule (Id: Pj, Dj, Wj):"]
        for j in jobs:
            lines.append(
                f"{j.id:>{self.id_width}d}: {j.processing_time:>{pj_w}d}, "
                f"{j.due_date:>{dj_w}d}, {j.weight:>{wj_w}d}"
            )
        lines.append(f"Fitness: {cost}")
        lines.append("")
        lines.append("Iteration step: best schedule, (fitness):")
        lines.append(self._line(0, [j.id for j in jobs], cost))
        self._write("\n".join(lines))

    def on_iteration(self, event: "IterationEvent") -> None:
        self._write(self._line(event.iteration, event.schedule, event.cost))

    def on_finish(self, result: "SearchResult") -> None:
        self._write("\nBest schedule:")
        self._write(self._line(result.best_iteration, result.best_ids, result.best_cost))
        self.stream.flush()


class CsvTraceReporter(Reporter):
    """Write one CSV row per iteration; use as a context manager.

    Columns: ``iteration,current_cost,best_cost,position,schedule`` where
    ``schedule`` is the space-separated id sequence and ``position`` is empty
    for iterations without a move. Row 0 holds the initial order.
    """

    HEADER = ("iteration", "current_cost", "best_cost", "position", "schedule")

    def __init__(self, path: str) -> None:
        self.path = path
        self._file: Optional[IO[str]] = None
        self._writer = None

    def __enter__(self) -> "CsvTraceReporter":
        self._file = open(self.path, "w", encoding="utf-8", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(self.HEADER)
        return self

    def __exit__(self, *exc) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _row(self, row: Sequence[object]) -> None:
        if self._writer is None:
            raise RuntimeError("CsvTraceReporter used outside of a 'with' block")
        self._writer.writerow(row)
        self._file.flush()

    def on_start(self, jobs: Sequence[Job], cost: int, iterations: int) -> None:
        self._row([0, cost, cost, "", " ".join(str(j.id) for j in jobs)])

    def on_iteration(self, event: "IterationEvent") -> None:
        position = "" if event.position is None else event.position
        self._row(
            [
                event.iteration,
                event.cost,
                event.best_cost,
                position,
                " ".join(map(str, event.schedule)),
            ]
        )
