"""Tabu search for single-machine total weighted tardiness.

Exports the data structures, cost model and the search entry point.
"""

from tardiness_tabu.cost import delta_cost, total_cost  # noqa: F401
from tardiness_tabu.models import Job, Schedule  # noqa: F401
from tardiness_tabu.search import NoMovePolicy, SearchResult, tabu_search  # noqa: F401
from tardiness_tabu.tabu import TabuMemory  # noqa: F401

__all__ = [
    "Job",
    "Schedule",
    "total_cost",
    "delta_cost",
    "TabuMemory",
    "NoMovePolicy",
    "SearchResult",
    "tabu_search",
]
