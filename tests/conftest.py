"""Pytest configuration & custom summary hook.

Also ensures the project root is on sys.path (flat layout) and provides the
shared job fixtures.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'import tardiness_tabu.*' works
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from tardiness_tabu.instances import reference_jobs  # noqa: E402
from tardiness_tabu.models import Job  # noqa: E402


@pytest.fixture
def jobs() -> list[Job]:
    return reference_jobs()


@pytest.fixture
def two_jobs() -> list[Job]:
    # cost 21 in this order, 8 after one swap
    return [Job(3, 2, 1, 1), Job(2, 1, 5, 2)]


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Print pass/fail counts per test module, then the failing node ids."""
    per_module: dict[str, list[int]] = {}
    for outcome in ("passed", "failed", "error"):
        for rep in terminalreporter.stats.get(outcome, []):
            module = rep.nodeid.split("::", 1)[0]
            counts = per_module.setdefault(module, [0, 0])
            counts[0 if outcome == "passed" else 1] += 1
    if not per_module:
        return

    terminalreporter.section("Per-module summary", sep="=")
    width = max(len(m) for m in per_module)
    for module in sorted(per_module):
        ok, bad = per_module[module]
        terminalreporter.write_line(f"{module:<{width}}  passed={ok:<3d} failed={bad}")
    failed = terminalreporter.stats.get("failed", [])
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in failed:
            terminalreporter.write_line(f"  - {rep.nodeid}")
