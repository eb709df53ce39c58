from pathlib import Path

from tardiness_tabu.search import tabu_search
from tardiness_tabu.visualization import plot_convergence, plot_schedule_gantt


def test_plots_are_written(tmp_path: Path, jobs) -> None:
    result = tabu_search(jobs, iterations=20)
    conv = plot_convergence(
        result.history, str(tmp_path / "charts" / "conv.png"), initial_cost=result.initial_cost
    )
    gantt = plot_schedule_gantt(
        result.best_schedule, str(tmp_path / "charts" / "gantt.png"), cost=result.best_cost
    )
    assert Path(conv).stat().st_size > 0
    assert Path(gantt).stat().st_size > 0
