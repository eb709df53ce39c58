import logging
import os
from typing import List, Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from tardiness_tabu.cost import completion_times, job_cost  # noqa: E402
from tardiness_tabu.models import Schedule  # noqa: E402

logger = logging.getLogger("tardiness_tabu")


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def plot_convergence(
    history: Sequence[Tuple[int, int]],
    filepath: str,
    initial_cost: Optional[int] = None,
    title: str = "Tabu search convergence",
) -> str:
    """Save current and best cost per iteration.

    Args:
        history: ``(current_cost, best_cost)`` for iterations 1..K.
        filepath: Output image path.
        initial_cost: Cost of the starting order, plotted at iteration 0.
    """
    iterations = list(range(1, len(history) + 1))
    current = [c for c, _ in history]
    best = [b for _, b in history]
    if initial_cost is not None:
        iterations.insert(0, 0)
        current.insert(0, initial_cost)
        best.insert(0, initial_cost)

    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    ax.plot(iterations, current, color="#1f77b4", linewidth=1.2, alpha=0.8, label="current")
    ax.step(iterations, best, where="post", color="#2ca02c", linewidth=2, label="best")
    ax.set_xlabel("Iteration", fontsize=12)
    ax.set_ylabel("Total weighted tardiness", fontsize=12)
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", frameon=False)

    if best:
        ax.annotate(
            f"Best: {best[-1]}",
            xy=(iterations[-1], best[-1]),
            xytext=(-60, 20),
            textcoords="offset points",
            bbox=dict(boxstyle="round,pad=0.3", facecolor="lightgreen", alpha=0.7),
            arrowprops=dict(arrowstyle="->", connectionstyle="arc3,rad=0"),
        )

    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    logger.info("Convergence plot saved as: %s", filepath)
    return filepath


def plot_schedule_gantt(
    schedule: Schedule,
    filepath: str,
    cost: Optional[int] = None,
    show_legend: Optional[bool] = None,
) -> str:
    """Single-machine Gantt chart; tardy jobs are hatched, due dates marked with ticks."""
    n = len(schedule)
    ends = completion_times(schedule)
    cmap = matplotlib.colormaps["tab20"]
    colors = [cmap(i % 20) for i in range(n)]

    fig, ax = plt.subplots(figsize=(min(10 + n * 0.1, 18), 3), constrained_layout=True)
    for k, job in enumerate(schedule):
        start = ends[k] - job.processing_time
        tardy = job_cost(job, ends[k]) > 0
        ax.barh(
            0,
            job.processing_time,
            left=start,
            height=0.6,
            color=colors[k],
            alpha=0.85,
            edgecolor="black",
            linewidth=0.6,
            hatch="//" if tardy else None,
        )
        ax.text(start + job.processing_time / 2, 0, str(job.id), ha="center", va="center", fontsize=8)
        ax.plot([job.due_date, job.due_date], [0.32, 0.42], color=colors[k], linewidth=1.5)

    if cost is None:
        title = "Gantt Chart"
    else:
        title = f"Gantt Chart - total weighted tardiness = {cost}"
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Time", fontsize=12)
    ax.set_yticks([0])
    ax.set_yticklabels(["M0"])
    ax.set_ylim(-0.5, 0.6)
    ax.grid(True, alpha=0.25, axis="x", linestyle="--", linewidth=0.7)

    # auto policy: only show when jobs <= 40
    if show_legend is None:
        show_legend = n <= 40
    if show_legend:
        handles: List[Patch] = [
            Patch(facecolor=colors[k], edgecolor="black", label=f"Job {job.id}")
            for k, job in enumerate(schedule)
        ]
        handles.append(Patch(facecolor="white", edgecolor="black", hatch="//", label="tardy"))
        ax.legend(
            handles=handles,
            bbox_to_anchor=(1.02, 1),
            loc="upper left",
            borderaxespad=0.0,
            fontsize=8,
            frameon=False,
            ncol=1 if n <= 25 else 2,
        )

    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    logger.info("Gantt chart saved as: %s", filepath)
    return filepath
