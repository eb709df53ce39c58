#!/usr/bin/env python3
import argparse
import contextlib
import logging
import os
import sys
from typing import List

from tardiness_tabu.config import RunConfig, load_config
from tardiness_tabu.exceptions import TabuSearchError
from tardiness_tabu.instances import generate_instance, reference_jobs
from tardiness_tabu.models import Job
from tardiness_tabu.parser import load_jobs
from tardiness_tabu.reporting import (
    ConsoleReporter,
    CsvTraceReporter,
    HistoryReporter,
    MultiReporter,
)
from tardiness_tabu.search import SearchResult, tabu_search
from tardiness_tabu.visualization import plot_convergence, plot_schedule_gantt

logger = logging.getLogger("tardiness_tabu")


def load_instance(config: RunConfig) -> List[Job]:
    if config.instance == "reference":
        return reference_jobs()
    if config.instance == "generated":
        return generate_instance(config.generator_n, config.generator_seed)
    return load_jobs(config.instance)


def run(config: RunConfig) -> SearchResult:
    jobs = load_instance(config)
    logger.info(
        "Instance: %s jobs=%d total_processing=%d",
        config.instance,
        len(jobs),
        sum(j.processing_time for j in jobs),
    )
    history = HistoryReporter()
    reporters = [history]
    if config.console:
        reporters.append(ConsoleReporter())

    with contextlib.ExitStack() as stack:
        if config.trace_csv:
            os.makedirs(os.path.dirname(config.trace_csv) or ".", exist_ok=True)
            reporters.append(stack.enter_context(CsvTraceReporter(config.trace_csv)))
            logger.info("Writing iteration trace to %s", config.trace_csv)
        result = tabu_search(
            jobs,
            tabu_length=config.tabu_length,
            iterations=config.iterations,
            reporter=MultiReporter(*reporters),
            no_move_policy=config.no_move_policy,
        )

    if config.charts_dir:
        plot_convergence(
            result.history,
            os.path.join(config.charts_dir, "convergence.png"),
            initial_cost=result.initial_cost,
        )
        plot_schedule_gantt(
            result.best_schedule,
            os.path.join(config.charts_dir, "gantt_best.png"),
            cost=result.best_cost,
        )
    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Tabu search for single-machine total weighted tardiness"
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to a YAML/JSON run configuration (default: config.yaml)",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, TabuSearchError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("%s", e)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(config)
    except (TabuSearchError, OSError, ValueError) as e:
        logger.error("Run failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
