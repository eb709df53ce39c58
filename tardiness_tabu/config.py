"""Run configuration loaded from a YAML or JSON file.

Example (YAML)::

    instance: reference          # 'reference', 'generated' or a path to a job table
    generator: {n: 30, seed: 7}  # used when instance == 'generated'
    tabu:
      length: 11
      iterations: 200
      no_move_policy: skip       # skip | fail | aspiration
    output:
      console: true
      trace_csv: results/trace.csv
      charts_dir: results/charts
    log_level: INFO
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from tardiness_tabu.exceptions import ConfigError
from tardiness_tabu.search import DEFAULT_ITERATIONS, DEFAULT_TABU_LENGTH, NoMovePolicy


@dataclass(frozen=True)
class RunConfig:
    """Settings for one search run."""

    instance: str = "reference"
    generator_n: int = 15
    generator_seed: int = 0
    tabu_length: int = DEFAULT_TABU_LENGTH
    iterations: int = DEFAULT_ITERATIONS
    no_move_policy: NoMovePolicy = NoMovePolicy.SKIP
    console: bool = True
    trace_csv: Optional[str] = None
    charts_dir: Optional[str] = None
    log_level: str = "INFO"


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return value


def _int(section: Dict[str, Any], key: str, default: int, name: str) -> int:
    value = section.get(key, default)
    if isinstance(value, bool):
        raise ConfigError(f"{name}.{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name}.{key} must be an integer, got {value!r}") from e


def config_from_dict(cfg: Dict[str, Any]) -> RunConfig:
    """Validate a parsed config mapping and build a ``RunConfig``."""
    if not isinstance(cfg, dict):
        raise ConfigError("Config root must be a mapping")
    tabu_cfg = _section(cfg, "tabu")
    gen_cfg = _section(cfg, "generator")
    out_cfg = _section(cfg, "output")

    iterations = _int(tabu_cfg, "iterations", DEFAULT_ITERATIONS, "tabu")
    if iterations < 1:
        raise ConfigError(f"tabu.iterations must be >= 1, got {iterations}")
    tabu_length = _int(tabu_cfg, "length", DEFAULT_TABU_LENGTH, "tabu")
    if tabu_length < 0:
        raise ConfigError(f"tabu.length must be >= 0, got {tabu_length}")
    policy_name = str(tabu_cfg.get("no_move_policy", NoMovePolicy.SKIP.value)).lower()
    try:
        policy = NoMovePolicy(policy_name)
    except ValueError as e:
        choices = ", ".join(p.value for p in NoMovePolicy)
        raise ConfigError(f"tabu.no_move_policy must be one of: {choices}") from e

    generator_n = _int(gen_cfg, "n", 15, "generator")
    if generator_n < 1:
        raise ConfigError(f"generator.n must be >= 1, got {generator_n}")

    instance = str(cfg.get("instance", "reference"))
    return RunConfig(
        instance=instance,
        generator_n=generator_n,
        generator_seed=_int(gen_cfg, "seed", 0, "generator"),
        tabu_length=tabu_length,
        iterations=iterations,
        no_move_policy=policy,
        console=bool(out_cfg.get("console", True)),
        trace_csv=out_cfg.get("trace_csv"),
        charts_dir=out_cfg.get("charts_dir"),
        log_level=str(cfg.get("log_level", "INFO")).upper(),
    )


def load_config(config_file: str) -> RunConfig:
    """Load configuration from a YAML (``.yml``/``.yaml``) or JSON file."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    try:
        if config_file.endswith((".yml", ".yaml")):
            cfg = yaml.safe_load(text) or {}
        else:
            cfg = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot parse config {config_file}: {e}") from e
    return config_from_dict(cfg)
