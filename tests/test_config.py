import json
from pathlib import Path

import pytest

from tardiness_tabu.config import RunConfig, config_from_dict, load_config
from tardiness_tabu.exceptions import ConfigError
from tardiness_tabu.search import NoMovePolicy


def test_defaults_from_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("")
    assert load_config(str(path)) == RunConfig()


def test_yaml_values(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text(
        "instance: generated\n"
        "generator: {n: 20, seed: 4}\n"
        "tabu:\n  length: 7\n  iterations: 50\n  no_move_policy: Aspiration\n"
        "output:\n  console: false\n  trace_csv: out/trace.csv\n"
        "log_level: debug\n"
    )
    cfg = load_config(str(path))
    assert cfg.instance == "generated"
    assert (cfg.generator_n, cfg.generator_seed) == (20, 4)
    assert (cfg.tabu_length, cfg.iterations) == (7, 50)
    assert cfg.no_move_policy is NoMovePolicy.ASPIRATION
    assert cfg.console is False
    assert cfg.trace_csv == "out/trace.csv"
    assert cfg.charts_dir is None
    assert cfg.log_level == "DEBUG"


def test_json_config(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"tabu": {"length": 3, "iterations": 10}}))
    cfg = load_config(str(path))
    assert (cfg.tabu_length, cfg.iterations) == (3, 10)


def test_missing_file() -> None:
    with pytest.raises(FileNotFoundError):
        load_config("does/not/exist.yaml")


def test_unparsable_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("tabu: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(str(path))


@pytest.mark.parametrize(
    "cfg",
    [
        {"tabu": {"iterations": 0}},
        {"tabu": {"length": -1}},
        {"tabu": {"length": "eleven"}},
        {"tabu": {"iterations": True}},
        {"tabu": {"no_move_policy": "restart"}},
        {"tabu": [1, 2]},
        {"generator": {"n": 0}},
        ["not", "a", "mapping"],
    ],
)
def test_invalid_values(cfg) -> None:
    with pytest.raises(ConfigError):
        config_from_dict(cfg)
