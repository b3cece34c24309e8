"""
Tests for search configuration loading and validation.
"""

import json
import logging

import pytest
import yaml

from agents.config import SearchConfig


def test_defaults():
    config = SearchConfig()
    assert config.depth_bound == 3
    assert config.time_budget_ms == 1800
    assert config.time_budget_s == pytest.approx(1.8)
    assert config.seed is None


@pytest.mark.parametrize("kwargs", [{"depth_bound": 0}, {"depth_bound": -2}, {"time_budget_ms": -1}])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_zero_budget_is_allowed():
    assert SearchConfig(time_budget_ms=0).time_budget_s == 0.0


def test_from_dict_ignores_unknown_keys():
    config = SearchConfig.from_dict({"depth_bound": 2, "learning_rate": 0.1})
    assert config.depth_bound == 2
    assert config.time_budget_ms == 1800


def test_yaml_file(tmp_path):
    path = tmp_path / "search.yaml"
    path.write_text(yaml.safe_dump({"depth_bound": 4, "time_budget_ms": 900, "seed": 5}))
    config = SearchConfig.from_file(path)
    assert config.to_dict() == {"depth_bound": 4, "time_budget_ms": 900, "seed": 5}


def test_empty_yaml_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert SearchConfig.from_file(path) == SearchConfig()


def test_save_json_then_load(tmp_path):
    path = tmp_path / "search.json"
    SearchConfig(depth_bound=2, time_budget_ms=250).save_to_file(path)
    assert json.loads(path.read_text())["time_budget_ms"] == 250
    assert SearchConfig.from_file(path) == SearchConfig(depth_bound=2, time_budget_ms=250)


def test_missing_and_unsupported_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        SearchConfig.from_file(tmp_path / "missing.yaml")

    path = tmp_path / "search.toml"
    path.write_text("depth_bound = 2")
    with pytest.raises(ValueError):
        SearchConfig.from_file(path)


def test_bundled_config_matches_defaults():
    from pathlib import Path
    path = Path(__file__).resolve().parent.parent / "configs" / "alphabeta.yaml"
    assert SearchConfig.from_file(path) == SearchConfig()


def test_log_config(caplog):
    logger = logging.getLogger("test_config")
    with caplog.at_level(logging.INFO, logger="test_config"):
        SearchConfig(depth_bound=2).log_config(logger)
    assert "Depth Bound: 2" in caplog.text
    assert "Time Budget: 1800 ms" in caplog.text
