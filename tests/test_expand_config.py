from pathlib import Path

import pytest

from argfile.core.expand.expand_config import (
    DEFAULT_ITERATION_LIMIT,
    ConfigError,
    ExpandConfig,
    load_and_merge,
    load_config_file,
)


def test_defaults_without_file():
    cfg = load_and_merge(None)
    assert cfg == ExpandConfig()
    assert cfg.iteration_limit == DEFAULT_ITERATION_LIMIT == 2000
    assert cfg.log_level == "WARNING"


def test_load_example_config():
    cfg = load_and_merge("examples/argfile.yaml")
    assert cfg.iteration_limit == 50
    assert cfg.log_level == "INFO"


def test_overrides_win_over_file(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.write_text("iteration_limit: 10\nlog_level: debug\n", encoding="utf-8")
    cfg = load_and_merge(str(p), iteration_limit=7)
    assert cfg.iteration_limit == 7
    assert cfg.log_level == "DEBUG"


def test_empty_file_is_defaults(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config_file(p) == {}


@pytest.mark.parametrize(
    "text",
    [
        "- a list\n",
        "iteration_limit: 0\n",
        "iteration_limit: true\n",
        "iteration_limit: '5'\n",
        "log_level: LOUD\n",
        "unknown: 1\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str):
    p = tmp_path / "cfg.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(p)


def test_missing_config_file():
    with pytest.raises(FileNotFoundError):
        load_and_merge("examples/does-not-exist.yaml")


def test_invalid_override():
    with pytest.raises(ConfigError):
        load_and_merge(None, iteration_limit=-1)


def test_yaml_syntax_error_is_config_error(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.write_text("log_level: 'unterminated\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(p)


def test_directory_is_config_error(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config_file(tmp_path)
