from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml


DEFAULT_ITERATION_LIMIT = 2000
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ExpandConfig:
    iteration_limit: int = DEFAULT_ITERATION_LIMIT
    log_level: str = "WARNING"


class ConfigError(ValueError):
    pass


def _check_limit(v: Any) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(v, bool) or not isinstance(v, int) or v < 1:
        raise ConfigError("iteration_limit must be a positive integer")
    return v


def _check_level(v: Any) -> str:
    if not isinstance(v, str) or v.strip().upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
    return v.strip().upper()


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load expansion settings from a YAML file.

    Format:
      iteration_limit: 2000
      log_level: WARNING

    Returns only the keys present in the file, already validated.
    """
    p = Path(path)
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except IsADirectoryError as e:
        raise ConfigError(f"config path is a directory: {p}") from e
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"config file is not valid YAML: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("config file must be a mapping")

    out: dict[str, Any] = {}
    for k, v in raw.items():
        if k == "iteration_limit":
            out[k] = _check_limit(v)
        elif k == "log_level":
            out[k] = _check_level(v)
        else:
            raise ConfigError(f"unknown config key: {k}")
    return out


def load_and_merge(
    config_file: str | None,
    *,
    iteration_limit: int | None = None,
    log_level: str | None = None,
) -> ExpandConfig:
    """Layer defaults, then the config file, then explicit overrides."""
    cfg = ExpandConfig()
    if config_file:
        cfg = replace(cfg, **load_config_file(config_file))
    if iteration_limit is not None:
        cfg = replace(cfg, iteration_limit=_check_limit(iteration_limit))
    if log_level is not None:
        cfg = replace(cfg, log_level=_check_level(log_level))
    return cfg
