"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

FRONTIER_STRATEGIES = ("indexed", "lazy")


@dataclass
class SearchConfig:
    """Tuning knobs for a single A* search."""

    initial_capacity: int = 100
    max_capacity: Optional[int] = None
    max_iterations: Optional[int] = None
    frontier_strategy: str = "indexed"


@dataclass
class LoggingConfig:
    """Log levels applied by :mod:`grid_astar.main`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    logging: LoggingConfig


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    strategy = str(search_data.get("frontier_strategy", "indexed")).lower()
    if strategy not in FRONTIER_STRATEGIES:
        raise ValueError(f"Unknown frontier_strategy: {strategy}")
    search = SearchConfig(
        initial_capacity=int(search_data.get("initial_capacity", 100)),
        max_capacity=_optional_int(search_data.get("max_capacity")),
        max_iterations=_optional_int(search_data.get("max_iterations")),
        frontier_strategy=strategy,
    )
    if search.max_iterations is not None and search.max_iterations < 1:
        raise ValueError("max_iterations must be at least 1 when set")

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "load_config",
]
