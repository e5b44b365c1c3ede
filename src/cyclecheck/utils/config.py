from __future__ import annotations
from dataclasses import dataclass, field, replace
import logging
import os
from typing import Any, Dict, Iterable, Mapping
import yaml

from cyclecheck.detectors import run_detector
from cyclecheck.errors import ConfigError
from cyclecheck.graphs.edges import EdgeLike
from cyclecheck.registry import DETECTORS
from cyclecheck.tasks import build_task
from cyclecheck.tasks.base import BaseGraphTask, TaskSpec

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

DEFAULT_CONFIG: Dict[str, Any] = {
    "strategy": "bfs",
    "log_level": "INFO",
    "task": {"name": "has_cycle", "mode": "binary"},
}


def load_config(path: str) -> Dict[str, Any]:
    """Read a YAML config file into a dict. An empty file yields {}."""
    if not os.path.exists(path):
        raise ConfigError(f"config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            cfg = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"could not parse {path}: {e}") from e
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"top level of {path} must be a mapping, got {type(cfg).__name__}")
    return cfg


@dataclass
class CheckConfig:
    strategy: str = "bfs"
    log_level: str = "INFO"
    task: TaskSpec = field(default_factory=lambda: TaskSpec.from_dict(DEFAULT_CONFIG["task"]))

    def __post_init__(self) -> None:
        # the task labels graphs with the configured detector
        params = dict(self.task.params or {})
        task_strategy = params.setdefault("strategy", self.strategy)
        if task_strategy != self.strategy:
            raise ConfigError(
                f"task strategy {task_strategy!r} conflicts with strategy {self.strategy!r}"
            )
        self.task = replace(self.task, params=params)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "CheckConfig":
        merged = {**DEFAULT_CONFIG, **dict(raw)}
        strategy = str(merged["strategy"])
        if strategy not in DETECTORS:
            raise ConfigError(f"unknown strategy {strategy!r}. Available: {DETECTORS.names()}")
        level = str(merged["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"unknown log level {merged['log_level']!r}")
        task_raw = merged["task"]
        if not isinstance(task_raw, Mapping):
            raise ConfigError("task section must be a mapping")
        return cls(strategy=strategy, log_level=level, task=TaskSpec.from_dict(task_raw))

    @classmethod
    def from_file(cls, path: str) -> "CheckConfig":
        return cls.from_dict(load_config(path))

    def detect(self, edges: Iterable[EdgeLike]) -> bool:
        return run_detector(self.strategy, edges)

    def make_task(self) -> BaseGraphTask:
        return build_task(self.task)

    def apply(self) -> None:
        """Set up logging at the configured level for the cyclecheck loggers."""
        configure_logging(self.log_level)
        logging.getLogger("cyclecheck").setLevel(self.log_level)


def configure_logging(level: str | int = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
