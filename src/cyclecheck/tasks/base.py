from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Protocol
import networkx as nx

from cyclecheck.errors import ConfigError

TaskMode = Literal["binary", "regression", "multiclass"]
_MODES = ("binary", "regression", "multiclass")

@dataclass
class TaskSpec:
    name: str
    mode: TaskMode = "binary"
    params: Dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TaskSpec":
        if "name" not in raw:
            raise ConfigError("task section needs a 'name'")
        mode = raw.get("mode", "binary")
        if mode not in _MODES:
            raise ConfigError(f"task mode must be one of {_MODES}, got {mode!r}")
        params = raw.get("params") or {}
        if not isinstance(params, Mapping):
            raise ConfigError("task params must be a mapping")
        return cls(name=str(raw["name"]), mode=mode, params=dict(params))

class BaseGraphTask(Protocol):
    name: str
    mode: TaskMode
    num_classes: int | None

    def label(self, g: nx.Graph) -> Any:
        ...
