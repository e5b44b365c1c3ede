"""Cycle detection for undirected graphs given as edge lists."""
from cyclecheck.errors import CycleCheckError, InvalidEdgeError, InvalidGraphError, ConfigError
from cyclecheck.graphs import Edge, as_edges, edges_from_networkx, edges_from_adjacency
from cyclecheck.detectors import detect_cycle, detect_cycle_indexed, run_detector
from cyclecheck.tasks import HasCycleTask, TaskSpec, build_task
from cyclecheck.utils.config import CheckConfig, load_config, configure_logging

__version__ = "0.1.0"

__all__ = [
    "detect_cycle",
    "detect_cycle_indexed",
    "run_detector",
    "Edge",
    "as_edges",
    "edges_from_networkx",
    "edges_from_adjacency",
    "HasCycleTask",
    "TaskSpec",
    "build_task",
    "CheckConfig",
    "load_config",
    "configure_logging",
    "CycleCheckError",
    "InvalidEdgeError",
    "InvalidGraphError",
    "ConfigError",
]
