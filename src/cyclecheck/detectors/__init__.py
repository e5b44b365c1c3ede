from __future__ import annotations
from typing import Iterable

from cyclecheck.graphs.edges import EdgeLike
from cyclecheck.registry import DETECTORS
from cyclecheck.detectors.bfs import Partition, detect_cycle
from cyclecheck.detectors.indexed import BfsGraph, Color, detect_cycle_indexed

def run_detector(name: str, edges: Iterable[EdgeLike]) -> bool:
    """Run the detector registered under `name` (see DETECTORS.names())."""
    return DETECTORS.get(name)(edges)

__all__ = ["detect_cycle", "Partition", "detect_cycle_indexed", "run_detector", "BfsGraph", "Color"]
