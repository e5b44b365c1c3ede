from __future__ import annotations
import networkx as nx
from cyclecheck.detectors import run_detector
from cyclecheck.graphs.adjacency import edges_from_networkx
from cyclecheck.registry import DETECTORS, TASKS

@TASKS.register("has_cycle")
class HasCycleTask:
    """
    Target: 1 if the graph, read as undirected, contains a cycle, else 0.
    Parallel edges of a MultiGraph count as a 2-cycle; self-loops as a 1-cycle.
    """
    name = "has_cycle"
    mode = "binary"
    num_classes = None

    def __init__(self, strategy: str = "bfs", **_: object):
        DETECTORS.get(strategy)  # fail early on an unknown strategy
        self.strategy = strategy

    def label(self, g: nx.Graph) -> int:
        return 1 if run_detector(self.strategy, edges_from_networkx(g)) else 0
