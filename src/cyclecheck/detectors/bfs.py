"""
Cycle detection for undirected graphs by breadth-first search.

Every vertex sits in exactly one of three sets while the search runs:
unvisited (not reached yet), frontier (queued, not expanded) and visited
(expanded). Vertices only move forward: unvisited -> frontier -> visited.
One BFS run is seeded per connected component.
"""
from __future__ import annotations
from collections import deque
import logging
from typing import Callable, Deque, Dict, Hashable, Iterable, Optional, Set

from cyclecheck.graphs.adjacency import build_neighbors, find_repeated_pair
from cyclecheck.graphs.edges import EdgeLike, as_edges
from cyclecheck.registry import DETECTORS

logger = logging.getLogger(__name__)

_ROOT = object()  # discovery parent of a BFS seed


class Partition:
    """The unvisited / frontier / visited split of a vertex set."""

    def __init__(self, vertices: Iterable[Hashable]):
        # insertion-ordered so new runs are seeded in edge order
        self.unvisited: Dict[Hashable, None] = dict.fromkeys(vertices)
        self.frontier: Deque[Hashable] = deque()
        self.visited: Set[Hashable] = set()

    def seed(self) -> Hashable:
        v = next(iter(self.unvisited))
        self.discover(v)
        return v

    def discover(self, v: Hashable) -> None:
        del self.unvisited[v]
        self.frontier.append(v)

    def expand(self) -> Hashable:
        v = self.frontier.popleft()
        self.visited.add(v)
        return v


@DETECTORS.register("bfs")
def detect_cycle(
    edges: Iterable[EdgeLike],
    on_expand: Optional[Callable[[Partition], None]] = None,
) -> bool:
    """
    Return True iff the undirected graph formed by `edges` contains a cycle:
    a self-loop, the same vertex pair joined by two edge records, or a
    simple cycle of length >= 3 in any connected component.

    `on_expand`, if given, is called with the partition after each vertex
    is expanded (its unvisited neighbors already moved to the frontier).

    The input is not modified; nothing is kept between calls.
    Complexity: O(n + m) expected, n vertices and m edges.
    """
    edge_list = as_edges(edges)

    for e in edge_list:
        if e.is_loop:
            logger.debug("self-loop on vertex %r", e.source)
            return True

    repeated = find_repeated_pair(edge_list)
    if repeated is not None:
        logger.debug("parallel edge between %r and %r", repeated.source, repeated.destination)
        return True

    neighbors = build_neighbors(edge_list)
    part = Partition(neighbors)
    # discovery parent of every vertex that left `unvisited`
    parent: Dict[Hashable, object] = {}

    while part.unvisited:
        seed = part.seed()
        parent[seed] = _ROOT
        logger.debug("BFS run seeded at %r", seed)

        while part.frontier:
            current = part.expand()
            for n in neighbors[current]:
                if n in part.unvisited:
                    part.discover(n)
                    parent[n] = current
                elif n != parent[current]:
                    # n is in frontier or visited and the edge is not the
                    # one that discovered `current`
                    logger.debug("edge (%r, %r) closes a cycle", current, n)
                    return True
            if on_expand is not None:
                on_expand(part)

    return False
