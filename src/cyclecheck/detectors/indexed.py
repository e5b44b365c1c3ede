from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Dict, Hashable, Iterable, List

from cyclecheck.graphs.adjacency import find_repeated_pair
from cyclecheck.graphs.edges import Edge, EdgeLike, as_edges
from cyclecheck.registry import DETECTORS

logger = logging.getLogger(__name__)


class Color(Enum):
    """BFS vertex colors: white = unvisited, gray = frontier, black = visited."""
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


@dataclass
class BfsVertex:
    index: int                      # dense position in the arena, 0..n-1
    label: Hashable                 # vertex identifier as given in the edges
    color: Color = Color.WHITE
    adjs: List[int] = field(default_factory=list)   # neighbor indices, unique
    parent: int = -1                # index of the discovering vertex, -1 for a seed


class BfsGraph:
    """
    Arena of vertices addressed by dense integer index, with a label -> index
    lookup built once. Expects a simple graph: callers reject self-loops and
    repeated pairs first (see detect_cycle_indexed).
    """

    def __init__(self, edges: Iterable[Edge]):
        self.index_of: Dict[Hashable, int] = {}
        self.vertices: List[BfsVertex] = []
        for e in edges:
            a = self._intern(e.source)
            b = self._intern(e.destination)
            self.vertices[a].adjs.append(b)
            self.vertices[b].adjs.append(a)

    def _intern(self, label: Hashable) -> int:
        idx = self.index_of.get(label)
        if idx is None:
            idx = len(self.vertices)
            self.index_of[label] = idx
            self.vertices.append(BfsVertex(index=idx, label=label))
        return idx

    def __len__(self) -> int:
        return len(self.vertices)

    def colors(self) -> Dict[Hashable, Color]:
        return {v.label: v.color for v in self.vertices}

    def has_cycle(self) -> bool:
        """
        Multi-source BFS: seed a run at the lowest white index until no white
        vertex is left. A gray or black neighbor other than the current
        vertex's parent closes a cycle. A vertex turns black as soon as it
        leaves the queue.
        Complexity: O(n + m).
        """
        verts = self.vertices
        q: deque[int] = deque()
        next_seed = 0

        while True:
            while next_seed < len(verts) and verts[next_seed].color is not Color.WHITE:
                next_seed += 1
            if next_seed == len(verts):
                return False

            seed = verts[next_seed]
            seed.color = Color.GRAY
            q.append(seed.index)
            logger.debug("BFS run seeded at %r (index %d)", seed.label, seed.index)

            while q:
                cur = verts[q.popleft()]
                cur.color = Color.BLACK
                for i in cur.adjs:
                    nb = verts[i]
                    if nb.color is Color.WHITE:
                        nb.color = Color.GRAY
                        nb.parent = cur.index
                        q.append(i)
                    elif i != cur.parent:
                        logger.debug("edge (%r, %r) closes a cycle", cur.label, nb.label)
                        return True


@DETECTORS.register("bfs_indexed")
def detect_cycle_indexed(edges: Iterable[EdgeLike]) -> bool:
    """Same contract as detect_cycle, run on a fresh BfsGraph arena."""
    edge_list = as_edges(edges)
    if any(e.is_loop for e in edge_list):
        return True
    if find_repeated_pair(edge_list) is not None:
        return True
    return BfsGraph(edge_list).has_cycle()
