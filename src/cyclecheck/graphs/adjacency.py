from __future__ import annotations
from typing import Dict, Hashable, Iterable, List, Optional, Set
import networkx as nx
import numpy as np

from cyclecheck.errors import InvalidGraphError
from cyclecheck.graphs.edges import Edge

# -----------------------------------------------------------
# Adjacency from edge records
# -----------------------------------------------------------

def build_neighbors(edges: Iterable[Edge]) -> Dict[Hashable, Set[Hashable]]:
    """
    Given edge records, return {vertex: set of neighbors}.
    Symmetric; repeated edges collapse into one neighbor entry.
    Keys keep the order in which vertices first appear in the edge list.
    Complexity: O(m) expected.
    """
    neighbors: Dict[Hashable, Set[Hashable]] = {}
    for e in edges:
        neighbors.setdefault(e.source, set()).add(e.destination)
        neighbors.setdefault(e.destination, set()).add(e.source)
    return neighbors


def find_repeated_pair(edges: Iterable[Edge]) -> Optional[Edge]:
    """
    Return the first edge whose unordered vertex pair already occurred
    earlier in the list, or None. (0, 1) and (1, 0) are the same pair.
    """
    seen: Set[frozenset] = set()
    for e in edges:
        k = e.key()
        if k in seen:
            return e
        seen.add(k)
    return None

# -----------------------------------------------------------
# Adapters: networkx graphs and adjacency matrices
# -----------------------------------------------------------

def edges_from_networkx(g: nx.Graph) -> List[Edge]:
    """
    Edge records of a networkx graph, one per (multi-)edge.
    Direction is ignored; isolated nodes contribute nothing.

    A simple DiGraph holding both (u, v) and (v, u) yields a single record:
    reading it as undirected merges the two arcs. Multigraphs, directed or
    not, keep every edge record, so their parallel edges form 2-cycles.
    """
    if g.is_directed() and not g.is_multigraph():
        g = g.to_undirected()
    return [Edge(u, v) for u, v in g.edges()]


def edges_from_adjacency(adj: np.ndarray) -> List[Edge]:
    """
    Read a square adjacency / edge-count matrix (e.g. nx.to_numpy_array of a
    MultiGraph) as an undirected multigraph on vertices 0..n-1.

    A symmetric matrix is read from its upper triangle including the
    diagonal: an entry k > 1 yields k parallel records and a nonzero diagonal
    entry is a self-loop. An asymmetric matrix (nx.to_numpy_array of a
    DiGraph) is read as undirected via max(a, a.T), matching
    edges_from_networkx for the same graph. A count matrix cannot tell the
    arcs of a MultiDiGraph apart from reciprocal arcs; use edges_from_networkx
    for those.
    Complexity: O(n^2).
    """
    a = np.asarray(adj)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise InvalidGraphError(f"adjacency matrix must be square, got shape {a.shape}")
    if a.size and (a < 0).any():
        raise InvalidGraphError("adjacency matrix has negative entries")
    if a.size and not (np.isfinite(a).all() and np.array_equal(a, np.round(a))):
        raise InvalidGraphError("adjacency matrix entries must be whole edge counts")

    if not np.array_equal(a, a.T):
        a = np.maximum(a, a.T)

    rows, cols = np.nonzero(np.triu(a))
    edges: List[Edge] = []
    for i, j in zip(rows.tolist(), cols.tolist()):
        edges.extend(Edge(i, j) for _ in range(int(a[i, j])))
    return edges
