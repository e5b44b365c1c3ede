from cyclecheck.graphs.edges import Edge, EdgeLike, as_edges
from cyclecheck.graphs.adjacency import (
    build_neighbors,
    find_repeated_pair,
    edges_from_networkx,
    edges_from_adjacency,
)

__all__ = [
    "Edge",
    "EdgeLike",
    "as_edges",
    "build_neighbors",
    "find_repeated_pair",
    "edges_from_networkx",
    "edges_from_adjacency",
]
