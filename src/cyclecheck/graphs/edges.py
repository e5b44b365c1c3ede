# Edge records for undirected (multi)graphs.
#
# Vertex identifiers are opaque hashable keys: they need not be contiguous,
# zero-based or even integers.

from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable, Iterable, List, Sequence, Tuple, Union

from cyclecheck.errors import InvalidEdgeError


@dataclass(frozen=True)
class Edge:
    source: Hashable
    destination: Hashable

    @property
    def is_loop(self) -> bool:
        return self.source == self.destination

    def key(self) -> frozenset:
        """Unordered pair identifying this edge; (u, v) and (v, u) share it."""
        return frozenset((self.source, self.destination))

    def __iter__(self):
        yield self.source
        yield self.destination


EdgeLike = Union[Edge, Tuple[Hashable, Hashable], Sequence[Hashable]]


def as_edges(edges: Iterable[EdgeLike]) -> List[Edge]:
    """
    Normalize an iterable of edge records into a fresh list of Edge.
    Accepts Edge instances and any 2-element sequence (tuples, lists).
    The input is iterated exactly once and never modified.
    Complexity: O(m), where m is the number of edges.
    """
    out: List[Edge] = []
    for i, rec in enumerate(edges):
        if isinstance(rec, Edge):
            u, v = rec.source, rec.destination
        elif isinstance(rec, (str, bytes)):
            raise InvalidEdgeError(i, rec, "expected a pair, got a string")
        else:
            try:
                u, v = rec
            except (TypeError, ValueError):
                raise InvalidEdgeError(i, rec, "expected a (source, destination) pair") from None
        try:
            hash(u)
            hash(v)
        except TypeError:
            raise InvalidEdgeError(i, rec, "vertex identifiers must be hashable") from None
        out.append(rec if isinstance(rec, Edge) else Edge(u, v))
    return out
