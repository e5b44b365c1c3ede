from __future__ import annotations


class CycleCheckError(Exception):
    """Base class for errors raised by cyclecheck."""


class InvalidEdgeError(CycleCheckError, ValueError):
    """An edge record is not a pair of hashable vertex identifiers."""

    def __init__(self, position: int, record: object, reason: str):
        self.position = position
        self.record = record
        super().__init__(f"edge #{position} {record!r}: {reason}")


class InvalidGraphError(CycleCheckError, ValueError):
    """An adjacency structure cannot be read as an undirected multigraph."""


class ConfigError(CycleCheckError, ValueError):
    """Configuration content is missing or malformed."""
