"""
edge.py — Graph Edge
====================
A directed (source → target) edge with a non-negative weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Edges are VALUES: two edges with the same (source, target, weight)
    compare equal and hash the same.  Undirectedness is modelled by
    storing the reverse edge explicitly, and the reverse is looked up
    by that key, so an edge with matching endpoints but a different
    weight does not count.
"""

import math
from typing import Tuple


EdgeKey = Tuple[str, str, float]


class Edge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Finite numeric cost, >= 0 (default 1).
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: str, target: str, weight: float = 1.0):
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"Edge {source}→{target} has non-numeric weight {weight!r}")
        if not math.isfinite(weight) or weight < 0:
            raise ValueError(f"Edge {source}→{target} needs a finite, non-negative weight, got {weight}")
        self.source: str   = str(source)
        self.target: str   = str(target)
        self.weight: float = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def key(self) -> EdgeKey:
        return (self.source, self.target, self.weight)

    def reversed(self) -> "Edge":
        """The same edge walked the other way, with the same weight."""
        return Edge(self.target, self.source, self.weight)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1.0),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)
