"""
demo.py — Graph + designated endpoints
======================================
What an algorithm is actually handed: a graph, the node it starts from,
and (for algorithms that want one) an end node.  Spanning-tree
algorithms ignore `end`.
"""

from dataclasses import dataclass
from typing import Optional

from graph.graph import Graph


@dataclass
class Demo:
    graph: Graph
    start: str
    end:   Optional[str] = None

    def to_dict(self) -> dict:
        return {"graph": self.graph.to_dict(), "start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: dict) -> "Demo":
        if "graph" not in data or "start" not in data:
            raise ValueError("A demo needs both 'graph' and 'start'")
        return cls(
            graph=Graph.from_dict(data["graph"]),
            start=str(data["start"]),
            end=None if data.get("end") is None else str(data["end"]),
        )
