"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every stepwise algorithm the project knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "prim": AlgoInfo(key, label, factory, pseudocode, tags, …),
    }

`factory` takes a Demo and returns a fresh Snapshot.  Adding an
algorithm is: write the Snapshot subclass, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

from graph import Demo
from algorithms.errors import (
    AlgorithmError,
    UndirectedGraphViolation,
    UnknownNodeError,
    PreconditionViolation,
)
from algorithms.snapshot import Snapshot
from algorithms.step     import Step, Phase
from algorithms.prim     import PrimSnapshot, PSEUDOCODE as _prim_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                          # registry key, e.g. "prim"
    label:             str                          # human label
    factory:           Callable[[Demo], Snapshot]   # Demo → fresh Snapshot
    pseudocode:        List[str]                    # lines for the side-panel
    tags:              List[str] = field(default_factory=list)
    requires_undirected: bool   = False
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""

    def to_dict(self) -> dict:
        return {
            "key":                 self.key,
            "label":               self.label,
            "pseudocode":          list(self.pseudocode),
            "tags":                list(self.tags),
            "requires_undirected": self.requires_undirected,
            "complexity_time":     self.complexity_time,
            "complexity_space":    self.complexity_space,
            "description":         self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", factory=PrimSnapshot.from_demo, pseudocode=_prim_pc,
        tags=["weighted", "spanning-tree", "greedy"],
        requires_undirected=True,
        complexity_time="O(V · E) per step", complexity_space="O(V + E)",
        description="Grows a minimum spanning tree by always adding the lightest edge leaving the tree.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "Snapshot",
    "PrimSnapshot",
    "Step",
    "Phase",
    "AlgorithmError",
    "UndirectedGraphViolation",
    "UnknownNodeError",
    "PreconditionViolation",
]
