"""
step.py — Algorithm Step Snapshot
==================================
A Step is a frozen-in-time picture of everything a visualizer needs to
render one frame of a spanning-tree run:

    • Which edges are in the tree so far
    • Which nodes and edges are still outside it
    • The node most recently added (current)
    • Which line of pseudocode the last decision corresponds to
    • A plain-English explanation of *why* that decision was made

Design decisions:
  - Step is a frozen dataclass holding tuples only.  It is a SNAPSHOT:
    the algorithm is the only writer, the engine / web layer are pure
    readers, and a Step taken earlier never changes when the algorithm
    moves on.
  - Edges are stored as (source, target, weight) tuples so a Step is
    directly JSON-serialisable via `to_dict()`.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Tuple


EdgeTuple = Tuple[str, str, float]


class Phase(Enum):
    INITIALIZED = "initialized"   # constructed, no step taken yet
    RUNNING     = "running"       # at least one edge added, more to come
    COMPLETE    = "complete"      # every node joined the tree
    STUCK       = "stuck"         # nodes remain but none is reachable


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : Number of successful steps taken so far.
        current_node    : ID of the node most recently added to the tree.
        last_edge       : The edge added by the last successful step (or None).
        tree            : Committed edges, each followed by its reverse.
        remaining_nodes : IDs of nodes not yet in the tree.
        remaining_edges : Edges not yet committed.
        can_continue    : False once a step found no frontier edge.
        phase           : Phase of the run.
        total_weight    : Sum of the weights of committed edges (reverses not counted).
        pseudocode_line : 0-based index of the pseudocode line for the last decision.
        explanation     : Human-readable "why" text.
        is_final        : True once the run is over.
    """

    step_number:      int                    = 0
    current_node:     Optional[str]          = None
    last_edge:        Optional[EdgeTuple]    = None
    tree:             Tuple[EdgeTuple, ...]  = ()
    remaining_nodes:  Tuple[str, ...]        = ()
    remaining_edges:  Tuple[EdgeTuple, ...]  = ()
    can_continue:     bool                   = True
    phase:            Phase                  = Phase.INITIALIZED
    total_weight:     float                  = 0.0
    pseudocode_line:  int                    = 0
    explanation:      str                    = ""
    is_final:         bool                   = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["phase"] = self.phase.value
        data["tree"] = [list(e) for e in self.tree]
        data["remaining_nodes"] = list(self.remaining_nodes)
        data["remaining_edges"] = [list(e) for e in self.remaining_edges]
        data["last_edge"] = list(self.last_edge) if self.last_edge else None
        return data
