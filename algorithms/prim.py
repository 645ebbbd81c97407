"""
prim.py — Prim's Minimum Spanning Tree, one edge at a time
==========================================================
Grows a tree from the start node by repeatedly adding the lightest edge
that leaves the tree.  Each call to step() commits exactly one edge (or
discovers that none is left), so a caller can inspect the partial tree
between decisions.

The frontier is rescanned from scratch on every step: for each node not
yet in the tree, find the lightest remaining edge reaching it from the
tree, then take the lightest of those.  O(V · E) per step, which is fine
for graphs small enough to watch.

Tie-breaks (deterministic, first minimum wins):
  • among edges into the same node — graph edge insertion order
  • among nodes                    — graph node insertion order

The graph must be undirected in the modelled sense: every edge
(a, b, w) needs an explicit reverse (b, a, w).  The demo's end node,
if any, is ignored; a spanning tree has no target.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from graph import Demo, Edge, Graph
from algorithms.errors import PreconditionViolation, UndirectedGraphViolation, UnknownNodeError
from algorithms.snapshot import Snapshot
from algorithms.step import Phase, Step


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                              # 0
    "    tree ← [];  in_tree ← {start}",                    # 1
    "    remaining ← V − {start}",                          # 2
    "    while remaining and edges remain:",                # 3
    "        best ← None",                                  # 4
    "        for v in remaining:",                          # 5
    "            e ← lightest (u, v) with u in_tree",       # 6
    "            if e lighter than best: best ← e",         # 7
    "        if best is None: return tree   # stuck",       # 8
    "        tree += [best, reverse(best)]",                # 9
    "        in_tree += {best.v};  remaining −= {best.v}",  # 10
    "    return tree",                                      # 11
]


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------
class PrimSnapshot(Snapshot):
    """
    Stepwise Prim.  All mutable state is private; callers read it through
    the properties below (tuples, never the live lists) and change it only
    through step().

    Raises on construction:
        UnknownNodeError         : `start` is not a node of `graph`.
        UndirectedGraphViolation : some edge lacks its reverse.
    """

    def __init__(self, graph: Graph, start: str):
        if not graph.has_node(start):
            raise UnknownNodeError(start)

        for edge in graph.edges:
            if not graph.has_edge(edge.target, edge.source, edge.weight):
                raise UndirectedGraphViolation(edge.source, edge.target, edge.weight)

        self._tree:            List[Edge]      = []
        self._remaining_nodes: List[str]       = []
        self._remaining_edges: List[Edge]      = list(graph.edges)
        self._in_tree:         Dict[str, bool] = {}
        self._current:         str             = start
        self._can_continue:    bool            = True
        self._last_edge:       Optional[Edge]  = None
        self._steps_taken:     int             = 0
        self._total_weight:    float           = 0.0
        self._explanation:     str             = f"Start the tree at '{start}'."
        self._pseudocode_line: int             = 2

        for node_id in graph.node_ids():
            if node_id == start:
                self._in_tree[node_id] = True
            else:
                self._remaining_nodes.append(node_id)
                self._in_tree[node_id] = False

        logger.debug(
            "Prim snapshot over %d nodes / %d edges, start=%s",
            graph.node_count(), graph.edge_count(), start,
        )

    @classmethod
    def from_demo(cls, demo: Demo) -> "PrimSnapshot":
        return cls(demo.graph, demo.start)

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------
    def is_over(self) -> bool:
        return not self._remaining_nodes or not self._remaining_edges or not self._can_continue

    def step(self) -> None:
        """
        Commit the lightest frontier edge, or mark the run stuck if there
        is none.  Calling this once is_over() is true raises
        PreconditionViolation and leaves the state untouched.
        """
        if self.is_over():
            raise PreconditionViolation("step() called after the spanning tree run is over")

        next_edge = self._next_edge()
        if next_edge is None:
            self._can_continue    = False
            self._pseudocode_line = 8
            self._explanation     = (
                f"No edge leaves the tree. {len(self._remaining_nodes)} node(s) "
                f"unreachable from the start: {', '.join(self._remaining_nodes)}."
            )
            logger.debug("Prim stuck with %d node(s) unreachable", len(self._remaining_nodes))
            return

        self._tree.append(next_edge)
        self._tree.append(next_edge.reversed())
        self._remaining_edges.remove(next_edge)

        node_id = next_edge.target
        self._current = node_id
        self._remaining_nodes.remove(node_id)
        self._in_tree[node_id] = True

        self._last_edge        = next_edge
        self._steps_taken     += 1
        self._total_weight    += next_edge.weight
        self._pseudocode_line  = 11 if self.is_over() else 10
        self._explanation      = (
            f"Add {next_edge.source}–{next_edge.target} (w={next_edge.weight}): "
            f"the lightest edge leaving the tree. '{node_id}' joins the tree."
        )
        logger.debug("Prim step %d: added %r", self._steps_taken, next_edge)

    def state(self) -> Step:
        return Step(
            step_number=self._steps_taken,
            current_node=self._current,
            last_edge=self._last_edge.key if self._last_edge else None,
            tree=tuple(e.key for e in self._tree),
            remaining_nodes=tuple(self._remaining_nodes),
            remaining_edges=tuple(e.key for e in self._remaining_edges),
            can_continue=self._can_continue,
            phase=self.phase,
            total_weight=self._total_weight,
            pseudocode_line=self._pseudocode_line,
            explanation=self._explanation,
            is_final=self.is_over(),
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def tree(self) -> Tuple[Edge, ...]:
        return tuple(self._tree)

    @property
    def remaining_nodes(self) -> Tuple[str, ...]:
        return tuple(self._remaining_nodes)

    @property
    def remaining_edges(self) -> Tuple[Edge, ...]:
        return tuple(self._remaining_edges)

    @property
    def current(self) -> str:
        return self._current

    @property
    def can_continue(self) -> bool:
        return self._can_continue

    @property
    def in_tree(self) -> Mapping[str, bool]:
        return MappingProxyType(self._in_tree)

    def is_in_tree(self, node_id: str) -> bool:
        return self._in_tree.get(node_id, False)

    @property
    def last_edge(self) -> Optional[Edge]:
        return self._last_edge

    @property
    def steps_taken(self) -> int:
        return self._steps_taken

    @property
    def total_weight(self) -> float:
        return self._total_weight

    @property
    def phase(self) -> Phase:
        if not self._remaining_nodes:
            return Phase.COMPLETE
        if not self._can_continue or not self._remaining_edges:
            return Phase.STUCK
        if self._steps_taken == 0:
            return Phase.INITIALIZED
        return Phase.RUNNING

    # ------------------------------------------------------------------
    # Frontier scan
    # ------------------------------------------------------------------
    def _min_edge_from_tree(self, node_id: str) -> Optional[Edge]:
        """Lightest remaining edge from the tree into `node_id`, or None."""
        best: Optional[Edge] = None
        for edge in self._remaining_edges:
            if edge.target != node_id or not self._in_tree[edge.source]:
                continue
            if best is None or edge.weight < best.weight:
                best = edge
        return best

    def _next_edge(self) -> Optional[Edge]:
        best: Optional[Edge] = None
        for node_id in self._remaining_nodes:
            candidate = self._min_edge_from_tree(node_id)
            if candidate is None:
                continue
            if best is None or candidate.weight < best.weight:
                best = candidate
        return best

    def __repr__(self) -> str:
        return (
            f"PrimSnapshot(current={self._current}, tree_edges={len(self._tree)}, "
            f"remaining_nodes={len(self._remaining_nodes)}, phase={self.phase.value})"
        )
