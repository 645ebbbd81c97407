"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete run (all Steps), then computes the summary the
analytics panel shows.

Usage:
    rec = Recorder()
    rec.start(algo_key="prim", demo=demo)
    rec.run_to_completion()          # steps the snapshot until over
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for replay
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Dict, Any

from graph import Demo
from algorithms import get_algorithm, AlgoInfo
from algorithms.step import Step, Phase
from engine.stepper import Stepper


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    start:           str   = ""
    outcome:         str   = ""         # Phase value of the final step
    nodes_in_tree:   int   = 0
    tree_edges:      int   = 0          # undirected edges, i.e. len(tree) // 2
    total_weight:    float = 0.0
    total_steps:     int   = 0          # number of Steps recorded, initial included
    wall_time_ms:    float = 0.0

    @property
    def spans_graph(self) -> bool:
        return self.outcome == Phase.COMPLETE.value

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full list of Steps from the run.
        metrics     : Computed RunMetrics (available after run_to_completion).
        stepper     : The underlying Stepper (for live step-by-step access).
    """

    def __init__(self):
        self.steps:     List[Step]           = []
        self.metrics:   Optional[RunMetrics] = None
        self.stepper:   Optional[Stepper]    = None

        self._algo_info:  Optional[AlgoInfo] = None
        self._demo:       Optional[Demo]     = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, demo: Demo) -> None:
        """
        Build the snapshot for this run.  Construction errors from the
        algorithm (e.g. UndirectedGraphViolation) propagate unchanged.
        """
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        snapshot = info.factory(demo)

        self._algo_info = info
        self._demo      = demo
        self.steps      = []
        self.metrics    = None
        self.stepper    = Stepper()
        self.stepper.start(snapshot)
        logger.info("Started %s from '%s' on %r", info.key, demo.start, demo.graph)

    def run_to_completion(self) -> RunMetrics:
        """Step until over, record every step, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.stepper.jump_to_end()
        self.steps = list(self.stepper.steps)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "Finished %s: %s after %d step(s), total weight %s",
            self.metrics.algo_key, self.metrics.outcome,
            self.metrics.total_steps - 1, self.metrics.total_weight,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "demo":     self._demo.to_dict() if self._demo else {},
            "metrics":  self.metrics.to_dict() if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None
        node_count = self._demo.graph.node_count() if self._demo else 0

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            start=self._demo.start if self._demo else "",
            outcome=last.phase.value if last else "",
            nodes_in_tree=node_count - len(last.remaining_nodes) if last else 0,
            tree_edges=len(last.tree) // 2 if last else 0,
            total_weight=last.total_weight if last else 0.0,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
        )
