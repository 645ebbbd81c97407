"""
snapshot.py — Stepwise Algorithm Contract
=========================================
A Snapshot is an algorithm frozen between two decisions.  The caller
drives it one decision at a time:

    snap = PrimSnapshot(graph, start="A")
    while not snap.is_over():
        snap.step()
        render(snap.state())

`run()` wraps that loop as a generator of Steps for callers that just
want to iterate.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from algorithms.step import Step


class Snapshot(ABC):

    @abstractmethod
    def is_over(self) -> bool:
        """True once no further step() is meaningful.  No side effects."""

    @abstractmethod
    def step(self) -> None:
        """Advance by exactly one decision."""

    @abstractmethod
    def state(self) -> Step:
        """A frozen picture of everything observable right now."""

    def run(self) -> Iterator[Step]:
        """Yield the initial state, then one state per step until over."""
        yield self.state()
        while not self.is_over():
            self.step()
            yield self.state()

    def run_to_completion(self) -> int:
        """Step until over; return the number of step() calls made."""
        count = 0
        while not self.is_over():
            self.step()
            count += 1
        return count
