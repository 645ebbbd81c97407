"""
errors.py — Algorithm Errors
============================
Everything an algorithm raises on bad input or misuse.  All of them
derive from `AlgorithmError` so a caller can catch the whole family,
and each also derives from the builtin it most resembles so plain
`except ValueError` / `except KeyError` still works.
"""


class AlgorithmError(Exception):
    """Base class for algorithm errors."""


class UndirectedGraphViolation(AlgorithmError, ValueError):
    """An edge (a, b, w) exists without its reverse (b, a, w)."""

    def __init__(self, source: str, target: str, weight: float):
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Prim's algorithm requires an undirected graph: edge "
            f"{source}→{target} (w={weight}) has no reverse edge "
            f"{target}→{source} (w={weight})"
        )


class UnknownNodeError(AlgorithmError, KeyError):
    """The designated start node is not part of the graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Start node '{node_id}' is not in the graph")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class PreconditionViolation(AlgorithmError, RuntimeError):
    """step() was called on a snapshot that is already over."""
