"""
node.py — Graph Node
====================
A node is nothing more than an identity plus a display label.
Algorithms key all of their bookkeeping by `node.id`, never by the
object itself.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id    : Unique identifier (string).  Equality and hashing use it.
        label : Human-readable name (defaults to the id).
    """

    __slots__ = ("id", "label")

    def __init__(self, node_id: str, label: Optional[str] = None):
        self.id:    str = str(node_id)
        self.label: str = label or self.id

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(node_id=data["id"], label=data.get("label"))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
