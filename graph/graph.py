"""
graph.py — Graph Container
==========================
Single source of truth for the graph.  Algorithms read it; nothing
in the algorithm layer ever writes to it.

Responsibilities:
  1. CRUD on nodes & edges                  (add / get / has)
  2. Adjacency queries                      (edges_from, has_edge, …)
  3. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes are stored in a dict keyed by id (insertion-ordered), edges in
    a plain list (insertion-ordered).  Algorithms that break ties by
    "first one found" rely on both orders being the order things were
    added.
  - Edges are directed in representation.  An undirected link is two
    edges, (a, b, w) and (b, a, w); `connect()` adds both at once.
  - A key index `_edge_keys[(source, target, weight)] → count` makes
    `has_edge` O(1) instead of a scan of the edge list.
"""

from typing import Dict, List, Optional

from graph.node import Node
from graph.edge import Edge, EdgeKey


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}
        edges      : [Edge, …] in insertion order
        _adj       : {node_id: [Edge, …]}  outgoing edges
        _edge_keys : {(source, target, weight): multiplicity}
    """

    def __init__(self):
        self.nodes:      Dict[str, Node]       = {}
        self.edges:      List[Edge]            = []
        self._adj:       Dict[str, List[Edge]] = {}
        self._edge_keys: Dict[EdgeKey, int]    = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: str, label: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id=node_id, label=label))

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        for endpoint in (edge.source, edge.target):
            if endpoint not in self.nodes:
                raise KeyError(f"Edge {edge!r} references unknown node '{endpoint}'")
        self.edges.append(edge)
        self._adj[edge.source].append(edge)
        self._edge_keys[edge.key] = self._edge_keys.get(edge.key, 0) + 1
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1.0) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight))

    def connect(self, a: str, b: str, weight: float = 1.0) -> None:
        """Add an undirected link: both (a, b, w) and (b, a, w)."""
        self.create_edge(a, b, weight)
        self.create_edge(b, a, weight)

    def has_edge(self, source: str, target: str, weight: float) -> bool:
        return self._edge_keys.get((source, target, weight), 0) > 0

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def edges_from(self, node_id: str) -> List[Edge]:
        return list(self._adj.get(node_id, []))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Build a graph from its dict form.  Nodes may be given either as
        {"id": …, "label": …} dicts or as bare ids.  An edge dict with
        "undirected": true is expanded into both directions.

        Raises ValueError when the shape is wrong, KeyError when an edge
        names a node that was never declared.
        """
        if not isinstance(data, dict):
            raise ValueError(f"A graph must be an object, got {type(data).__name__}")
        nodes = data.get("nodes", [])
        edges = data.get("edges", [])
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise ValueError("A graph's 'nodes' and 'edges' must be lists")

        g = cls()
        for nd in nodes:
            if isinstance(nd, dict):
                g.add_node(Node.from_dict(nd))
            elif isinstance(nd, (str, int)) and not isinstance(nd, bool):
                g.add_node(Node(nd))
            else:
                raise ValueError(f"Malformed node {nd!r}")
        for ed in edges:
            if not isinstance(ed, dict):
                raise ValueError(f"Malformed edge {ed!r}")
            edge = Edge.from_dict(ed)
            g.add_edge(edge)
            if ed.get("undirected"):
                g.add_edge(edge.reversed())
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
