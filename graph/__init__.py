"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge, Demo
"""

from graph.node  import Node
from graph.edge  import Edge
from graph.graph import Graph
from graph.demo  import Demo

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "Demo",
]
