import pytest

from graph import Graph, Demo


def build_graph(nodes, links):
    """Nodes in order; every (a, b, w) link is added in both directions."""
    g = Graph()
    for n in nodes:
        g.create_node(n)
    for a, b, w in links:
        g.connect(a, b, w)
    return g


@pytest.fixture
def triangle():
    return build_graph("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])


@pytest.fixture
def two_components():
    return build_graph("ABCD", [("A", "B", 1), ("C", "D", 1)])


@pytest.fixture
def classic():
    # textbook seven-node example, MST weight 39
    return build_graph(
        "ABCDEFG",
        [
            ("A", "B", 7), ("A", "D", 5),
            ("B", "C", 8), ("B", "D", 9), ("B", "E", 7),
            ("C", "E", 5),
            ("D", "E", 15), ("D", "F", 6),
            ("E", "F", 8), ("E", "G", 9),
            ("F", "G", 11),
        ],
    )


@pytest.fixture
def triangle_demo(triangle):
    return Demo(graph=triangle, start="A", end="C")
