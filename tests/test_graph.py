import pytest

from graph import Graph, Node, Edge, Demo


def test_edges_compare_by_value():
    assert Edge("A", "B", 2) == Edge("A", "B", 2.0)
    assert Edge("A", "B", 2) != Edge("A", "B", 3)
    assert Edge("A", "B", 2) != Edge("B", "A", 2)
    assert len({Edge("A", "B", 2), Edge("A", "B", 2)}) == 1


def test_reversed_edge_keeps_weight():
    assert Edge("A", "B", 4).reversed() == Edge("B", "A", 4)


@pytest.mark.parametrize("weight", [-1, float("nan"), float("inf"), "3", None, True])
def test_bad_weight_rejected(weight):
    with pytest.raises(ValueError):
        Edge("A", "B", weight)


def test_nan_link_never_reaches_the_graph():
    g = Graph()
    for n in "ACB":
        g.create_node(n)
    with pytest.raises(ValueError):
        g.connect("A", "C", float("nan"))
    assert g.edge_count() == 0


def test_connect_adds_both_directions():
    g = Graph()
    g.create_node("A")
    g.create_node("B")
    g.connect("A", "B", 3)

    assert g.edges == [Edge("A", "B", 3), Edge("B", "A", 3)]
    assert g.has_edge("B", "A", 3)
    assert not g.has_edge("B", "A", 4)
    assert g.edges_from("A") == [Edge("A", "B", 3)]


def test_edge_to_unknown_node_rejected():
    g = Graph()
    g.create_node("A")
    with pytest.raises(KeyError):
        g.create_edge("A", "Z")


def test_node_order_is_insertion_order():
    g = Graph()
    for n in ["C", "A", "B"]:
        g.add_node(Node(n))
    assert g.node_ids() == ["C", "A", "B"]


def test_from_dict_accepts_bare_ids_and_undirected_edges():
    g = Graph.from_dict({
        "nodes": ["A", {"id": "B", "label": "bee"}],
        "edges": [{"source": "A", "target": "B", "weight": 2, "undirected": True}],
    })
    assert g.get_node("B").label == "bee"
    assert g.edge_count() == 2
    assert g.has_edge("B", "A", 2)


def test_graph_dict_roundtrip(triangle):
    again = Graph.from_dict(triangle.to_dict())
    assert again.node_ids() == triangle.node_ids()
    assert again.edges == triangle.edges


def test_demo_from_dict_requires_start():
    with pytest.raises(ValueError):
        Demo.from_dict({"graph": {"nodes": ["A"]}})


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"nodes": "AB"},
        {"nodes": ["A", "B"], "edges": {"source": "A", "target": "B"}},
        {"nodes": ["A", "B"], "edges": [["A", "B", 1]]},
        {"nodes": [["A"]]},
    ],
)
def test_from_dict_rejects_wrong_shape(data):
    with pytest.raises(ValueError):
        Graph.from_dict(data)
