"""Tests for DOT text generation."""

from enum import Enum

import networkx as nx
import pytest

from graphio.builders import digraph, graph
from graphio.exceptions import UnsupportedDataError
from graphio.renderers import distinct_edges, dot_attrs, dot_escape, encode_dot


class Shape(Enum):
    BOX = "box"


def test_dag_golden(sample_graphs):
    assert encode_dot(sample_graphs["dag"]) == "\n".join(
        [
            'digraph "graph" {',
            '  "a" -> "b"',
            '  "a" -> "c"',
            '  "b" -> "d"',
            '  "c" -> "d"',
            '  "a"',
            '  "b"',
            '  "c"',
            '  "d"',
            "}",
        ]
    )


def test_empty_graph(sample_graphs):
    assert encode_dot(sample_graphs["empty"], graph_name="g") == 'graph "g" {\n}'


def test_undirected_edges_emitted_once(sample_graphs):
    text = encode_dot(sample_graphs["undirected"])
    edge_lines = [line for line in text.splitlines() if " -- " in line]
    assert edge_lines == [
        '  "a" -- "b"',
        '  "a" -- "c"',
        '  "a" -- "d"',
        '  "b" -- "d"',
        '  "c" -- "d"',
    ]


def test_weighted_edges_use_weight_as_label(sample_graphs):
    text = encode_dot(sample_graphs["weighted_directed"])
    assert '  "a" -> "b" ["label"="2"]' in text
    assert '  "a" -> "c" ["label"="3.5"]' in text
    assert "weight" not in text


def test_weight_overrides_edge_label_function(sample_graphs):
    text = encode_dot(sample_graphs["weighted"], edge_label=lambda u, v: f"{u}{v}")
    assert '  "a" -- "b" ["label"="2"]' in text


def test_edge_label_function():
    text = encode_dot(digraph({"a": ["b"]}), edge_label=lambda u, v: f"{u}->{v}")
    assert '  "a" -> "b" ["label"="a->b"]' in text


def test_default_labels_read_attributes():
    g = nx.DiGraph()
    g.add_node("a", label="Alpha")
    g.add_node("b")
    g.add_edge("a", "b", label="uses")

    assert encode_dot(g).splitlines()[1:] == [
        '  "Alpha" -> "b" ["label"="uses"]',
        '  "Alpha" ["label"="Alpha"]',
        '  "b"',
        "}",
    ]


def test_node_label_function_and_attributes():
    g = graph({"a": []})
    g.nodes["a"].update(shape=Shape.BOX, fixedsize=True)

    text = encode_dot(g, node_label=lambda n: n.upper())

    assert '  "A" ["shape"="box","fixedsize"="true","label"="A"]' in text


def test_edge_attributes_without_label():
    g = nx.DiGraph()
    g.add_edge("a", "b", color="red")
    g.add_edge("b", "c", color="")

    text = encode_dot(g)

    assert '  "a" -> "b" ["color"="red"]' in text
    assert '  "b" -> "c"\n' in text


def test_graph_attrs_statement():
    text = encode_dot(digraph({"a": []}), graph_attrs={"rankdir": "LR", "label": None})
    assert text.splitlines()[1] == '  graph ["rankdir"="LR"]'


def test_empty_graph_attrs_omitted():
    text = encode_dot(digraph({"a": []}), graph_attrs={"label": None})
    assert "graph [" not in text


def test_escaping_in_names_and_labels():
    g = nx.Graph()
    g.add_node('say "hi"\nthere')
    text = encode_dot(g, graph_name='my "graph"')
    assert text.startswith('graph "my \\"graph\\"" {')
    assert '  "say \\"hi\\"\\nthere"' in text


def test_encoding_is_deterministic(sample_graphs):
    for g in sample_graphs.values():
        assert encode_dot(g) == encode_dot(g.copy())


def test_non_graph_rejected():
    with pytest.raises(UnsupportedDataError):
        encode_dot({"a": ["b"]})


def test_dot_escape_leaves_other_characters():
    assert dot_escape("a\\b\t<c>") == "a\\b\t<c>"


@pytest.mark.parametrize(
    "attrs, expected",
    [
        (None, None),
        ({}, None),
        ({"color": None, "style": ""}, None),
        ({"color": "red", "style": ""}, '["color"="red"]'),
        ({"n": 0, "flag": False}, '["n"="0","flag"="false"]'),
    ],
)
def test_dot_attrs(attrs, expected):
    assert dot_attrs(attrs) == expected


def test_distinct_edges_on_multigraph():
    g = nx.MultiDiGraph()
    g.add_edge("a", "b")
    g.add_edge("a", "b")
    g.add_edge("b", "a")
    assert list(distinct_edges(g)) == [("a", "b"), ("b", "a")]

    u = nx.MultiGraph()
    u.add_edge("a", "b")
    u.add_edge("b", "a")
    assert list(distinct_edges(u)) == [("a", "b")]
