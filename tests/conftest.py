"""Shared fixtures for graphio tests."""

import subprocess

import networkx as nx
import pytest

from graphio.builders import digraph, graph, weighted_digraph, weighted_graph
from graphio.graph_io import set_default_io

DAG = {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []}
TWO_CYCLE = {"a": ["b"], "b": ["a"]}
UNDIRECTED = {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": ["a"]}
WEIGHTED = {"a": {"b": 2, "c": 3.5}, "b": {"d": 1}, "c": {"d": 4}, "d": {}}


@pytest.fixture
def sample_graphs() -> dict[str, nx.Graph]:
    """A representative set of small graphs covering every builder."""
    return {
        "empty": graph({}),
        "empty_directed": digraph({}),
        "dag": digraph(DAG),
        "two_cycle": digraph(TWO_CYCLE),
        "undirected": graph(UNDIRECTED),
        "weighted": weighted_graph(WEIGHTED),
        "weighted_directed": weighted_digraph(WEIGHTED),
    }


@pytest.fixture
def completed():
    """Factory for fake subprocess.CompletedProcess results."""

    def _make(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)

    return _make


@pytest.fixture(autouse=True)
def reset_default_io():
    set_default_io(None)
    yield
    set_default_io(None)
