# src/graphio/providers/python_provider.py
"""
以 Python 字面值表示法 (repr / ast.literal_eval) 序列化圖形的通用提供者。
"""

# 1. 標準庫導入
import ast
from collections.abc import Mapping
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
from graphio.exceptions import UnsupportedDataError
from graphio.providers.base import (
    ANY_FORMAT,
    ANY_FORMAT_SUPPORTED,
    Capability,
    FormatDescriptor,
    ImplementationKind,
    IOImplementation,
    as_kind,
)

PROVIDER_ID = "python"


def encode_graph(graph: nx.Graph) -> str:
    """將圖形轉為可由 ast.literal_eval 還原的字面值字串。"""
    if not isinstance(graph, nx.Graph):
        raise UnsupportedDataError(f"{type(graph).__name__} isn't a graph.")
    payload = {
        "directed": graph.is_directed(),
        "multigraph": graph.is_multigraph(),
        "graph": dict(graph.graph),
        "nodes": [(node, dict(data)) for node, data in graph.nodes(data=True)],
        "edges": [(u, v, dict(data)) for u, v, data in graph.edges(data=True)],
    }
    return repr(payload)


def decode_graph(text: str) -> nx.Graph:
    """由 encode_graph 的輸出重建圖形。"""
    if not isinstance(text, str):
        raise UnsupportedDataError(f"{type(text).__name__} isn't a string.")
    try:
        payload = ast.literal_eval(text)
    except (ValueError, SyntaxError) as e:
        raise UnsupportedDataError(f"Not a serialized graph: {e}") from e
    if not isinstance(payload, dict) or "nodes" not in payload:
        raise UnsupportedDataError("Not a serialized graph.")

    graph_class = {
        (False, False): nx.Graph,
        (True, False): nx.DiGraph,
        (False, True): nx.MultiGraph,
        (True, True): nx.MultiDiGraph,
    }[(bool(payload.get("directed")), bool(payload.get("multigraph")))]
    graph = graph_class(**payload.get("graph", {}))
    graph.add_nodes_from(payload["nodes"])
    graph.add_edges_from(payload.get("edges", []))
    return graph


class PythonSerializer(IOImplementation):
    _capabilities = frozenset({Capability.ENCODE, Capability.DECODE})

    def __init__(self):
        super().__init__(PROVIDER_ID, ANY_FORMAT)

    def encode(self, graph: nx.Graph, **options: Any) -> str:
        return encode_graph(graph)

    def decode(self, data: str, **options: Any) -> nx.Graph:
        return decode_graph(data)

    def can_encode(self) -> bool:
        return True

    def can_decode(self) -> bool:
        return True


python_serializer = PythonSerializer()


class PythonProvider:
    """只提供序列化器，接受任何格式。"""

    @property
    def id(self) -> str:
        return PROVIDER_ID

    def supported_formats(self, kind: ImplementationKind | str) -> Mapping[str, FormatDescriptor] | None:
        return ANY_FORMAT_SUPPORTED if as_kind(kind) is ImplementationKind.SERIALIZER else None

    def implementation(self, kind: ImplementationKind | str, fmt: Any = None) -> PythonSerializer | None:
        return python_serializer if as_kind(kind) is ImplementationKind.SERIALIZER else None
