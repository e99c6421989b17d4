# src/graphio/renderers/dot_encoder.py
"""
將 networkx 圖形轉換為 DOT 格式文字。

這是一個純函式：相同的圖形與選項永遠產生位元組完全相同的輸出，
序列化器與渲染器都以此輸出作為與 Graphviz 之間的契約。
"""

# 1. 標準庫導入
from collections.abc import Callable, Hashable, Iterator, Mapping
from enum import Enum
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
from graphio.exceptions import UnsupportedDataError

NodeLabelFn = Callable[[Hashable], Any]
EdgeLabelFn = Callable[[Hashable, Hashable], Any]

_ESCAPES = str.maketrans({'"': '\\"', "\n": "\\n"})


def dot_escape(text: str) -> str:
    """在引號字串內跳脫 `"` 與換行，其他字元一律保留。"""
    return text.translate(_ESCAPES)


def _dot_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def dot_attrs(attrs: Mapping[Any, Any] | None) -> str | None:
    """
    產生 `["key"="value",...]` 形式的屬性列表。

    只輸出字串化後非空的值；沒有任何可輸出的屬性時回傳 None。
    """
    if not attrs:
        return None
    pairs = []
    for key, value in attrs.items():
        text = _dot_value(value)
        if text:
            pairs.append(f'"{dot_escape(_dot_value(key))}"="{dot_escape(text)}"')
    if not pairs:
        return None
    return f"[{','.join(pairs)}]"


def distinct_edges(graph: nx.Graph) -> Iterator[tuple[Hashable, Hashable]]:
    """依插入順序產生不重複的邊；無向圖中 (a, b) 與 (b, a) 只出現一次。"""
    directed = graph.is_directed()
    seen: set[Any] = set()
    for u, v in graph.edges():
        key = (u, v) if directed else frozenset((u, v))
        if key in seen:
            continue
        seen.add(key)
        yield u, v


def edge_attributes(graph: nx.Graph, u: Hashable, v: Hashable) -> dict[str, Any]:
    """回傳邊屬性的副本；多重圖取第一條平行邊的屬性。"""
    data = graph.get_edge_data(u, v) or {}
    if graph.is_multigraph():
        data = next(iter(data.values()), {})
    return dict(data)


def encode_dot(
    graph: nx.Graph,
    *,
    graph_name: str = "graph",
    node_label: NodeLabelFn | None = None,
    edge_label: EdgeLabelFn | None = None,
    graph_attrs: Mapping[str, Any] | None = None,
) -> str:
    """
    將圖形輸出為 DOT 格式字串。

    Args:
        graph: networkx 圖形 (有向或無向)。
        graph_name: 圖形名稱。
        node_label: node -> 標籤；預設讀取節點的 `label` 屬性。
        edge_label: (n1, n2) -> 標籤；預設讀取邊的 `label` 屬性。加權圖一律以權重作為標籤。
        graph_attrs: 以 `graph [...]` 敘述原樣輸出的頂層屬性。

    Returns:
        DOT 格式的圖形描述字串 (結尾沒有換行)。

    Raises:
        UnsupportedDataError: graph 不是 networkx 圖形。
    """
    if not isinstance(graph, nx.Graph):
        raise UnsupportedDataError(f"{type(graph).__name__} isn't a graph.")

    if node_label is None:
        def node_label(node):
            return graph.nodes[node].get("label")

    if edge_label is None:
        def edge_label(u, v):
            return edge_attributes(graph, u, v).get("label")

    def node_text(node: Hashable) -> str:
        label = node_label(node)
        return dot_escape(_dot_value(node if label is None else label))

    directed = graph.is_directed()
    weighted = nx.is_weighted(graph)
    arrow = " -> " if directed else " -- "

    lines = [f'{"digraph" if directed else "graph"} "{dot_escape(str(graph_name))}" {{']

    rendered_graph_attrs = dot_attrs(graph_attrs)
    if rendered_graph_attrs:
        lines.append(f"  graph {rendered_graph_attrs}")

    for u, v in distinct_edges(graph):
        attrs = edge_attributes(graph, u, v)
        # 權重只以標籤呈現，不另外輸出 weight 屬性
        label = attrs.pop("weight") if weighted else edge_label(u, v)
        attrs["label"] = label
        line = f'  "{node_text(u)}"{arrow}"{node_text(v)}"'
        if label is not None or len(attrs) > 1:
            rendered = dot_attrs(attrs)
            if rendered:
                line += f" {rendered}"
        lines.append(line)

    for node in graph.nodes:
        attrs = dict(graph.nodes[node])
        label = node_label(node)
        if label is not None:
            attrs["label"] = label
        line = f'  "{node_text(node)}"'
        rendered = dot_attrs(attrs)
        if rendered:
            line += f" {rendered}"
        lines.append(line)

    lines.append("}")
    return "\n".join(lines)
