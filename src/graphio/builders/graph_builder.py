# src/graphio/builders/graph_builder.py
"""
將鄰接表 (adjacency mapping) 轉換為 networkx 圖形。

鄰接表可以是 `{"a": ["b", "c"], "b": []}` 的形式，
或以 `{"a": {"b": 2.5}}` 的形式同時指定邊的權重。
"""
# 1. 標準庫導入
import logging
from collections.abc import Mapping
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
# (無)

DEFAULT_WEIGHT = 1


def build_graph(
    adjacency: Mapping[Any, Any] | None,
    directed: bool = False,
    weighted: bool = False,
) -> nx.Graph:
    """
    依鄰接表建構圖形。

    Args:
        adjacency: 節點 -> 鄰居列表，或節點 -> {鄰居: 權重}。None 視為空圖。
        directed: 是否建立有向圖。
        weighted: 是否為每條邊設定 `weight` 屬性 (列表形式的鄰居使用權重 1)。

    Returns:
        nx.Graph 或 nx.DiGraph。
    """
    graph: nx.Graph = nx.DiGraph() if directed else nx.Graph()
    for node, neighbors in (adjacency or {}).items():
        graph.add_node(node)
        if not neighbors:
            continue
        if isinstance(neighbors, Mapping):
            items = neighbors.items()
        else:
            items = ((neighbor, DEFAULT_WEIGHT) for neighbor in neighbors)
        for neighbor, weight in items:
            if weighted:
                graph.add_edge(node, neighbor, weight=weight)
            else:
                graph.add_edge(node, neighbor)

    logging.debug(
        f"圖形建構完成：{graph.number_of_nodes()} 個節點，{graph.number_of_edges()} 條邊 "
        f"(directed={directed}, weighted={weighted})。"
    )
    return graph


def graph(adjacency: Mapping[Any, Any] | None) -> nx.Graph:
    return build_graph(adjacency)


def digraph(adjacency: Mapping[Any, Any] | None) -> nx.DiGraph:
    return build_graph(adjacency, directed=True)


def weighted_graph(adjacency: Mapping[Any, Any] | None) -> nx.Graph:
    return build_graph(adjacency, weighted=True)


def weighted_digraph(adjacency: Mapping[Any, Any] | None) -> nx.DiGraph:
    return build_graph(adjacency, directed=True, weighted=True)
