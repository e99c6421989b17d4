# src/graphio/renderers/layout_selector.py
"""
根據圖形形狀挑選預設的 Graphviz 佈局引擎。

只在呼叫者沒有明確指定引擎時使用，結果僅供參考。
"""

# 1. 標準庫導入
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
# (無)

DEFAULT_ENGINE = "dot"
CIRCULAR_ENGINE = "circo"
SPRING_ENGINE = "neato"
LARGE_DIRECTED_ENGINE = "neato"
LARGE_GRAPH_THRESHOLD = 100


def _holds(check, graph: nx.Graph) -> bool:
    # 空圖既不連通也不強連通
    try:
        return check(graph)
    except nx.NetworkXPointlessConcept:
        return False


def select_layout_engine(graph: Any) -> str:
    """
    決定最適合給定圖形的佈局引擎 (Graphviz 指令名稱)。

    - 不是圖形或為 None -> dot
    - 超過 100 個節點 -> 有向圖用 neato，否則 dot
    - 有向且強連通 -> circo；有向但不強連通 -> neato
    - 無向且連通 -> circo；無向但不連通 -> dot
    """
    if graph is None or not isinstance(graph, nx.Graph):
        return DEFAULT_ENGINE
    if graph.number_of_nodes() > LARGE_GRAPH_THRESHOLD:
        return LARGE_DIRECTED_ENGINE if graph.is_directed() else DEFAULT_ENGINE
    if graph.is_directed():
        return CIRCULAR_ENGINE if _holds(nx.is_strongly_connected, graph) else SPRING_ENGINE
    return CIRCULAR_ENGINE if _holds(nx.is_connected, graph) else DEFAULT_ENGINE
