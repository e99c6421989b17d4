# src/graphio/builders/__init__.py
"""
建構器套件，負責將鄰接表資料轉換為 networkx 圖形。
"""

from .graph_builder import build_graph, digraph, graph, weighted_digraph, weighted_graph

__all__ = [
    "build_graph",
    "digraph",
    "graph",
    "weighted_digraph",
    "weighted_graph",
]
