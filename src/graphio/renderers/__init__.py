# src/graphio/renderers/__init__.py
"""
渲染相關的純函式與外部程序轉接器：DOT 編碼、佈局引擎選擇、Graphviz 呼叫。
"""

from .dot_encoder import distinct_edges, dot_attrs, dot_escape, encode_dot
from .layout_selector import select_layout_engine
from .process_adapter import GraphvizResult, build_command, run_graphviz

__all__ = [
    "GraphvizResult",
    "build_command",
    "distinct_edges",
    "dot_attrs",
    "dot_escape",
    "encode_dot",
    "run_graphviz",
    "select_layout_engine",
]
