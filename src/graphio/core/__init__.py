# src/graphio/core/__init__.py
"""
GraphIO 的核心協調器套件。

此套件負責載入設定，並將圖形建構、渲染與序列化串連成批次工作。
"""

from .config_loader import ConfigLoader

__all__ = [
    "ConfigLoader",
]
