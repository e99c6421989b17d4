# src/graphio/__init__.py
"""
GraphIO：以可插拔的提供者渲染、檢視與序列化 networkx 圖形。

內建提供者 (graphviz、system、python) 在匯入 `graphio.providers` 時註冊。
"""

from . import providers
from .exceptions import (
    EngineNotFoundError,
    ExternalProcessError,
    GraphIOError,
    MalformedFormatError,
    RenderTimeoutError,
    UnknownProviderError,
    UnsupportedDataError,
    UnsupportedOperationError,
    UnsupportedPlatformError,
)
from .graph_io import (
    GraphIO,
    decode,
    encode,
    get_default_io,
    render,
    render_to_file,
    set_default_io,
    view,
    view_file,
)
from .providers import implementation, register_provider, renderer, resolve_provider, serializer, viewer

__all__ = [
    "EngineNotFoundError",
    "ExternalProcessError",
    "GraphIO",
    "GraphIOError",
    "MalformedFormatError",
    "RenderTimeoutError",
    "UnknownProviderError",
    "UnsupportedDataError",
    "UnsupportedOperationError",
    "UnsupportedPlatformError",
    "decode",
    "encode",
    "get_default_io",
    "implementation",
    "providers",
    "register_provider",
    "render",
    "render_to_file",
    "resolve_provider",
    "serializer",
    "set_default_io",
    "view",
    "view_file",
    "viewer",
]
