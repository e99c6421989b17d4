# src/graphio/graph_io.py
"""
渲染、檢視與序列化圖形的預設入口。

預設情況下，圖形以 Graphviz 渲染為 PNG，以系統預設應用程式檢視，
並以 Python 字面值表示法序列化/反序列化。預設值可由設定檔覆寫。
"""

# 1. 標準庫導入
import logging
import os
import threading
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
from graphio.core.config_loader import ConfigLoader
from graphio.exceptions import UnsupportedOperationError
from graphio.providers import graphviz_provider
from graphio.providers.base import ImplementationKind, IOImplementation
from graphio.providers.format_token import parse_format_token
from graphio.providers.registry import ProviderRegistry, implementation


def _resolve_default(
    loader: ConfigLoader, kind: ImplementationKind, registry: ProviderRegistry | None
) -> IOImplementation:
    provider_id, fmt = loader.default_for(kind.value)
    impl = implementation(provider_id, kind, fmt, registry)
    if impl is None:
        raise UnsupportedOperationError(f"Provider {provider_id!r} has no {kind.value} for format {fmt!r}.")
    logging.debug(f"預設 {kind.value}: {impl!r}")
    return impl


class GraphIO:
    """
    持有預設的渲染器、檢視器與序列化器。

    `options` 只會傳給 Graphviz 提供的實作 (例如逾時、佈局引擎、圖形名稱)。
    """

    def __init__(
        self,
        renderer: IOImplementation,
        viewer: IOImplementation,
        serializer: IOImplementation,
        options: dict[str, Any] | None = None,
    ):
        self.renderer = renderer
        self.viewer = viewer
        self.serializer = serializer
        self.options = dict(options or {})

    @classmethod
    def from_config(cls, loader: ConfigLoader | None = None, registry: ProviderRegistry | None = None) -> "GraphIO":
        loader = loader or ConfigLoader()
        return cls(
            renderer=_resolve_default(loader, ImplementationKind.RENDERER, registry),
            viewer=_resolve_default(loader, ImplementationKind.VIEWER, registry),
            serializer=_resolve_default(loader, ImplementationKind.SERIALIZER, registry),
            options=loader.graphviz_options(),
        )

    def _options_for(self, impl: IOImplementation, options: dict[str, Any], dot_only: bool = False) -> dict[str, Any]:
        if impl.provider_id != graphviz_provider.PROVIDER_ID:
            return options
        defaults = self.options
        if dot_only:
            defaults = {k: v for k, v in defaults.items() if k in graphviz_provider.DOT_OPTION_KEYS}
        return {**defaults, **options}

    def render(self, graph: nx.Graph, **options: Any) -> Any:
        """以預設渲染器渲染圖形。"""
        return self.renderer.render(graph, **self._options_for(self.renderer, options))

    def render_to_file(self, graph: nx.Graph, path: str | os.PathLike, **options: Any) -> Path:
        """以預設渲染器將圖形渲染到指定檔案。"""
        return self.renderer.render_to_file(graph, path, **self._options_for(self.renderer, options))

    def view(self, obj: Any, **options: Any) -> Any:
        """
        檢視圖形或已渲染的資料。

        圖形會先以預設渲染器渲染，再以渲染格式作為副檔名交給預設檢視器；
        若檢視器與渲染器來自同一提供者，則直接交給檢視器處理。
        """
        if not isinstance(obj, nx.Graph):
            return self.viewer.view(obj, **self._options_for(self.viewer, options))
        if self.viewer.provider_id == self.renderer.provider_id:
            return self.viewer.view(obj, **self._options_for(self.viewer, options))
        data = self.render(obj, **options)
        extension = parse_format_token(self.renderer.format_id).base
        return self.viewer.view_data(data, extension=extension)

    def view_file(self, path: str | os.PathLike) -> Any:
        """以預設檢視器開啟檔案。"""
        return self.viewer.view_file(path)

    def encode(self, graph: nx.Graph) -> Any:
        """以預設序列化器序列化圖形。"""
        return self.serializer.encode(graph, **self._options_for(self.serializer, {}, dot_only=True))

    def decode(self, data: Any) -> nx.Graph:
        """以預設序列化器反序列化資料，回傳圖形。"""
        return self.serializer.decode(data)


_default_io: GraphIO | None = None
_default_io_lock = threading.Lock()


def get_default_io() -> GraphIO:
    """回傳全域預設的 GraphIO；第一次呼叫時以預設設定建立。"""
    global _default_io
    if _default_io is None:
        with _default_io_lock:
            if _default_io is None:
                _default_io = GraphIO.from_config()
    return _default_io


def set_default_io(graph_io: GraphIO | None) -> None:
    """替換全域預設的 GraphIO；傳入 None 會在下次使用時重新建立。"""
    global _default_io
    with _default_io_lock:
        _default_io = graph_io


def render(graph: nx.Graph, **options: Any) -> Any:
    return get_default_io().render(graph, **options)


def render_to_file(graph: nx.Graph, path: str | os.PathLike, **options: Any) -> Path:
    return get_default_io().render_to_file(graph, path, **options)


def view(obj: Any, **options: Any) -> Any:
    return get_default_io().view(obj, **options)


def view_file(path: str | os.PathLike) -> Any:
    return get_default_io().view_file(path)


def encode(graph: nx.Graph) -> Any:
    return get_default_io().encode(graph)


def decode(data: Any) -> nx.Graph:
    return get_default_io().decode(data)
