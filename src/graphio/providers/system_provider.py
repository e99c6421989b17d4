# src/graphio/providers/system_provider.py
"""
使用系統/桌面資源的通用檢視器。
"""

# 1. 標準庫導入
import contextlib
import os
from collections.abc import Mapping
from pathlib import Path
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
from graphio.utils.system_utils import open_data, open_path

PROVIDER_ID = "system"


def _is_existing_file(obj: Any) -> bool:
    if not isinstance(obj, str | os.PathLike):
        return False
    with contextlib.suppress(OSError, ValueError):
        return Path(obj).is_file()
    return False


class SystemViewer(IOImplementation):
    """以作業系統預設的應用程式開啟已渲染的資料或檔案。"""

    _capabilities = frozenset({Capability.VIEW, Capability.VIEW_DATA, Capability.VIEW_FILE})

    def __init__(self):
        super().__init__(PROVIDER_ID, ANY_FORMAT)

    def view(self, obj: Any, **options: Any) -> Path:
        """
        顯示字串/位元組資料或檔案。

        Raises:
            UnsupportedDataError: 傳入的是尚未渲染或序列化的圖形。
        """
        if isinstance(obj, nx.Graph):
            raise UnsupportedDataError("Graph not rendered or serialized for viewing.")
        if _is_existing_file(obj):
            return self.view_file(obj, **options)
        return self.view_data(obj, **options)

    def view_data(self, data: Any, extension: Any = None, **options: Any) -> Path:
        return open_data(data, extension)

    def view_file(self, path: str | os.PathLike, **options: Any) -> Path:
        return open_path(Path(path))


system_viewer = SystemViewer()


class SystemProvider:
    """只提供檢視器，接受任何格式；指定的格式會被忽略。"""

    @property
    def id(self) -> str:
        return PROVIDER_ID

    def supported_formats(self, kind: ImplementationKind | str) -> Mapping[str, FormatDescriptor] | None:
        return ANY_FORMAT_SUPPORTED if as_kind(kind) is ImplementationKind.VIEWER else None

    def implementation(self, kind: ImplementationKind | str, fmt: Any = None) -> SystemViewer | None:
        return system_viewer if as_kind(kind) is ImplementationKind.VIEWER else None
