# src/graphio/providers/base.py
"""
定義格式描述子、實作種類與各種 I/O 能力的協定。

核心概念：
1. FormatDescriptor: 描述單一格式 (ID、名稱、是否為二進位、說明) 的不可變值。
2. IOImplementation: 綁定於單一提供者與單一格式的無狀態實作。
3. Renderer / Viewer / Serializer: 以能力區分的協定，實作可同時具備多種能力。
"""

# 1. 標準庫導入
import dataclasses
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


class ImplementationKind(str, Enum):
    """實作種類。"""

    RENDERER = "renderer"
    VIEWER = "viewer"
    SERIALIZER = "serializer"


IMPLEMENTATION_KINDS: frozenset[ImplementationKind] = frozenset(ImplementationKind)


class Capability(str, Enum):
    """實作可以提供的單一操作。"""

    RENDER = "render"
    RENDER_TO_FILE = "render_to_file"
    VIEW = "view"
    VIEW_DATA = "view_data"
    VIEW_FILE = "view_file"
    ENCODE = "encode"
    DECODE = "decode"


def as_kind(kind: "ImplementationKind | str") -> ImplementationKind | None:
    """將字串或列舉轉換為 ImplementationKind；無法辨識時回傳 None。"""
    try:
        return ImplementationKind(kind)
    except ValueError:
        return None


@dataclasses.dataclass(frozen=True)
class FormatDescriptor:
    """
    描述一種資料格式，同時供程式與人類閱讀。

    兩個描述子只要 ID 相同即視為相等。
    """

    id: str
    short_name: str = dataclasses.field(compare=False)
    binary: bool = dataclasses.field(compare=False)
    description: str = dataclasses.field(compare=False)

    def with_id(self, new_id: str) -> "FormatDescriptor":
        """回傳只替換 ID 的副本 (用於複合格式字串)。"""
        return dataclasses.replace(self, id=new_id)


def build_format_table(rows: list[tuple[str, str, bool, str]]) -> Mapping[str, FormatDescriptor]:
    """
    將 (id, 名稱, 是否二進位, 說明) 列表轉換為以 ID 為鍵的唯讀對照表。

    空列表會得到空表，呼叫端應改以 None 代表「不支援」。
    """
    return MappingProxyType({row[0]: FormatDescriptor(*row) for row in rows})


ANY_FORMAT_ID = "any"
ANY_FORMAT = FormatDescriptor(ANY_FORMAT_ID, "Any", True, "Any format.")
ANY_FORMAT_SUPPORTED: Mapping[str, FormatDescriptor] = MappingProxyType({ANY_FORMAT_ID: ANY_FORMAT})


class IOImplementation:
    """
    所有實作的共同基底。

    子類別以 `_capabilities` 宣告自己支援的操作；實作不保存任何圖形狀態，
    可以重複使用，也可以跨執行緒共用。
    """

    _capabilities: frozenset[Capability] = frozenset()

    def __init__(self, provider_id: str, format_descriptor: FormatDescriptor):
        self._provider_id = provider_id
        self._format_descriptor = format_descriptor

    @property
    def provider_id(self) -> str:
        return self._provider_id

    @property
    def format_id(self) -> str:
        return self._format_descriptor.id

    @property
    def format_descriptor(self) -> FormatDescriptor:
        return self._format_descriptor

    @property
    def capabilities(self) -> frozenset[Capability]:
        return self._capabilities

    def supports(self, capability: Capability | str) -> bool:
        return Capability(capability) in self._capabilities

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self._provider_id!r}, format={self.format_id!r})"


@runtime_checkable
class Renderer(Protocol):
    """將圖形渲染為文字或二進位 (例如圖片) 格式；渲染結果不一定能還原回圖形。"""

    def render(self, graph: Any, **options: Any) -> Any:
        """回傳圖形的渲染資料。"""
        ...

    def render_to_file(self, graph: Any, path: str | Path, **options: Any) -> Path:
        """將圖形渲染到檔案，並回傳該檔案路徑。"""
        ...


@runtime_checkable
class Viewer(Protocol):
    """顯示圖形，通常是透過某種渲染結果。"""

    def view(self, obj: Any, **options: Any) -> Any:
        """顯示圖形、字串/位元組資料或檔案。"""
        ...

    def view_data(self, data: Any, **options: Any) -> Any:
        """顯示已渲染的資料。"""
        ...

    def view_file(self, path: str | Path, **options: Any) -> Any:
        """顯示檔案中已渲染的資料。"""
        ...


@runtime_checkable
class Serializer(Protocol):
    """將圖形序列化為可還原的文字或二進位格式。"""

    def encode(self, graph: Any, **options: Any) -> Any:
        ...

    def decode(self, data: Any, **options: Any) -> Any:
        ...

    def can_encode(self) -> bool:
        ...

    def can_decode(self) -> bool:
        ...


@runtime_checkable
class IOProvider(Protocol):
    """
    渲染器、檢視器與序列化器實作的來源。

    `supported_formats` 對不支援的種類回傳 None (而非空的對照表)；
    `implementation` 在找不到對應格式時回傳 None。
    """

    @property
    def id(self) -> str:
        ...

    def supported_formats(self, kind: ImplementationKind | str) -> Mapping[str, FormatDescriptor] | None:
        ...

    def implementation(self, kind: ImplementationKind | str, fmt: Any = None) -> IOImplementation | None:
        ...
