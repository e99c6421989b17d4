# src/graphio/providers/graphviz_provider.py
"""
以 Graphviz 實作的 I/O 提供者。

- 渲染器：支援 Graphviz 大部分的圖片/文件輸出格式，預設為 png。
- 檢視器：Graphviz 內建的視窗畫布，預設為 xlib (僅限 X Window 系統)。
- 序列化器：dot 系列的文字格式，預設使用 gv 而非 dot (後者被 MS Word 用於範本)；
  目前只支援編碼，不支援解碼。

格式可寫成 `format[:renderer[:formatter]]` (例如 `png:cairo` 或 `png:cairo:gd`)，
用來指定 Graphviz 內部使用的渲染器與格式器。
"""

# 1. 標準庫導入
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
from graphio.exceptions import UnsupportedDataError, UnsupportedOperationError
from graphio.providers.base import (
    Capability,
    FormatDescriptor,
    ImplementationKind,
    IOImplementation,
    as_kind,
    build_format_table,
)
from graphio.providers.format_token import parse_format_token
from graphio.renderers.dot_encoder import encode_dot
from graphio.renderers.layout_selector import select_layout_engine
from graphio.renderers.process_adapter import GraphvizResult, run_graphviz

PROVIDER_ID = "graphviz"

# http://www.graphviz.org/content/output-formats
# (id, 名稱, 是否二進位, 說明)
RENDER_FORMATS: list[tuple[str, str, bool, str]] = [
    ("bmp", "Bmp", True, "Windows Bitmap Format."),
    ("cgimage", "CGImage", True, "CGImage bitmap format."),
    ("eps", "Eps", False, "Encapsulated PostScript."),
    ("exr", "Exr", True, "OpenEXR."),
    ("fig", "Fig", False, "FIG graphics language."),
    ("gd", "Gd", True, "Internal GD library format."),
    ("gd2", "Gd2", True, "Compressed version of 'Gd'."),
    ("gif", "Gif", True, "Graphics Interchange Format."),
    ("ico", "Ico", True, "Icon image file format."),
    ("imap", "Imap", False, "Server-side imagemap."),
    ("cmapx", "Cmapx", False, "Client-side imagemap."),
    ("imap_np", "ImapNP", False, "Same as 'Imap', except only rectangles are used as active areas."),
    ("cmapx_np", "CmapxNP", False, "Same as 'Cmapx', except only rectangles are used as active areas."),
    ("jpe", "Jpe", True, "The JPEG image format."),
    ("jpeg", "Jpeg", True, "The JPEG image format."),
    ("jpg", "Jpg", True, "The JPEG image format."),
    ("pct", "Pct", True, "PICT image format."),
    ("pict", "Pict", True, "PICT image format."),
    ("pdf", "Pdf", True, "Portable Document Format."),
    ("pic", "Pic", False, "Kernighan's PIC graphics language."),
    ("png", "Png", True, "Portable Network Graphics format."),
    ("pov", "Pov", False, "POV-Ray markup language [prototype]."),
    ("ps", "Ps", False, "PostScript."),
    ("ps2", "Ps2", True, "PostScript for PDF."),
    ("psd", "Psd", True, "Adobe PhotoShop PSD file format."),
    ("sgi", "Sgi", True, "SGI image file format."),
    ("svg", "Svg", False, "Scalable Vector Graphics format."),
    ("svgz", "SvgZ", True, "Compressed SVG format."),
    ("tif", "Tif", True, "Tagged Image File Format."),
    ("tiff", "Tiff", True, "Tagged Image File Format."),
    ("tga", "Tga", True, "Truevision TGA or TARGA format."),
    ("tk", "Tk", False, "Text-based TK graphics primitives."),
    ("vml", "Vml", False, "Vector Markup Language; 'Svg' is usually preferred."),
    ("vmlz", "VmlZ", True, "Compressed VML format; 'SvgZ' is usually preferred."),
    ("vrml", "Vrml", False, "Virtual Reality Modeling Language format; requires nodes to have a 'Z' attribute."),
    ("wbmp", "WBmp", True, "Wireless BitMap format; monochrome format usually used for mobile computing devices."),
    ("webp", "WebP", True, "Google's WebP format; requires Graphviz >= 2.29.0."),
]

VIEW_FORMATS: list[tuple[str, str, bool, str]] = [
    ("gtk", "Gtk", True, "GTK canvas."),
    ("xlib", "Xlib", True, "Xlib canvas."),
    ("x11", "X11", True, "Xlib canvas."),
]

# http://www.graphviz.org/content/output-formats#axdot
# (xdot 版本, 所需 Graphviz 版本, 變更)
XDOT_VERSIONS: list[tuple[str, str, str]] = [
    ("1.0", "1.9", "Initial version."),
    ("1.1", "2.8", "First plug-in version"),
    ("1.2", "2.13", "Support image operator I"),
    ("1.3", "2.31", "Add numerical precision"),
    ("1.4", "2.32", "Add gradient colors"),
    (
        "1.5",
        "2.34",
        "Fix text layout problem; fix inverted vector in gradient; support version-specific output; "
        "new t op for text characteristics",
    ),
    ("1.6", "2.35", "Add STRIKE-THROUGH bit for t"),
    ("1.7", "2.37", "Add OVERLINE for t"),
]

SERIAL_FORMATS: list[tuple[str, str, bool, str]] = [
    ("plain", "Plain", False, "Simple text format."),
    ("plain-ext", "PlainExt", False, "Same as 'Plain', but provides port names on head and tail nodes when applicable."),
    ("canon", "Canon", False, "Pretty-printed Dot output with no layout performed."),
    ("dot", "Dot", False, "Reproduces the input along with layout information; 'Gv' is now preferred."),
    ("gv", "Gv", False, "Same as 'Dot', preferred graphviz format."),
    ("xdot", "XDot", False, "Same as 'Dot', but provides even more information on how the graph is drawn."),
] + [
    (
        f"xdot{xdot_version.replace('.', '')}",
        f"XDot{xdot_version}",
        False,
        f"Same as 'XDot', but at version {xdot_version} ({change}); requires graphviz >= {graphviz_version}",
    )
    for xdot_version, graphviz_version, change in XDOT_VERSIONS
]

RENDER_FORMAT_DESCRIPTORS = build_format_table(RENDER_FORMATS)
VIEW_FORMAT_DESCRIPTORS = build_format_table(VIEW_FORMATS)
SERIAL_FORMAT_DESCRIPTORS = build_format_table(SERIAL_FORMATS)

DEFAULT_FORMATS: dict[ImplementationKind, str] = {
    ImplementationKind.RENDERER: "png",
    ImplementationKind.VIEWER: "xlib",
    ImplementationKind.SERIALIZER: "gv",
}

DOT_OPTION_KEYS = frozenset({"graph_name", "node_label", "edge_label", "graph_attrs"})
PROCESS_OPTION_KEYS = frozenset({"algorithm", "in_encoding", "out_encoding", "timeout"})


def _split_options(options: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """將選項拆成 DOT 編碼選項與程序執行選項。"""
    unknown = set(options) - DOT_OPTION_KEYS - PROCESS_OPTION_KEYS
    if unknown:
        raise TypeError(f"Unexpected options: {', '.join(sorted(unknown))}")
    dot_options = {k: v for k, v in options.items() if k in DOT_OPTION_KEYS}
    process_options = {k: v for k, v in options.items() if k in PROCESS_OPTION_KEYS}
    return dot_options, process_options


def _require_graph(graph: Any) -> nx.Graph:
    if not isinstance(graph, nx.Graph):
        raise UnsupportedDataError(f"{type(graph).__name__} isn't a graph.")
    return graph


class _GraphvizImplementation(IOImplementation):
    """Graphviz 實作的共同部分：綁定格式描述子與預設逾時。"""

    def __init__(self, format_descriptor: FormatDescriptor, render_timeout: float | None = None):
        super().__init__(PROVIDER_ID, format_descriptor)
        self._render_timeout = render_timeout

    def _run(self, data: Any, output: Any, graph: Any, process_options: dict[str, Any]) -> GraphvizResult:
        options = dict(process_options)
        if options.get("algorithm") is None:
            options["algorithm"] = select_layout_engine(graph)
        options.setdefault("timeout", self._render_timeout)
        return run_graphviz(self.format_descriptor, data, output, **options)


class GraphvizRenderer(_GraphvizImplementation):
    _capabilities = frozenset({Capability.RENDER, Capability.RENDER_TO_FILE})

    def render(self, graph: nx.Graph, **options: Any) -> bytes | str:
        """渲染圖形並回傳 Graphviz 的標準輸出 (二進位格式為 bytes，文字格式為 str)。"""
        dot_options, process_options = _split_options(options)
        dot_source = encode_dot(_require_graph(graph), **dot_options)
        return self._run(dot_source, None, graph, process_options).stdout

    def render_to_file(self, graph: nx.Graph, path: str | os.PathLike, **options: Any) -> Path:
        """渲染圖形至檔案，回傳該檔案的 Path。"""
        dot_options, process_options = _split_options(options)
        dot_source = encode_dot(_require_graph(graph), **dot_options)
        target = Path(path)
        self._run(dot_source, target, graph, process_options)
        logging.info(f"圖表已成功儲存至: {target}")
        return target


class GraphvizViewer(_GraphvizImplementation):
    _capabilities = frozenset({Capability.VIEW, Capability.VIEW_DATA, Capability.VIEW_FILE})

    def view(self, obj: Any, **options: Any) -> GraphvizResult:
        """以 Graphviz 視窗顯示圖形、DOT 文字或 DOT 檔案。"""
        if isinstance(obj, os.PathLike):
            return self.view_file(obj, **options)
        if isinstance(obj, str):
            return self.view_data(obj, **options)
        dot_options, process_options = _split_options(options)
        dot_source = encode_dot(_require_graph(obj), **dot_options)
        return self._run(dot_source, None, obj, process_options)

    def view_data(self, data: str, **options: Any) -> GraphvizResult:
        if not isinstance(data, str):
            raise UnsupportedDataError(f"{type(data).__name__} isn't DOT text.")
        _, process_options = _split_options(options)
        return self._run(data, None, None, process_options)

    def view_file(self, path: str | os.PathLike, **options: Any) -> GraphvizResult:
        _, process_options = _split_options(options)
        return self._run(Path(path), None, None, process_options)


class GraphvizSerializer(_GraphvizImplementation):
    _capabilities = frozenset({Capability.ENCODE})

    def encode(self, graph: nx.Graph, **options: Any) -> str:
        """回傳 DOT 格式文字；只接受 DOT 編碼選項。"""
        dot_options, _ = _split_options(options)
        return encode_dot(_require_graph(graph), **dot_options)

    def decode(self, data: Any, **options: Any) -> nx.Graph:
        raise UnsupportedOperationError(f"Parsing of {self.format_descriptor.short_name} not implemented yet.")

    def can_encode(self) -> bool:
        return True

    def can_decode(self) -> bool:
        return False


_TABLES: dict[ImplementationKind, Mapping[str, FormatDescriptor]] = {
    ImplementationKind.RENDERER: RENDER_FORMAT_DESCRIPTORS,
    ImplementationKind.VIEWER: VIEW_FORMAT_DESCRIPTORS,
    ImplementationKind.SERIALIZER: SERIAL_FORMAT_DESCRIPTORS,
}

_IMPLEMENTATIONS: dict[ImplementationKind, type[_GraphvizImplementation]] = {
    ImplementationKind.RENDERER: GraphvizRenderer,
    ImplementationKind.VIEWER: GraphvizViewer,
    ImplementationKind.SERIALIZER: GraphvizSerializer,
}


class GraphvizProvider:
    """
    Graphviz 提供者。

    Args:
        render_timeout: 交給每個實作的預設逾時秒數；None 表示無限等待。
    """

    def __init__(self, render_timeout: float | None = None):
        self._render_timeout = render_timeout

    @property
    def id(self) -> str:
        return PROVIDER_ID

    def supported_formats(self, kind: ImplementationKind | str) -> Mapping[str, FormatDescriptor] | None:
        resolved = as_kind(kind)
        return _TABLES.get(resolved) if resolved else None

    def implementation(self, kind: ImplementationKind | str, fmt: Any = None) -> _GraphvizImplementation | None:
        """
        回傳指定種類與格式的實作；未指定格式時使用該種類的預設格式。

        格式不在支援表中時回傳 None；格式字串本身無法解析時拋出 MalformedFormatError。
        """
        resolved = as_kind(kind)
        if fmt is None:
            if resolved is None:
                return None
            fmt = DEFAULT_FORMATS[resolved]

        token = parse_format_token(fmt)
        if resolved is None:
            return None

        descriptor = _TABLES[resolved].get(token.base)
        if descriptor is None:
            logging.debug(f"Graphviz 不支援 {resolved.value} 格式 '{token.full}'。")
            return None
        if token.is_compound:
            descriptor = descriptor.with_id(token.full)
        return _IMPLEMENTATIONS[resolved](descriptor, self._render_timeout)
