# src/graphio/utils/system_utils.py
"""
與作業系統/桌面環境互動的工具：偵測作業系統、儲存檔案、以預設應用程式開啟檔案。
"""

# 1. 標準庫導入
import atexit
import contextlib
import logging
import os
import subprocess
import sys
import tempfile
import threading
from collections.abc import Iterator
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
from graphio.exceptions import UnsupportedDataError, UnsupportedPlatformError

DEFAULT_EXTENSION = "tmp"
TEMP_FILE_PREFIX = "graphio-"


def detect_os(platform_name: str = sys.platform) -> str | None:
    """回傳 "win"、"mac"、"linux"、"unix" 其中之一；無法辨識時回傳 None。"""
    name = platform_name.lower()
    if name.startswith(("win", "cygwin", "msys")):
        return "win"
    if name.startswith("darwin"):
        return "mac"
    if name.startswith("linux"):
        return "linux"
    if name.startswith(("freebsd", "openbsd", "netbsd", "sunos", "aix")):
        return "unix"
    return None


def _open_command(path: Path, os_kind: str | None) -> list[str]:
    if os_kind == "mac":
        return ["open", str(path)]
    if os_kind == "win":
        return ["cmd", "/c", "start", "", path.absolute().as_uri()]
    if os_kind in ("unix", "linux"):
        return ["xdg-open", str(path)]
    raise UnsupportedPlatformError(f"Don't know how to open a file on {sys.platform}.")


def desktop_open(path: str | os.PathLike, os_kind: str | None = None) -> subprocess.CompletedProcess:
    """
    以桌面環境的預設應用程式開啟檔案。

    直接呼叫系統指令 (open / cmd start / xdg-open)，不經由 GUI 工具包。

    Raises:
        UnsupportedPlatformError: 無法辨識目前的作業系統。
    """
    target = Path(path)
    command = _open_command(target, os_kind or detect_os())
    logging.debug(f"以預設應用程式開啟: {' '.join(command)}")
    process = subprocess.run(command, capture_output=True)
    if process.returncode != 0:
        error_message = (process.stderr or b"").decode("utf-8", errors="ignore")
        logging.warning(f"開啟檔案 '{target}' 時指令返回 {process.returncode}: {error_message}")
    return process


def save(data: Any, target: str | os.PathLike) -> Path:
    """
    將資料 (圖形、字串或位元組) 寫入指定檔案並回傳其 Path。

    圖形會以 python 序列化器的文字形式儲存。

    Raises:
        UnsupportedDataError: 資料不是圖形、字串或位元組。
    """
    path = Path(target)
    if isinstance(data, nx.Graph):
        from graphio.providers.python_provider import encode_graph

        data = encode_graph(data)
    if isinstance(data, str):
        path.write_text(data, encoding="utf-8")
    elif isinstance(data, bytes | bytearray):
        path.write_bytes(bytes(data))
    else:
        raise UnsupportedDataError(f"{type(data).__name__} isn't a graph, string, or byte array.")
    return path


def _normalize_extension(extension: Any) -> str:
    ext = getattr(extension, "value", extension)
    if ext is None or (isinstance(ext, str) and not ext.strip()):
        ext = DEFAULT_EXTENSION
    ext = str(ext)
    return ext if ext.startswith(".") else f".{ext}"


def _remove_quietly(path: Path) -> None:
    with contextlib.suppress(OSError):
        path.unlink()


_pending_removal: set[Path] = set()
_pending_lock = threading.Lock()


@atexit.register
def _remove_pending_files() -> None:
    with _pending_lock:
        paths = list(_pending_removal)
        _pending_removal.clear()
    for path in paths:
        _remove_quietly(path)


def open_data(data: Any, extension: Any = None) -> Path:
    """
    將資料寫入帶有指定副檔名的暫存檔，並以預設應用程式開啟。

    副檔名可含或不含前導的點；None 或空白時使用 "tmp"。
    暫存檔在直譯器結束時刪除。回傳暫存檔的 Path。
    """
    suffix = _normalize_extension(extension)
    fd, name = tempfile.mkstemp(prefix=f"{TEMP_FILE_PREFIX}{suffix[1:]}-", suffix=suffix)
    os.close(fd)
    path = Path(name)
    with _pending_lock:
        _pending_removal.add(path)
    try:
        save(data, path)
    except UnsupportedDataError:
        with _pending_lock:
            _pending_removal.discard(path)
        _remove_quietly(path)
        raise
    desktop_open(path)
    return path


def open_path(target: Any, extension: Any = None) -> Path:
    """
    開啟既有檔案；若 target 不是既有檔案，則視為資料寫入暫存檔後開啟。
    """
    if isinstance(target, str | os.PathLike) and extension is None:
        candidate = Path(target)
        with contextlib.suppress(OSError, ValueError):
            if candidate.is_file():
                desktop_open(candidate)
                return candidate
    if isinstance(target, os.PathLike):
        raise FileNotFoundError(f"File not found: {target}")
    return open_data(target, extension)


@contextlib.contextmanager
def temporary_file(suffix: str = "") -> Iterator[Path]:
    """產生一個暫存檔路徑，離開區塊時 (包含例外路徑) 必定刪除。"""
    fd, name = tempfile.mkstemp(prefix=TEMP_FILE_PREFIX, suffix=_normalize_extension(suffix) if suffix else "")
    os.close(fd)
    path = Path(name)
    try:
        yield path
    finally:
        _remove_quietly(path)
