# src/graphio/renderers/process_adapter.py
"""
封裝對外部 Graphviz 佈局引擎的呼叫。

所有的參數組裝、輸入/輸出編碼與結束狀態判斷都集中在此模組，
提供者不直接產生子程序。

成功條件：結束碼為 0 且錯誤輸出為空白。引擎即使結束碼為 0，
只要在錯誤輸出中印出警告，也會被視為失敗。
"""

# 1. 標準庫導入
import dataclasses
import logging
import os
import subprocess
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import graphviz

# 3. 本專案導入
from graphio.exceptions import (
    EngineNotFoundError,
    ExternalProcessError,
    RenderTimeoutError,
    UnsupportedDataError,
)
from graphio.providers.base import FormatDescriptor
from graphio.renderers.layout_selector import DEFAULT_ENGINE

DEFAULT_INPUT_ENCODING = "utf-8"

# 依格式決定輸出編碼：二進位格式回傳 bytes，文字格式以 UTF-8 解碼
BY_FORMAT: Any = object()


@dataclasses.dataclass(frozen=True)
class GraphvizResult:
    """一次成功執行的結果。stdout 在指定輸出檔時通常為空。"""

    command: list[str]
    stdout: bytes | str
    stderr: str
    returncode: int


def build_command(
    algorithm: str,
    format_id: str,
    output: str | os.PathLike | None = None,
    input_path: str | os.PathLike | None = None,
) -> list[str]:
    """組裝 `<engine> -T<format> [-o<output>] [<input>]` 參數列表。"""
    command = [str(algorithm), f"-T{format_id}"]
    if output is not None:
        command.append(f"-o{Path(output).absolute()}")
    if input_path is not None:
        command.append(str(Path(input_path).absolute()))
    return command


def _encode_input(data: Any, in_encoding: str) -> bytes:
    if isinstance(data, str):
        return data.encode(in_encoding)
    if isinstance(data, bytes | bytearray):
        return bytes(data)
    raise UnsupportedDataError(f"{type(data).__name__} isn't a string, bytes, or file path.")


def run_graphviz(
    format_descriptor: FormatDescriptor,
    data: Any = None,
    output: str | os.PathLike | None = None,
    *,
    algorithm: str = DEFAULT_ENGINE,
    in_encoding: str = DEFAULT_INPUT_ENCODING,
    out_encoding: str | None = BY_FORMAT,
    timeout: float | None = None,
) -> GraphvizResult:
    """
    執行一次 Graphviz 佈局引擎。

    Args:
        format_descriptor: 目標格式，其 ID 直接作為 `-T` 參數 (可為複合格式如 `png:cairo`)。
        data: DOT 文字 (以 in_encoding 編碼後由標準輸入傳入)、原始位元組、
              既有檔案的路徑 (os.PathLike，作為輸入檔參數)，或 None。
        output: 輸出檔路徑；為 None 時從標準輸出擷取結果。
        algorithm: 佈局引擎指令 (dot, neato, circo, ...)。
        in_encoding: 文字輸入的編碼。
        out_encoding: 標準輸出的解碼方式；None 表示回傳原始位元組。
        timeout: 逾時秒數；None 表示無限等待。

    Returns:
        GraphvizResult。

    Raises:
        ExternalProcessError: 結束碼非 0 或錯誤輸出不為空白。
        EngineNotFoundError: 找不到引擎執行檔。
        RenderTimeoutError: 超過逾時秒數。
    """
    if algorithm not in graphviz.ENGINES:
        logging.warning(f"佈局引擎 '{algorithm}' 不在 Graphviz 已知引擎清單中，仍嘗試執行。")

    input_path = data if isinstance(data, os.PathLike) else None
    command = build_command(algorithm, format_descriptor.id, output, input_path)
    source = data if isinstance(data, str) else None

    run_kwargs: dict[str, Any] = {"capture_output": True, "timeout": timeout}
    if input_path is None and data is not None:
        run_kwargs["input"] = _encode_input(data, in_encoding)
    else:
        run_kwargs["stdin"] = subprocess.DEVNULL

    if out_encoding is BY_FORMAT:
        out_encoding = None if format_descriptor.binary else "utf-8"

    logging.debug(f"執行 Graphviz 指令: {' '.join(command)}")
    try:
        process = subprocess.run(command, **run_kwargs)
    except FileNotFoundError as e:
        logging.error(f"Graphviz 執行檔 '{algorithm}' 未找到。請確保 Graphviz 已安裝並已加入系統 PATH。")
        raise EngineNotFoundError(command, source=source) from e
    except subprocess.TimeoutExpired as e:
        logging.error(f"Graphviz 渲染超時 (超過 {timeout} 秒)。")
        stderr = (e.stderr or b"").decode("utf-8", errors="ignore")
        raise RenderTimeoutError(command, timeout, stderr=stderr, source=source) from e

    stderr = (process.stderr or b"").decode("utf-8", errors="ignore")
    if process.returncode != 0 or stderr.strip():
        logging.error(f"Graphviz ({algorithm}) 執行時返回錯誤 (exit={process.returncode})。")
        logging.error(f"Graphviz 錯誤訊息:\n{stderr}")
        raise ExternalProcessError(command, stderr, process.returncode, source)

    stdout = process.stdout or b""
    if out_encoding is not None:
        stdout = stdout.decode(out_encoding)
    return GraphvizResult(command=command, stdout=stdout, stderr=stderr, returncode=process.returncode)
