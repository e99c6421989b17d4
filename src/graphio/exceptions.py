# src/graphio/exceptions.py
"""
GraphIO 的例外階層。

所有失敗都在單次呼叫內同步回報給呼叫者，任何元件都不會自行重試。
「不支援的格式」不是例外，而是以 None (無可用實作) 表示。
"""

# 1. 標準庫導入
# (無)

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


class GraphIOError(Exception):
    """GraphIO 所有例外的共同基底類別。"""


class UnknownProviderError(GraphIOError, LookupError):
    """請求的提供者 ID 尚未註冊。"""

    def __init__(self, provider_id: object, known_ids: list[str] | None = None):
        self.provider_id = provider_id
        self.known_ids = known_ids or []
        message = f"No I/O provider identified by {provider_id!r}."
        if self.known_ids:
            message += f" Available: {', '.join(self.known_ids)}"
        super().__init__(message)


class MalformedFormatError(GraphIOError, ValueError):
    """格式字串不符合 `format[:renderer[:formatter]]` 語法。"""

    def __init__(self, token: object):
        self.token = token
        super().__init__(f"Format {token!r} not recognized, must be in the form 'format[:renderer[:formatter]]'.")


class ExternalProcessError(GraphIOError, RuntimeError):
    """
    外部佈局引擎執行失敗 (非零結束碼，或錯誤輸出不為空)。

    Attributes:
        command: 實際執行的參數列表。
        stderr: 擷取到的錯誤輸出文字。
        returncode: 結束碼；程序未能正常結束時為 None。
        source: 透過標準輸入傳入的圖形描述文字 (若有)，原樣保留以便診斷。
    """

    def __init__(
        self,
        command: list[str],
        stderr: str = "",
        returncode: int | None = None,
        source: str | None = None,
        reason: str = "Graphviz command failed",
    ):
        self.command = list(command)
        self.stderr = stderr
        self.returncode = returncode
        self.source = source
        super().__init__(f"{reason}:\n  command={self.command!r}\n  err={stderr}\n  exit value={returncode}")


class EngineNotFoundError(ExternalProcessError):
    """找不到佈局引擎的執行檔。"""

    def __init__(self, command: list[str], source: str | None = None):
        super().__init__(
            command,
            stderr=f"executable {command[0]!r} not found on PATH",
            returncode=None,
            source=source,
            reason="Graphviz executable not found",
        )


class RenderTimeoutError(ExternalProcessError):
    """佈局引擎執行超過設定的逾時秒數。"""

    def __init__(self, command: list[str], timeout: float, stderr: str = "", source: str | None = None):
        self.timeout = timeout
        super().__init__(
            command,
            stderr=stderr,
            returncode=None,
            source=source,
            reason=f"Graphviz command timed out after {timeout} seconds",
        )


class UnsupportedDataError(GraphIOError, TypeError):
    """傳入的資料型態無法被此序列化器、渲染器或檢視器處理。"""


class UnsupportedOperationError(GraphIOError, NotImplementedError):
    """此實作未提供所請求的操作。"""


class UnsupportedPlatformError(GraphIOError, OSError):
    """無法辨識目前的作業系統，不知道如何開啟檔案。"""
