# src/graphio/utils/path_utils.py
"""
提供與專案路徑解析相關的通用工具函式。
"""

# 1. 標準庫導入
import importlib.resources
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)


def _search_upwards(start: Path, marker: str) -> Path | None:
    current_path = start
    while current_path != current_path.parent:
        if (current_path / marker).exists():
            return current_path
        current_path = current_path.parent
    return None


def find_project_root(marker: str = "pyproject.toml") -> Path:
    """
    先從 graphio 套件所在位置向上尋找標記檔案，找不到時再從當前工作目錄向上尋找。
    """
    try:
        anchor = Path(str(importlib.resources.files("graphio")))
    except ModuleNotFoundError:
        anchor = Path(__file__).resolve().parent

    root = _search_upwards(anchor, marker) or _search_upwards(Path.cwd(), marker)
    if root is None:
        raise FileNotFoundError(f"無法從 '{anchor}' 或當前工作目錄向上找到專案根目錄標記檔案: {marker}")
    return root
