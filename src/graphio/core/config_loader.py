# src/graphio/core/config_loader.py
"""
負責載入並合併 GraphIO 的設定 (預設提供者/格式、Graphviz 執行選項、批次工作)。
"""

# 1. 標準庫導入
import copy
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
# (無)

DEFAULT_IO_CONFIG: dict[str, Any] = {
    "defaults": {
        "renderer": {"provider": "graphviz", "format": None},
        "viewer": {"provider": "system", "format": None},
        "serializer": {"provider": "python", "format": None},
    },
    "graphviz": {
        "render_timeout": None,
        "algorithm": None,
        "input_encoding": "utf-8",
        "graph_name": "graph",
    },
    "jobs": [],
}


class ConfigLoader:
    """一個處理設定檔載入與合併的類別。`config` 永遠是完整的字典。"""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path
        user_config = self._load_yaml(config_path) if config_path else None
        self.config = self._merge_configs(copy.deepcopy(DEFAULT_IO_CONFIG), user_config or {})

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any] | None:
        """安全地載入一個 YAML 檔案。"""
        if not path.is_file():
            logging.error(f"指定的設定檔不存在: {path}")
            return None
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logging.error(f"解析設定檔 '{path.name}' 時發生錯誤: {e}")
            return None
        if data is not None and not isinstance(data, dict):
            logging.error(f"設定檔 '{path.name}' 的最上層必須是映射 (mapping)，已忽略。")
            return None
        return data

    @staticmethod
    def _merge_configs(default: dict, user: dict) -> dict:
        """遞迴地合併使用者設定到預設設定中。"""
        for key, value in user.items():
            if value is None and isinstance(default.get(key), dict):
                continue
            if isinstance(value, dict) and isinstance(default.get(key), dict):
                default[key] = ConfigLoader._merge_configs(default[key], value)
            else:
                default[key] = value
        return default

    def default_for(self, kind: str) -> tuple[str, Any]:
        """回傳指定種類的 (提供者 ID, 格式)；格式為 None 表示使用提供者預設值。"""
        entry = (self.config.get("defaults") or {}).get(kind) or {}
        return entry.get("provider"), entry.get("format")

    def graphviz_options(self) -> dict[str, Any]:
        """回傳要傳給 Graphviz 實作的選項，未設定 (None) 的項目不列入。"""
        settings = self.config.get("graphviz") or {}
        options = {
            "timeout": settings.get("render_timeout"),
            "algorithm": settings.get("algorithm"),
            "in_encoding": settings.get("input_encoding"),
            "graph_name": settings.get("graph_name"),
        }
        return {key: value for key, value in options.items() if value is not None}
