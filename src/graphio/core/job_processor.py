# src/graphio/core/job_processor.py
"""
GraphIO 的批次處理引擎：依設定檔中的 `jobs` 逐一渲染、編碼或檢視圖形。
"""

# 1. 標準庫導入
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import networkx as nx
import yaml

# 3. 本專案導入
from graphio.builders.graph_builder import build_graph
from graphio.core.config_loader import ConfigLoader
from graphio.exceptions import GraphIOError, UnsupportedOperationError
from graphio.graph_io import GraphIO
from graphio.providers.base import ImplementationKind, IOImplementation
from graphio.providers.registry import ProviderRegistry, implementation
from graphio.utils.system_utils import save

ACTION_KINDS: dict[str, ImplementationKind] = {
    "render": ImplementationKind.RENDERER,
    "encode": ImplementationKind.SERIALIZER,
    "view": ImplementationKind.VIEWER,
}


class JobProcessor:
    """一個依設定檔執行所有圖形工作的類別。"""

    def __init__(self, config_path: Path | None = None, registry: ProviderRegistry | None = None):
        self.config_path = config_path
        self.base_dir = config_path.parent if config_path else Path.cwd()
        self.registry = registry
        self.config_loader = ConfigLoader(config_path)
        self.config = self.config_loader.config

    def _load_graph(self, job: dict[str, Any]) -> nx.Graph:
        """讀取工作的圖形定義；`graph` 可以是鄰接表映射，或指向鄰接表 YAML 檔案的路徑。"""
        source = job.get("graph")
        if isinstance(source, dict) or source is None:
            adjacency = source
        else:
            graph_path = self.base_dir / source
            with open(graph_path, encoding="utf-8") as f:
                adjacency = yaml.safe_load(f)
        return build_graph(adjacency, directed=bool(job.get("directed")), weighted=bool(job.get("weighted")))

    def _build_io(self, job: dict[str, Any], kind: ImplementationKind) -> GraphIO:
        """建立此工作使用的 GraphIO；工作中的 provider/format 會覆寫該種類的預設值。"""
        graph_io = GraphIO.from_config(self.config_loader, self.registry)
        if "provider" not in job and "format" not in job:
            return graph_io

        default_provider, default_format = self.config_loader.default_for(kind.value)
        provider_id = job.get("provider", default_provider)
        fmt = job.get("format", default_format if provider_id == default_provider else None)
        impl: IOImplementation | None = implementation(provider_id, kind, fmt, self.registry)
        if impl is None:
            raise UnsupportedOperationError(f"Provider {provider_id!r} has no {kind.value} for format {fmt!r}.")
        attribute = {
            ImplementationKind.RENDERER: "renderer",
            ImplementationKind.VIEWER: "viewer",
            ImplementationKind.SERIALIZER: "serializer",
        }[kind]
        setattr(graph_io, attribute, impl)
        return graph_io

    def _run_job(self, job: dict[str, Any]) -> Any:
        action = job.get("action", "render")
        kind = ACTION_KINDS.get(action)
        if kind is None:
            raise GraphIOError(f"Unknown action {action!r}; expected one of {sorted(ACTION_KINDS)}.")

        graph = self._load_graph(job)
        graph_io = self._build_io(job, kind)
        output = job.get("output")
        target = self.base_dir / output if output else None
        if target is not None:
            target.parent.mkdir(parents=True, exist_ok=True)

        if action == "render":
            if target is None:
                raise GraphIOError("A render job needs an 'output' path.")
            return graph_io.render_to_file(graph, target)
        if action == "encode":
            encoded = graph_io.encode(graph)
            if target is None:
                return encoded
            save(encoded, target)
            logging.info(f"序列化結果已儲存至: {target}")
            return target
        return graph_io.view(graph)

    def run(self) -> list[Any]:
        """執行所有工作，回傳每個成功工作的產出；單一工作失敗只記錄錯誤，不影響其他工作。"""
        jobs = self.config.get("jobs") or []
        if not isinstance(jobs, list) or not jobs:
            logging.warning("設定中沒有任何 'jobs'，已跳過。")
            return []

        logging.info(f"========== 開始處理 {len(jobs)} 個圖形工作 ==========")
        results: list[Any] = []
        for index, job in enumerate(jobs, start=1):
            name = job.get("name", f"job-{index}") if isinstance(job, dict) else f"job-{index}"
            try:
                if not isinstance(job, dict):
                    raise GraphIOError(f"Job must be a mapping, got {type(job).__name__}.")
                logging.info(f"--- 執行工作 '{name}' ({job.get('action', 'render')}) ---")
                results.append(self._run_job(job))
            except Exception as e:
                logging.error(f"處理工作 '{name}' 時發生錯誤: {e}", exc_info=True)

        logging.info(f"========== 完成：{len(results)}/{len(jobs)} 個工作成功 ==========")
        return results
