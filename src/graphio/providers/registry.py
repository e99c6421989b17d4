# src/graphio/providers/registry.py
"""
提供者註冊表：以明確的註冊呼叫建立「提供者 ID -> 提供者實例」的對照。

每個提供者模組在啟動時註冊一次 (見 `graphio.providers.__init__`)，
之後只做查詢。核心不快取查詢結果，每次操作都重新解析提供者。
"""

# 1. 標準庫導入
import logging
import threading
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from graphio.exceptions import UnknownProviderError
from graphio.providers.base import ImplementationKind, IOImplementation, IOProvider


class ProviderRegistry:
    """
    提供者 ID 到提供者實例的對照表。

    查詢只讀取字典，不需鎖；註冊以鎖保護，預期只在啟動階段發生。
    """

    def __init__(self):
        self._providers: dict[str, IOProvider] = {}
        self._lock = threading.Lock()

    def register(self, provider: IOProvider) -> IOProvider:
        """以 provider.id 為鍵註冊提供者，並回傳該提供者。"""
        with self._lock:
            if provider.id in self._providers:
                logging.warning(f"提供者 '{provider.id}' 已註冊，將以新的實例取代。")
            providers = dict(self._providers)
            providers[provider.id] = provider
            self._providers = providers
        logging.debug(f"已註冊 I/O 提供者: {provider.id}")
        return provider

    def resolve(self, provider_id: str) -> IOProvider:
        """
        取得指定 ID 的提供者。

        Raises:
            UnknownProviderError: 沒有以此 ID 註冊的提供者。
        """
        provider = self._providers.get(provider_id)
        if provider is None:
            raise UnknownProviderError(provider_id, self.provider_ids())
        return provider

    def provider_ids(self) -> list[str]:
        return list(self._providers.keys())

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)


default_registry = ProviderRegistry()


def _registry_or_default(registry: ProviderRegistry | None) -> ProviderRegistry:
    return default_registry if registry is None else registry


def register_provider(provider: IOProvider, registry: ProviderRegistry | None = None) -> IOProvider:
    """在指定 (預設為全域) 註冊表中註冊提供者。"""
    return _registry_or_default(registry).register(provider)


def resolve_provider(provider_id: str, registry: ProviderRegistry | None = None) -> IOProvider:
    """從指定 (預設為全域) 註冊表解析提供者。"""
    return _registry_or_default(registry).resolve(provider_id)


def implementation(
    provider_id: str,
    kind: ImplementationKind | str,
    fmt: Any = None,
    registry: ProviderRegistry | None = None,
) -> IOImplementation | None:
    """
    取得指定提供者、種類與格式的實作。

    未指定格式時使用提供者的預設格式；找不到對應格式時回傳 None。
    """
    provider = resolve_provider(provider_id, registry)
    if fmt is None:
        return provider.implementation(kind)
    return provider.implementation(kind, fmt)


def renderer(provider_id: str, fmt: Any = None, registry: ProviderRegistry | None = None) -> IOImplementation | None:
    """回傳指定提供者與格式的渲染器，若無則回傳 None。"""
    return implementation(provider_id, ImplementationKind.RENDERER, fmt, registry)


def viewer(provider_id: str, fmt: Any = None, registry: ProviderRegistry | None = None) -> IOImplementation | None:
    """回傳指定提供者與格式的檢視器，若無則回傳 None。"""
    return implementation(provider_id, ImplementationKind.VIEWER, fmt, registry)


def serializer(provider_id: str, fmt: Any = None, registry: ProviderRegistry | None = None) -> IOImplementation | None:
    """回傳指定提供者與格式的序列化器，若無則回傳 None。"""
    return implementation(provider_id, ImplementationKind.SERIALIZER, fmt, registry)
