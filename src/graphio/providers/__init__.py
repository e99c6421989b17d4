# src/graphio/providers/__init__.py
"""
I/O 提供者套件：格式描述子、能力協定、註冊表，以及內建的提供者。

內建提供者在匯入此套件時依序註冊到全域註冊表：graphviz、system、python。
"""

from .base import (
    ANY_FORMAT,
    ANY_FORMAT_ID,
    ANY_FORMAT_SUPPORTED,
    IMPLEMENTATION_KINDS,
    Capability,
    FormatDescriptor,
    ImplementationKind,
    IOImplementation,
    IOProvider,
    Renderer,
    Serializer,
    Viewer,
)
from .format_token import FormatToken, parse_format_token
from .graphviz_provider import GraphvizProvider
from .python_provider import PythonProvider
from .registry import (
    ProviderRegistry,
    default_registry,
    implementation,
    register_provider,
    renderer,
    resolve_provider,
    serializer,
    viewer,
)
from .system_provider import SystemProvider

register_provider(GraphvizProvider())
register_provider(SystemProvider())
register_provider(PythonProvider())

__all__ = [
    "ANY_FORMAT",
    "ANY_FORMAT_ID",
    "ANY_FORMAT_SUPPORTED",
    "IMPLEMENTATION_KINDS",
    "Capability",
    "FormatDescriptor",
    "FormatToken",
    "GraphvizProvider",
    "IOImplementation",
    "IOProvider",
    "ImplementationKind",
    "ProviderRegistry",
    "PythonProvider",
    "Renderer",
    "Serializer",
    "SystemProvider",
    "Viewer",
    "default_registry",
    "implementation",
    "parse_format_token",
    "register_provider",
    "renderer",
    "resolve_provider",
    "serializer",
    "viewer",
]
