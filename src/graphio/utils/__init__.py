# src/graphio/utils/__init__.py
"""
通用工具函式套件。
"""

from .path_utils import find_project_root
from .system_utils import desktop_open, detect_os, open_data, open_path, save, temporary_file

__all__ = [
    "desktop_open",
    "detect_os",
    "find_project_root",
    "open_data",
    "open_path",
    "save",
    "temporary_file",
]
