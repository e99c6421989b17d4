# src/graphio/providers/format_token.py
"""
解析複合格式字串 `format[:renderer[:formatter]]` (例如 `png:cairo:gd`)。

查詢格式表時只使用基底格式；帶有覆寫值時，解析後的描述子 ID 會保留完整字串，
讓呼叫者取回與請求完全相同的格式 ID。
"""

# 1. 標準庫導入
import logging
import re
from enum import Enum
from typing import NamedTuple

# 2. 第三方庫導入
import graphviz

# 3. 本專案導入
from graphio.exceptions import MalformedFormatError

_SEGMENT = r"[A-Za-z0-9_-]+"
FORMAT_TOKEN_PATTERN = re.compile(rf"({_SEGMENT})(?::({_SEGMENT})(?::({_SEGMENT}))?)?")


class FormatToken(NamedTuple):
    """解析結果：基底格式，以及可選的引擎與子格式器覆寫。"""

    base: str
    engine: str | None = None
    subformatter: str | None = None

    @property
    def is_compound(self) -> bool:
        return self.engine is not None

    @property
    def full(self) -> str:
        return ":".join(part for part in self if part is not None)


def parse_format_token(token: object) -> FormatToken:
    """
    解析格式字串。

    Args:
        token: 格式字串，或值為字串的列舉成員。

    Returns:
        FormatToken(base, engine, subformatter)。

    Raises:
        MalformedFormatError: 不是字串，或不符合語法。
    """
    text = token.value if isinstance(token, Enum) else token
    if not isinstance(text, str):
        raise MalformedFormatError(token)

    match = FORMAT_TOKEN_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedFormatError(token)

    parsed = FormatToken(*match.groups())
    if parsed.engine is not None and parsed.engine not in graphviz.RENDERERS:
        logging.debug(f"格式 '{text}' 的渲染器 '{parsed.engine}' 不在已知清單中，將原樣傳給 Graphviz。")
    if parsed.subformatter is not None and parsed.subformatter not in graphviz.FORMATTERS:
        logging.debug(f"格式 '{text}' 的格式器 '{parsed.subformatter}' 不在已知清單中，將原樣傳給 Graphviz。")
    return parsed
