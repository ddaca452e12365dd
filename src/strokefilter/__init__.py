"""
strokefilter - 拼音候選的筆畫過濾器 (Stroke Filter for Pinyin Candidates)

核心概念：
- 輸入拼音後按引導鍵（預設 ;），再輸入筆畫碼 h s p n(d) z，x 為任意筆畫
- 候選依首字筆畫分成命中/未命中兩組，命中組優先，各組保持原順序
- 選字後若仍有未轉換的拼音，自動重新掛上引導鍵，逐字過濾整個詞

官方入口（穩定 API）：
- `strokefilter.StrokeFilterEngine`
- `strokefilter.StrokeFilterConfig`
"""

from __future__ import annotations

import importlib
from typing import Any

_LAZY_IMPORTS = {
    # Engine 層（官方入口）
    "StrokeFilterEngine": (".engine", "StrokeFilterEngine"),
    "StrokeFilterConfig": (".config", "StrokeFilterConfig"),
    # 資料結構
    "Candidate": (".core.types", "Candidate"),
    "CandidateKind": (".core.types", "CandidateKind"),
    "Segment": (".core.types", "Segment"),
    "FilterEvent": (".core.events", "FilterEvent"),
    # 筆畫過濾元件（進階用途）
    "StrokeCodeParser": (".stroke.parser", "StrokeCodeParser"),
    "CandidateStrokeMatcher": (".stroke.matcher", "CandidateStrokeMatcher"),
    "FilterStream": (".stroke.filter", "FilterStream"),
    "ContinuationController": (".stroke.continuation", "ContinuationController"),
    "ContinuationState": (".stroke.continuation", "ContinuationState"),
    "FilterSession": (".stroke.session", "FilterSession"),
    # 資料庫
    "DictLookupDatabase": (".database.lookup", "DictLookupDatabase"),
    "LookupDatabaseError": (".database.lookup", "LookupDatabaseError"),
    "load_reverse_dict": (".database.lookup", "load_reverse_dict"),
    "open_database": (".database.lookup", "open_database"),
    # 日誌工具
    "get_logger": (".utils.logger", "get_logger"),
    "enable_debug_logging": (".utils.logger", "enable_debug_logging"),
    "enable_timing_logging": (".utils.logger", "enable_timing_logging"),
    # 依賴檢查
    "is_pinyin_available": (".utils.lazy_imports", "is_pinyin_available"),
    "check_pinyin_dependencies": (".utils.lazy_imports", "check_pinyin_dependencies"),
}

__all__ = list(_LAZY_IMPORTS.keys())

__version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
