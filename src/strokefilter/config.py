"""
全域配置模組

提供 StrokeFilterConfig，對應 schema 中的 stroke_filter 區段:

    stroke_filter:
      key: ";"                 # 筆畫引導鍵
      db: stroke               # 筆畫反查資料庫名稱
      show_other_cands: true   # 是否在命中候選之後顯示其他候選
      tags: [general]          # 啟用的組字分段標籤
      code_pattern: "[a-z]"    # 判斷預編輯是否仍有未轉換拼音

使用方式:
    from strokefilter import StrokeFilterConfig

    config = StrokeFilterConfig.from_schema({
        "stroke_filter/key": "'",
        "stroke_filter/tags": ["abc"],
    })

配置檔的讀取不在本套件範圍內，呼叫端自行載入後傳入扁平的 mapping。
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Iterable, Mapping, Optional

from .stroke.config import StrokeAlphabetConfig
from .stroke.continuation import DEFAULT_CODE_PATTERN
from .utils.logger import setup_logger

DEFAULT_NAMESPACE = "stroke_filter"
DEFAULT_DB_NAME = "stroke"
DEFAULT_TAGS: FrozenSet[str] = frozenset({"general"})


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1", "on")
    return bool(value)


@dataclass
class StrokeFilterConfig:
    """
    筆畫過濾器配置

    屬性:
        key: 筆畫引導鍵（字面字串，不作為正規表達式）
        db: 筆畫反查資料庫名稱
        show_other_cands: 是否在命中候選之後顯示未命中的候選
        tags: 啟用的組字分段標籤
        code_pattern: 判斷預編輯文字是否仍有未轉換拼音的正規表達式
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
    """

    key: str = StrokeAlphabetConfig.DEFAULT_GUIDE_KEY
    db: str = DEFAULT_DB_NAME
    show_other_cands: bool = True
    tags: FrozenSet[str] = field(default_factory=lambda: DEFAULT_TAGS)
    code_pattern: str = DEFAULT_CODE_PATTERN

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise ValueError("stroke filter guide key must be a non-empty string")
        if isinstance(self.tags, str):
            self.tags = (self.tags,)
        self.tags = frozenset(self.tags) or DEFAULT_TAGS
        configure_logging(self.verbose)

    @classmethod
    def from_schema(
        cls,
        schema: Mapping[str, Any],
        namespace: str = DEFAULT_NAMESPACE,
        **overrides,
    ) -> "StrokeFilterConfig":
        """
        從扁平的 schema mapping 建立配置

        key_binder/stroke 優先於 <namespace>/key；
        tags 為空或缺少時使用預設標籤。
        """
        def get(name: str, default=None):
            value = schema.get(f"{namespace}/{name}")
            return default if value is None else value

        key = schema.get("key_binder/stroke") or get("key") or StrokeAlphabetConfig.DEFAULT_GUIDE_KEY
        tags: Iterable[str] = get("tags") or DEFAULT_TAGS

        values = {
            "key": key,
            "db": get("db") or DEFAULT_DB_NAME,
            "show_other_cands": _to_bool(get("show_other_cands", True)),
            "tags": tags,
            "code_pattern": get("code_pattern", DEFAULT_CODE_PATTERN),
        }
        values.update(overrides)
        return cls(**values)

