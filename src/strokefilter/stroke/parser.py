"""
筆畫碼解析模組

從原始輸入緩衝中拆出「拼音碼」與「筆畫碼」:

    wo;pn  ->  code="wo", stroke="pn"

引導鍵視為不透明的字面字串，以子字串搜尋切割，不組成正規表達式。
解析失敗不是錯誤，而是「過濾器未啟用」的正常狀態，回傳 None。
"""

from functools import lru_cache
from typing import NamedTuple, Optional

from .config import StrokeAlphabetConfig


class ParsedStrokeInput(NamedTuple):
    """解析結果：拼音碼與原始筆畫碼（尚未正規化）"""
    code: str
    stroke: str

    @property
    def pattern(self) -> str:
        return normalize_stroke_code(self.stroke)


@lru_cache(maxsize=1024)
def normalize_stroke_code(stroke: str) -> str:
    """
    正規化筆畫碼：套用別名（d -> n）

    萬用字元 x 保留原樣，由比對器處理。
    """
    normalized = stroke
    for alias, target in StrokeAlphabetConfig.ALIASES.items():
        normalized = normalized.replace(alias, target)
    return normalized


def is_valid_stroke_code(stroke: str) -> bool:
    return bool(stroke) and all(ch in StrokeAlphabetConfig.INPUT_ALPHABET for ch in stroke)


class StrokeCodeParser:
    """
    筆畫碼解析器

    以第一次出現的引導鍵切割輸入；引導鍵之後到結尾必須全部是
    h s p n d z x 之一，否則視為未啟用。
    """

    def __init__(self, guide_key: str = StrokeAlphabetConfig.DEFAULT_GUIDE_KEY):
        if not guide_key:
            raise ValueError("guide_key cannot be empty")
        self.guide_key = guide_key

    def split(self, raw_input: str) -> Optional[tuple]:
        """
        以第一個引導鍵切割輸入，不檢查字母表

        Returns:
            (引導鍵之前, 引導鍵之後)；沒有引導鍵時回傳 None
        """
        index = raw_input.find(self.guide_key)
        if index < 0:
            return None
        return raw_input[:index], raw_input[index + len(self.guide_key):]

    def has_guide_key(self, raw_input: str) -> bool:
        return self.guide_key in raw_input

    def parse(self, raw_input: str) -> Optional[ParsedStrokeInput]:
        parts = self.split(raw_input)
        if parts is None:
            return None
        code, stroke = parts
        if not code or not is_valid_stroke_code(stroke):
            return None
        return ParsedStrokeInput(code=code, stroke=stroke)
