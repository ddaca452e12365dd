"""
候選筆畫比對模組

判斷候選的首字筆畫是否以使用者輸入的筆畫碼開頭:
- 詞組只比對首字
- 資料庫可能為同一字記錄多個變體（以空白分隔），任一變體符合即算命中
- x 在對應位置匹配任意一個筆畫
- 錨定前綴比對，超出筆畫碼長度的筆畫忽略
"""

from typing import Optional

from strokefilter.core.protocols.lookup import LookupDatabaseProtocol
from strokefilter.core.types import Candidate

from .config import StrokeAlphabetConfig


def first_character(text: str) -> str:
    """取得首字（以 Unicode code point 為單位）"""
    return text[:1]


def variant_matches(variant: str, pattern: str) -> bool:
    """單一變體是否以 pattern 開頭（x 為單筆畫萬用字元）"""
    if len(variant) < len(pattern):
        return False
    wildcard = StrokeAlphabetConfig.WILDCARD
    for expected, actual in zip(pattern, variant):
        if expected != wildcard and expected != actual:
            return False
    return True


class CandidateStrokeMatcher:
    """
    候選筆畫比對器

    建立方式:
        matcher = CandidateStrokeMatcher(database)
        matcher.matches(candidate, "pn")

    pattern 必須已正規化（見 normalize_stroke_code）。
    database 為 None 時所有候選都不命中。
    """

    def __init__(self, database: Optional[LookupDatabaseProtocol]):
        self.database = database

    def lookup_variants(self, character: str) -> list:
        if self.database is None or not character:
            return []
        strokes = self.database.lookup(character)
        if not strokes:
            return []
        return strokes.split()

    def match_text(self, text: str, pattern: str) -> bool:
        for variant in self.lookup_variants(first_character(text)):
            if variant_matches(variant, pattern):
                return True
        return False

    def matches(self, candidate: Candidate, pattern: str) -> bool:
        # 整句候選不做筆畫比對
        if candidate.is_sentence:
            return False
        return self.match_text(candidate.text, pattern)
