"""
候選與分段資料結構

宿主的候選管線產生 Candidate，本套件只重新排序、不修改內容。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Tuple


class CandidateKind(Enum):
    """候選類型"""
    NORMAL = "normal"          # 一般字詞
    SENTENCE = "sentence"      # 整句造句結果（多字組合）
    USER = "user"              # 使用者詞典
    COMPLETION = "completion"  # 補全


@dataclass(frozen=True)
class Candidate:
    """
    候選項（不可變）

    Attributes:
        text: 顯示文字
        kind: 候選類型
        span: 對應組字區間 (start, end)，以原始輸入碼的字元索引計
        quality: 排序權重
        comment: 選用註解（例如編碼提示）
    """
    text: str
    kind: CandidateKind = CandidateKind.NORMAL
    span: Tuple[int, int] = (0, 0)
    quality: float = 0.0
    comment: str = ""

    @property
    def start(self) -> int:
        return self.span[0]

    @property
    def end(self) -> int:
        return self.span[1]

    @property
    def is_sentence(self) -> bool:
        return self.kind is CandidateKind.SENTENCE


@dataclass(frozen=True)
class Segment:
    """組字分段：帶有標籤集合的輸入區間"""
    start: int = 0
    end: int = 0
    tags: FrozenSet[str] = field(default_factory=lambda: frozenset({"general"}))

    def has_any_tag(self, tags) -> bool:
        return not self.tags.isdisjoint(tags)
