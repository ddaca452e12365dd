"""
筆畫過濾模組

以 h s p n(d) z 五種筆畫（x 為任意筆畫）過濾拼音候選:

    wo;pn   ->  只保留首字筆畫以「撇捺」開頭的候選

主要類別:
- StrokeCodeParser: 拆出拼音碼與筆畫碼
- CandidateStrokeMatcher: 首字筆畫比對
- FilterStream: 命中優先、保持原順序的候選串流
- ContinuationController: 選字後自動接續下一字的過濾
- FilterSession: 單一組字環境的狀態（見 strokefilter.stroke.session）
"""

from .config import StrokeAlphabetConfig
from .continuation import ContinuationController, ContinuationState, Subscription
from .filter import FilterStream
from .matcher import CandidateStrokeMatcher, first_character, variant_matches
from .parser import ParsedStrokeInput, StrokeCodeParser, normalize_stroke_code

__all__ = [
    "StrokeAlphabetConfig",
    "StrokeCodeParser",
    "ParsedStrokeInput",
    "normalize_stroke_code",
    "CandidateStrokeMatcher",
    "first_character",
    "variant_matches",
    "FilterStream",
    "ContinuationController",
    "ContinuationState",
    "Subscription",
]
