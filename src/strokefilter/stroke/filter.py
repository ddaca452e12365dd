"""
候選過濾串流

解析成功時，單次走訪上游候選，分成「命中」與「未命中」兩組並保持各自原順序；
先輸出命中組，設定允許時再輸出未命中組。
解析失敗時原樣轉交上游串流，不做任何緩衝。
"""

from typing import Iterable, Iterator, List, Optional

from strokefilter.core.events import FilterEventHandler
from strokefilter.core.types import Candidate
from strokefilter.utils.logger import get_logger

from .matcher import CandidateStrokeMatcher
from .parser import ParsedStrokeInput


class FilterStream:
    """
    候選過濾串流

    Args:
        matcher: 筆畫比對器
        show_others: 是否在命中組之後輸出未命中的候選
        on_event: 選用事件回呼，每次實際過濾後送出 "filtered"
    """

    def __init__(
        self,
        matcher: CandidateStrokeMatcher,
        show_others: bool = True,
        on_event: Optional[FilterEventHandler] = None,
    ):
        self.matcher = matcher
        self.show_others = show_others
        self._on_event = on_event
        self._logger = get_logger("stroke.filter")

    def apply(
        self,
        candidates: Iterable[Candidate],
        parsed: Optional[ParsedStrokeInput],
    ) -> Iterator[Candidate]:
        if parsed is None:
            return iter(candidates)
        return self._partitioned(candidates, parsed)

    def partition(self, candidates: Iterable[Candidate], pattern: str) -> tuple:
        matched: List[Candidate] = []
        others: List[Candidate] = []
        for cand in candidates:
            if self.matcher.matches(cand, pattern):
                matched.append(cand)
            else:
                others.append(cand)
        return matched, others

    def _partitioned(self, candidates: Iterable[Candidate], parsed: ParsedStrokeInput) -> Iterator[Candidate]:
        pattern = parsed.pattern
        matched, others = self.partition(candidates, pattern)

        self._logger.debug(
            f"[Filter] code={parsed.code!r} stroke={parsed.stroke!r} -> "
            f"matched={len(matched)}, others={len(others)}"
        )
        if self._on_event is not None:
            self._on_event({
                "type": "filtered",
                "code": parsed.code,
                "stroke": parsed.stroke,
                "matched": len(matched),
                "unmatched": len(others),
                "show_others": self.show_others,
            })

        yield from matched
        if self.show_others:
            yield from others
