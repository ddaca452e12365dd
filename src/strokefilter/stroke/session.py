"""
過濾 session

每個組字環境持有一個 FilterSession：設定、資料庫 handle、解析器、
比對器、過濾串流與接續控制器。由 StrokeFilterEngine.init() 建立，
shutdown() 時關閉。
"""

import re
from typing import Iterable, Iterator, Optional

from strokefilter.config import StrokeFilterConfig
from strokefilter.core.events import FilterEventHandler
from strokefilter.core.protocols.context import CompositionContextProtocol
from strokefilter.core.protocols.lookup import LookupDatabaseProtocol
from strokefilter.core.types import Candidate, Segment
from strokefilter.utils.logger import get_logger

from .continuation import ContinuationController, Subscription, compile_code_pattern
from .filter import FilterStream
from .matcher import CandidateStrokeMatcher
from .parser import ParsedStrokeInput, StrokeCodeParser


class FilterSession:
    """
    單一組字環境的過濾狀態

    Args:
        config: 過濾器配置
        database: 筆畫反查資料庫；None 表示過濾永久停用
        code_regex: 已編譯的未轉換拼音判斷式；None 表示接續時一律上屏
        on_event: 選用事件回呼
        owns_database: 為 True 時 close() 一併關閉資料庫；宿主注入的資料庫只釋放參照
    """

    def __init__(
        self,
        config: StrokeFilterConfig,
        database: Optional[LookupDatabaseProtocol],
        code_regex: Optional[re.Pattern] = None,
        on_event: Optional[FilterEventHandler] = None,
        owns_database: bool = True,
    ):
        self.config = config
        self.database = database
        self.owns_database = owns_database
        self.parser = StrokeCodeParser(config.key)
        self.matcher = CandidateStrokeMatcher(database)
        self.stream = FilterStream(self.matcher, show_others=config.show_other_cands, on_event=on_event)
        self.controller = ContinuationController(self.parser, code_regex=code_regex, on_event=on_event)
        self.subscription: Optional[Subscription] = None
        self._logger = get_logger("stroke.session")

    @property
    def guide_key(self) -> str:
        return self.config.key

    @property
    def tags(self):
        return self.config.tags

    @property
    def active(self) -> bool:
        """資料庫可用時過濾器才可能啟用"""
        return self.database is not None

    def tags_match(self, segment: Segment) -> bool:
        return segment.has_any_tag(self.config.tags)

    def parse(self, raw_input: str) -> Optional[ParsedStrokeInput]:
        if not self.active:
            return None
        return self.parser.parse(raw_input)

    def filter(
        self,
        candidates: Iterable[Candidate],
        raw_input: str,
        segment: Optional[Segment] = None,
    ) -> Iterator[Candidate]:
        """
        過濾入口

        分段標籤不符時完全不執行過濾；否則解析輸入並交給 FilterStream。
        """
        if segment is not None and not self.tags_match(segment):
            return iter(candidates)
        self.controller.observe(raw_input)
        return self.stream.apply(candidates, self.parse(raw_input))

    def bind(self, context: CompositionContextProtocol) -> Subscription:
        self.subscription = self.controller.attach(context)
        return self.subscription

    def close(self) -> None:
        self.controller.detach()
        self.subscription = None
        if self.owns_database:
            close = getattr(self.database, "close", None)
            if callable(close):
                close()
        self.database = None
        self.matcher.database = None
        self._logger.debug("FilterSession closed")


def build_code_regex(code_pattern: str, logger=None) -> tuple:
    """
    編譯 code_pattern；無效時回傳 (None, re.error)

    Returns:
        (compiled or None, error or None)
    """
    try:
        return compile_code_pattern(code_pattern), None
    except re.error as e:
        if logger is not None:
            logger.warning(f"invalid code_pattern {code_pattern!r}: {e}; selections will always commit")
        return None, e
