"""
筆畫過濾引擎 (StrokeFilterEngine)

宿主整合的入口:
- init(context)     建立 FilterSession，載入資料庫，訂閱選字事件
- filter(...)       候選過濾入口，回傳重新排序後的候選串流
- tags_match(seg)   分段標籤判斷入口
- shutdown()        取消訂閱、關閉自行載入的資料庫（注入的資料庫由宿主管理）

使用方式:
    from strokefilter import StrokeFilterEngine, StrokeFilterConfig

    engine = StrokeFilterEngine(StrokeFilterConfig(), search_paths=["~/.local/share/rime"])
    engine.init(context)
    for cand in engine.filter(upstream, segment=segment):
        ...
    engine.shutdown()
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from strokefilter.config import StrokeFilterConfig
from strokefilter.core.engine_interface import FilterEngine
from strokefilter.core.events import FilterEventHandler
from strokefilter.core.protocols.context import CompositionContextProtocol
from strokefilter.core.protocols.lookup import LookupDatabaseProtocol
from strokefilter.core.types import Candidate, Segment
from strokefilter.database.lookup import LookupDatabaseError, open_database
from strokefilter.stroke.session import FilterSession, build_code_regex


class StrokeFilterEngine(FilterEngine):
    _engine_name = "stroke"

    def __init__(
        self,
        config: Optional[StrokeFilterConfig] = None,
        *,
        database: Optional[LookupDatabaseProtocol] = None,
        search_paths: Sequence[Union[str, Path]] = (),
        on_event: Optional[FilterEventHandler] = None,
    ):
        self._config = config or StrokeFilterConfig()
        self._init_logger(
            verbose=self._config.verbose,
            on_timing=self._config.on_timing,
            on_event=on_event,
        )
        self._injected_database = database
        self._search_paths = [Path(p).expanduser() for p in search_paths]
        self._session: Optional[FilterSession] = None
        self._context: Optional[CompositionContextProtocol] = None

    @property
    def config(self) -> StrokeFilterConfig:
        return self._config

    @property
    def session(self) -> Optional[FilterSession]:
        return self._session

    def is_initialized(self) -> bool:
        return self._session is not None

    def init(self, context: Optional[CompositionContextProtocol] = None) -> FilterSession:
        if self._session is not None:
            raise RuntimeError("StrokeFilterEngine is already initialized; call shutdown() first")

        with self._log_timing("StrokeFilterEngine.init"):
            database = self._load_database()
            code_regex, error = build_code_regex(self._config.code_pattern, logger=self._logger)
            if error is not None:
                self._emit({
                    "type": "degraded",
                    "stage": "compile_pattern",
                    "degrade_reason": "invalid_code_pattern",
                    "exception_type": type(error).__name__,
                    "exception_message": str(error),
                })

            session = FilterSession(
                self._config,
                database,
                code_regex=code_regex,
                on_event=self._emit if self._on_event is not None else None,
                owns_database=self._injected_database is None,
            )
            if context is not None:
                session.bind(context)
                self._context = context
            self._session = session

        self._logger.info(
            f"StrokeFilterEngine initialized: key={self._config.key!r}, db={self._config.db!r}, "
            f"tags={sorted(self._config.tags)}, active={session.active}"
        )
        return session

    def _load_database(self) -> Optional[LookupDatabaseProtocol]:
        if self._injected_database is not None:
            return self._injected_database
        try:
            with self._log_timing(f"open_database({self._config.db})"):
                return open_database(self._config.db, self._search_paths)
        except LookupDatabaseError as e:
            self._logger.warning(f"無法載入筆畫資料庫 {self._config.db}: {e}")
            self._emit({
                "type": "degraded",
                "stage": "init",
                "degrade_reason": "database_unavailable",
                "exception_type": type(e).__name__,
                "exception_message": str(e),
            })
            return None

    def tags_match(self, segment: Segment) -> bool:
        if self._session is None:
            return False
        return self._session.tags_match(segment)

    def filter(
        self,
        candidates: Iterable[Candidate],
        segment: Optional[Segment] = None,
        *,
        input: Optional[str] = None,
    ) -> Iterator[Candidate]:
        """
        候選過濾入口

        Args:
            candidates: 上游候選串流（單次走訪）
            segment: 目前的組字分段；提供時先檢查標籤
            input: 原始輸入；省略時讀取 init() 綁定的組字環境

        未初始化或沒有可用輸入時原樣轉交上游。
        """
        if self._session is None:
            return iter(candidates)
        raw_input = input
        if raw_input is None:
            raw_input = self._context.input if self._context is not None else ""
        return self._session.filter(candidates, raw_input, segment)

    def shutdown(self) -> None:
        if self._session is None:
            return
        self._session.close()
        self._session = None
        self._context = None
        self._logger.info("StrokeFilterEngine shut down")

    def get_session_stats(self) -> dict:
        session = self._session
        if session is None:
            return {"initialized": False}
        return {
            "initialized": True,
            "active": session.active,
            "state": session.controller.state.value,
            "bound": session.controller.attached,
        }

    def __enter__(self) -> "StrokeFilterEngine":
        if self._session is None:
            self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
