"""
過濾引擎抽象基類

定義過濾引擎的生命週期介面，並提供共用的日誌與計時工具。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from strokefilter.core.events import FilterEvent, FilterEventHandler
from strokefilter.utils.logger import TimingContext, get_logger, setup_logger


class FilterEngine(ABC):
    """
    過濾引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有 session（設定 + 資料庫 handle）
    - 提供 init()/shutdown() 生命週期
    - 提供日誌、計時與事件回報

    生命週期:
    - init() 於 schema/session 初始化時呼叫一次
    - shutdown() 於 session 結束時釋放資源
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[FilterEventHandler] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing
        self._on_event = on_event

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    def _emit(self, event: FilterEvent) -> None:
        if self._on_event is None:
            return
        event.setdefault("engine", self._engine_name)
        self._on_event(event)

    @abstractmethod
    def init(self, context: Any = None) -> Any:
        pass

    @abstractmethod
    def shutdown(self) -> None:
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass
