"""
選字接續控制器

在筆畫過濾啟用時接管選字事件，讓多字詞可以逐字過濾:

    haoma;h  選「好」 ->  ma;      (仍有未轉換的拼音，重新掛上引導鍵)
    ma;z     選「碼」 ->  ""       (拼音已全部轉換，直接上屏)

狀態:
    IDLE -> FILTERING -> AWAITING_NEXT_CHAR -> ... -> COMMITTED
"""

import re
from enum import Enum
from typing import Callable, Optional

from strokefilter.core.events import FilterEventHandler
from strokefilter.core.protocols.context import CompositionContextProtocol, SubscriptionProtocol
from strokefilter.utils.logger import get_logger

from .parser import StrokeCodeParser

DEFAULT_CODE_PATTERN = "[a-z]"


class ContinuationState(Enum):
    IDLE = "idle"
    FILTERING = "filtering"
    AWAITING_NEXT_CHAR = "awaiting_next_char"
    COMMITTED = "committed"


class Subscription:
    """
    選字事件訂閱

    包裝宿主回傳的訂閱物件；disconnect() 可重複呼叫。
    """

    def __init__(self, inner: SubscriptionProtocol, on_disconnect: Optional[Callable[[], None]] = None):
        self._inner = inner
        self._on_disconnect = on_disconnect
        self.connected = True

    def disconnect(self) -> None:
        if not self.connected:
            return
        self.connected = False
        self._inner.disconnect()
        if self._on_disconnect is not None:
            self._on_disconnect()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()


def compile_code_pattern(code_pattern: Optional[str]) -> Optional[re.Pattern]:
    """
    編譯「仍有未轉換拼音」的判斷式

    空字串回傳 None，此時接續控制器永遠直接上屏。

    Raises:
        re.error: 正規表達式無效（由呼叫端決定如何降級）
    """
    if not code_pattern:
        return None
    return re.compile(code_pattern)


class ContinuationController:
    """
    選字接續控制器

    Args:
        parser: 與過濾器共用的解析器（提供引導鍵）
        code_regex: 判斷預編輯文字是否仍有未轉換拼音；None 表示永遠上屏
        on_event: 選用事件回呼（"rearmed" / "committed"）
    """

    def __init__(
        self,
        parser: StrokeCodeParser,
        code_regex: Optional[re.Pattern] = None,
        on_event: Optional[FilterEventHandler] = None,
    ):
        self.parser = parser
        self.code_regex = code_regex
        self._on_event = on_event
        self._logger = get_logger("stroke.continuation")
        self._subscription: Optional[Subscription] = None
        self.state = ContinuationState.IDLE

    @property
    def guide_key(self) -> str:
        return self.parser.guide_key

    @property
    def attached(self) -> bool:
        return self._subscription is not None and self._subscription.connected

    def attach(self, context: CompositionContextProtocol) -> Subscription:
        if self.attached:
            raise RuntimeError("ContinuationController is already attached")
        self._subscription = Subscription(
            context.connect_select(self.on_select),
            on_disconnect=self._reset,
        )
        return self._subscription

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.disconnect()
            self._subscription = None

    def _reset(self) -> None:
        self.state = ContinuationState.IDLE

    def observe(self, raw_input: str) -> ContinuationState:
        """依目前輸入更新 IDLE/FILTERING 狀態（每次過濾時呼叫）"""
        if self.parser.has_guide_key(raw_input):
            self.state = ContinuationState.FILTERING
        else:
            self.state = ContinuationState.IDLE
        return self.state

    def has_pending_code(self, preedit: str) -> bool:
        if self.code_regex is None:
            return False
        parts = self.parser.split(preedit)
        if parts is None:
            return False
        return self.code_regex.search(parts[0]) is not None

    def on_select(self, context: CompositionContextProtocol) -> Optional[ContinuationState]:
        """
        選字事件處理

        Returns:
            新狀態；輸入中沒有引導鍵時不處理，回傳 None
        """
        parts = self.parser.split(context.input)
        if parts is None:
            self.state = ContinuationState.IDLE
            return None

        remaining = parts[0]
        preedit = context.get_preedit()

        if self.has_pending_code(preedit):
            new_input = remaining + self.guide_key
            context.input = new_input
            self.state = ContinuationState.AWAITING_NEXT_CHAR
            self._logger.debug(f"[Continuation] rearm: {preedit!r} -> input={new_input!r}")
            self._emit("rearmed", new_input, preedit)
        else:
            context.input = remaining
            self._logger.debug(f"[Continuation] commit: {preedit!r} -> input={remaining!r}")
            context.commit()
            self.state = ContinuationState.COMMITTED
            self._emit("committed", remaining, preedit)
        return self.state

    def _emit(self, event_type: str, new_input: str, preedit: str) -> None:
        if self._on_event is not None:
            self._on_event({"type": event_type, "input": new_input, "preedit": preedit})
