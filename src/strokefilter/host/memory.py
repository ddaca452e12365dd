"""
記憶體內的組字環境

CompositionContextProtocol 的參考實作，用於測試與範例:
- input: 尚未轉換的原始輸入碼
- selected: 已選定但尚未上屏的文字
- 預編輯文字 = 已選文字 + 原始輸入

select() 會先把候選對應的輸入碼區間移出 input，再通知所有選字訂閱者，
與輸入法框架「選字後觸發 select notifier」的順序一致。
"""

from typing import Callable, FrozenSet, List, Optional

from strokefilter.core.types import Candidate, Segment
from strokefilter.utils.logger import get_logger

SelectHandler = Callable[["MemoryComposition"], None]


class _Connection:
    def __init__(self, owner: "MemoryComposition", handler: SelectHandler):
        self._owner = owner
        self._handler = handler

    def disconnect(self) -> None:
        if self._handler in self._owner._handlers:
            self._owner._handlers.remove(self._handler)


class MemoryComposition:
    """
    記憶體內組字環境

    Args:
        input: 初始輸入
        tags: 目前分段的標籤
    """

    def __init__(self, input: str = "", tags: FrozenSet[str] = frozenset({"general"})):
        self._input = input
        self.tags = frozenset(tags)
        self.selected: List[str] = []
        self.committed: List[str] = []
        self._handlers: List[SelectHandler] = []
        self._logger = get_logger("host.memory")

    @property
    def input(self) -> str:
        return self._input

    @input.setter
    def input(self, value: str) -> None:
        self._input = value

    @property
    def segment(self) -> Segment:
        return Segment(start=0, end=len(self._input), tags=self.tags)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def is_composing(self) -> bool:
        return bool(self._input or self.selected)

    def push_input(self, keys: str) -> None:
        self._input += keys

    def clear(self) -> None:
        self._input = ""
        self.selected = []

    def get_preedit(self) -> str:
        return "".join(self.selected) + self._input

    def connect_select(self, handler: SelectHandler) -> _Connection:
        self._handlers.append(handler)
        return _Connection(self, handler)

    def select(self, candidate: Candidate) -> None:
        """
        選定候選

        將 candidate.span 對應的輸入碼移出 input，記錄選定文字並通知訂閱者；
        若通知後已無輸入且仍有已選文字，自動上屏。
        """
        start, end = candidate.span
        self._input = self._input[:start] + self._input[end:]
        self.selected.append(candidate.text)
        self._logger.debug(f"select {candidate.text!r} -> input={self._input!r}")

        for handler in list(self._handlers):
            handler(self)

        if not self._input and self.selected:
            self.commit()

    def commit(self) -> None:
        text = self.get_preedit()
        if text:
            self.committed.append(text)
        self.clear()

    @property
    def last_commit(self) -> Optional[str]:
        return self.committed[-1] if self.committed else None
