"""
Composition Context Protocol

宿主組字環境的介面：原始輸入緩衝（可讀寫）、預編輯文字（唯讀）、
選字事件訂閱與上屏。
"""

from typing import Callable, Iterator, Protocol, runtime_checkable

from strokefilter.core.types import Candidate


@runtime_checkable
class SubscriptionProtocol(Protocol):
    def disconnect(self) -> None:
        ...


@runtime_checkable
class CandidateSourceProtocol(Protocol):
    def iterate(self, code: str) -> Iterator[Candidate]:
        """依輸入碼惰性產生候選（單次走訪，不可重來）"""
        ...


@runtime_checkable
class CompositionContextProtocol(Protocol):
    input: str

    def get_preedit(self) -> str:
        """目前組字的預編輯顯示文字"""
        ...

    def connect_select(self, handler: Callable[["CompositionContextProtocol"], None]) -> SubscriptionProtocol:
        """訂閱選字事件；回傳可 disconnect() 的訂閱"""
        ...

    def commit(self) -> None:
        ...
