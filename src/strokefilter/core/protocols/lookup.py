"""
Lookup Database Protocol

定義筆畫反查資料庫的最小介面（字 -> 以空白分隔的筆畫碼變體）。
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LookupDatabaseProtocol(Protocol):
    def lookup(self, character: str) -> Optional[str]:
        """查詢單字的筆畫碼；查無資料回傳 None 或空字串"""
        ...
