"""
參考宿主實作（測試與範例用）

核心過濾器只依賴 core.protocols 中的介面，這裡提供記憶體內的實作。
"""

from .memory import MemoryComposition
from .translator import TableCandidateSource

__all__ = ["MemoryComposition", "TableCandidateSource"]
