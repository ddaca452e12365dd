"""
核心抽象層

定義資料結構、事件模型與宿主協作者介面。
"""

from .engine_interface import FilterEngine
from .events import FilterEvent, FilterEventHandler
from .protocols import (
    CandidateSourceProtocol,
    CompositionContextProtocol,
    LookupDatabaseProtocol,
    SubscriptionProtocol,
)
from .types import Candidate, CandidateKind, Segment

__all__ = [
    "Candidate",
    "CandidateKind",
    "Segment",
    "FilterEngine",
    "FilterEvent",
    "FilterEventHandler",
    "LookupDatabaseProtocol",
    "CandidateSourceProtocol",
    "CompositionContextProtocol",
    "SubscriptionProtocol",
]
