"""
外部協作者的最小介面（Protocol）

宿主只需提供符合這些形狀的物件，不需要繼承任何類別。
"""

from .context import CandidateSourceProtocol, CompositionContextProtocol, SubscriptionProtocol
from .lookup import LookupDatabaseProtocol

__all__ = [
    "LookupDatabaseProtocol",
    "CandidateSourceProtocol",
    "CompositionContextProtocol",
    "SubscriptionProtocol",
]
