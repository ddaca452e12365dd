"""
筆畫反查資料庫模組
"""

from .lookup import (
    DictLookupDatabase,
    LookupDatabaseError,
    find_database,
    load_reverse_dict,
    open_database,
    parse_reverse_dict,
)

__all__ = [
    "DictLookupDatabase",
    "LookupDatabaseError",
    "find_database",
    "load_reverse_dict",
    "open_database",
    "parse_reverse_dict",
]
