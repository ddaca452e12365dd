"""
延遲導入工具

拼音相關依賴（pypinyin）只有參考宿主的 TableCandidateSource.from_words()
會用到，核心過濾器不需要，因此以選用套件提供:

    pip install "strokefilter[pinyin]"
"""

import importlib.util
from typing import Any, Optional

PINYIN_INSTALL_HINT = (
    "缺少拼音依賴。請執行:\n"
    "  pip install \"strokefilter[pinyin]\""
)

_pypinyin: Optional[Any] = None


def is_pinyin_available() -> bool:
    """檢查 pypinyin 是否已安裝（不實際載入）"""
    return importlib.util.find_spec("pypinyin") is not None


def check_pinyin_dependencies() -> None:
    """
    檢查拼音依賴

    Raises:
        ImportError: 未安裝 pypinyin 時，附帶安裝提示
    """
    if not is_pinyin_available():
        raise ImportError(PINYIN_INSTALL_HINT)


def _get_pypinyin() -> Any:
    """延遲載入 pypinyin 模組"""
    global _pypinyin
    if _pypinyin is None:
        try:
            import pypinyin
        except ImportError as e:
            raise ImportError(PINYIN_INSTALL_HINT) from e
        _pypinyin = pypinyin
    return _pypinyin
