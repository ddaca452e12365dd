"""
筆畫反查資料庫

提供記憶體內的反查表（字 -> 以空白分隔的筆畫碼變體），
以及 Rime 反查詞典（*.dict.yaml）的讀取:

    ---
    name: stroke
    version: "1.0"
    ...
    我	pnzn
    我	sz
    窝	snpn

同一字出現多次時，依檔案順序以單一空白合併成多個變體（"pnzn sz"）。
"""

from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Sequence, Union

from strokefilter.utils.logger import get_logger

logger = get_logger("database")

PathLike = Union[str, Path]
DICT_SUFFIXES = (".dict.yaml", ".txt")
YAML_DOCUMENT_END = "..."


class LookupDatabaseError(RuntimeError):
    """資料庫找不到或無法讀取"""


class DictLookupDatabase:
    """
    記憶體內筆畫反查資料庫

    Args:
        entries: 字 -> 筆畫碼字串（可含多個以空白分隔的變體）
        name: 資料庫名稱（僅供日誌）
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None, name: str = "memory"):
        self.name = name
        self._entries: Optional[Dict[str, str]] = dict(entries or {})

    def lookup(self, character: str) -> Optional[str]:
        if self._entries is None:
            return None
        return self._entries.get(character)

    def __contains__(self, character: str) -> bool:
        return self._entries is not None and character in self._entries

    def __len__(self) -> int:
        return len(self._entries) if self._entries is not None else 0

    @property
    def closed(self) -> bool:
        return self._entries is None

    def close(self) -> None:
        """釋放資料；之後所有查詢都回傳 None"""
        self._entries = None

    def __repr__(self) -> str:
        return f"DictLookupDatabase(name={self.name!r}, size={len(self)})"


def parse_reverse_dict(lines: Iterable[str]) -> Dict[str, str]:
    """
    解析 Rime 反查詞典內容

    - 若有 YAML 表頭，以 "..." 行結束；表頭內容忽略
    - 資料列為 "字<TAB>編碼[<TAB>權重]"
    - 空行與 # 開頭的註解略過
    """
    stripped = [line.rstrip("\r\n") for line in lines]
    if YAML_DOCUMENT_END in stripped:
        stripped = stripped[stripped.index(YAML_DOCUMENT_END) + 1:]

    entries: Dict[str, list] = {}
    for line in stripped:
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) < 2:
            continue
        text = parts[0].strip()
        code = parts[1].strip()
        if not text or not code:
            continue
        entries.setdefault(text, []).append(code)

    return {text: " ".join(codes) for text, codes in entries.items()}


def load_reverse_dict(path: PathLike, name: Optional[str] = None) -> DictLookupDatabase:
    """
    讀取反查詞典檔案

    Raises:
        LookupDatabaseError: 檔案不存在或無法讀取
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            entries = parse_reverse_dict(f)
    except (OSError, UnicodeDecodeError) as e:
        raise LookupDatabaseError(f"cannot read stroke dictionary {path}: {e}") from e

    logger.debug(f"Loaded {len(entries)} entries from {path}")
    return DictLookupDatabase(entries, name=name or path.name)


def find_database(name: str, search_paths: Sequence[PathLike]) -> Optional[Path]:
    """在搜尋路徑中依序尋找 <name>.dict.yaml 或 <name>.txt"""
    for directory in search_paths:
        for suffix in DICT_SUFFIXES:
            candidate = Path(directory) / f"{name}{suffix}"
            if candidate.is_file():
                return candidate
    return None


def open_database(name: str, search_paths: Sequence[PathLike] = ()) -> DictLookupDatabase:
    """
    依名稱開啟筆畫反查資料庫

    Raises:
        LookupDatabaseError: 搜尋路徑中找不到或無法讀取
    """
    path = find_database(name, search_paths)
    if path is None:
        searched = ", ".join(str(p) for p in search_paths) or "<none>"
        raise LookupDatabaseError(f"stroke dictionary {name!r} not found (searched: {searched})")
    return load_reverse_dict(path, name=name)
