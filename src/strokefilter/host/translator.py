"""
參考候選來源

極簡的碼表翻譯器：只翻譯輸入開頭連續的小寫字母，
由長到短比對前綴並依碼表順序產生候選。
from_words() 以 pypinyin 把詞彙轉成無聲調拼音作為編碼。
"""

import re
from typing import Dict, Iterable, Iterator, List, Tuple

from strokefilter.core.types import Candidate, CandidateKind
from strokefilter.utils.lazy_imports import _get_pypinyin

_LEADING_CODE = re.compile(r"[a-z]+")


class TableCandidateSource:
    """
    碼表候選來源

    Args:
        entries: (編碼, 文字) 序列；同一編碼內保持輸入順序
    """

    def __init__(self, entries: Iterable[Tuple[str, str]] = ()):
        self._table: Dict[str, List[str]] = {}
        for code, text in entries:
            self.add(code, text)

    def add(self, code: str, text: str) -> None:
        texts = self._table.setdefault(code, [])
        if text not in texts:
            texts.append(text)

    def __len__(self) -> int:
        return sum(len(texts) for texts in self._table.values())

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "TableCandidateSource":
        """以 pypinyin 產生編碼（需要 strokefilter[pinyin]）"""
        pypinyin = _get_pypinyin()
        source = cls()
        for word in words:
            code = "".join(pypinyin.lazy_pinyin(word, style=pypinyin.NORMAL))
            source.add(code, word)
        return source

    def iterate(self, code: str) -> Iterator[Candidate]:
        match = _LEADING_CODE.match(code)
        if match is None:
            return
        run = match.group(0)
        for length in range(len(run), 0, -1):
            texts = self._table.get(run[:length], ())
            for rank, text in enumerate(texts):
                yield Candidate(
                    text=text,
                    kind=CandidateKind.NORMAL,
                    span=(0, length),
                    quality=float(length) - rank / (len(texts) + 1),
                )
