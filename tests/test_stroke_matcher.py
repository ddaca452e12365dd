"""
候選筆畫比對器測試

驗證：
1. 首字筆畫的錨定前綴比對
2. 多變體（空白分隔）任一命中
3. x 萬用字元與 d/n 別名
4. 查無資料、空變體、資料庫不存在時不命中
5. 整句候選不參與比對
"""

import itertools

import pytest

from strokefilter.core.types import Candidate, CandidateKind
from strokefilter.database.lookup import DictLookupDatabase
from strokefilter.stroke.matcher import CandidateStrokeMatcher, first_character, variant_matches
from strokefilter.stroke.parser import normalize_stroke_code

STROKES = {
    "我": "pnzn sz",
    "窝": "snpn",
    "喔": "szhzn",
    "沃": "nnhhpn",
    "窩": "",
    "哦": "szhphszpn",
}


@pytest.fixture
def matcher():
    return CandidateStrokeMatcher(DictLookupDatabase(STROKES))


class TestVariantMatches:
    """單一變體比對"""

    def test_prefix(self):
        assert variant_matches("pnzn", "pn")
        assert variant_matches("pnzn", "pnzn")
        assert not variant_matches("pnzn", "np")

    def test_pattern_longer_than_variant(self):
        assert not variant_matches("sz", "szh")

    def test_wildcard_position(self):
        assert variant_matches("pnzn", "xn")
        assert variant_matches("pnzn", "xxz")
        assert not variant_matches("pnzn", "xh")

    def test_wildcard_needs_a_stroke(self):
        assert not variant_matches("", "x")
        assert not variant_matches("p", "xx")


class TestCandidateStrokeMatcher:
    """候選比對"""

    def test_first_variant(self, matcher):
        assert matcher.match_text("我", "p")
        assert matcher.match_text("我", "pnzn")
        assert not matcher.match_text("我", "pnznh")

    def test_second_variant(self, matcher):
        assert matcher.match_text("我", "s")
        assert matcher.match_text("我", "sz")
        assert not matcher.match_text("我", "h")

    def test_word_matches_on_first_character(self, matcher):
        assert matcher.match_text("我们", "p")
        assert not matcher.match_text("窝们", "p")

    def test_wildcard(self, matcher):
        for text in ("我", "窝", "喔", "沃", "哦"):
            assert matcher.match_text(text, "x")
        assert matcher.match_text("沃", "xnh")
        assert not matcher.match_text("沃", "xxp")

    def test_empty_variant_never_matches(self, matcher):
        assert not matcher.match_text("窩", "x")

    def test_lookup_miss(self, matcher):
        assert not matcher.match_text("字", "x")
        assert not matcher.match_text("", "x")

    def test_no_database(self):
        matcher = CandidateStrokeMatcher(None)
        assert not matcher.match_text("我", "p")

    def test_sentence_candidate_excluded(self, matcher):
        sentence = Candidate("我们", kind=CandidateKind.SENTENCE)
        normal = Candidate("我们")
        assert not matcher.matches(sentence, "p")
        assert matcher.matches(normal, "p")

    def test_first_character(self):
        assert first_character("我们") == "我"
        assert first_character("𠀀字") == "𠀀"
        assert first_character("") == ""


class TestMatcherLaws:
    """性質測試"""

    ALPHABET = "hspnz"

    def _patterns(self, max_len=3):
        for length in range(1, max_len + 1):
            for combo in itertools.product(self.ALPHABET, repeat=length):
                yield "".join(combo)

    def test_literal_pattern_equals_startswith(self, matcher):
        for text, strokes in STROKES.items():
            for pattern in self._patterns():
                expected = any(v.startswith(pattern) for v in strokes.split())
                assert matcher.match_text(text, pattern) == expected, (text, pattern)

    def test_leading_wildcard_recursion(self, matcher):
        for text, strokes in STROKES.items():
            for rest in self._patterns(max_len=2):
                expected = any(len(v) >= 1 and v[1:].startswith(rest) for v in strokes.split())
                assert matcher.match_text(text, "x" + rest) == expected, (text, rest)

    def test_alias_law(self, matcher):
        for text in STROKES:
            for pattern in ("d", "pd", "dd", "xd", "nd"):
                with_alias = normalize_stroke_code(pattern)
                replaced = pattern.replace("d", "n")
                assert matcher.match_text(text, with_alias) == matcher.match_text(text, replaced)
