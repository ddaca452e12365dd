"""
候選過濾串流測試

驗證：
1. 解析失敗時原樣、惰性轉交上游
2. 命中組在前、未命中組在後，各自保持原順序
3. show_others=False 時不輸出未命中候選
4. 上游每個候選只走訪一次
"""

import pytest

from strokefilter.core.types import Candidate, CandidateKind
from strokefilter.database.lookup import DictLookupDatabase
from strokefilter.stroke.filter import FilterStream
from strokefilter.stroke.matcher import CandidateStrokeMatcher
from strokefilter.stroke.parser import ParsedStrokeInput

STROKES = {
    "我": "pnzn sz",
    "窝": "snpn",
    "喔": "szhzn",
    "沃": "nnhhpn",
    "卧": "hzhsszs",
}


def make_candidates(*texts, kind=CandidateKind.NORMAL):
    return [Candidate(text, kind=kind, span=(0, 2), quality=float(-i)) for i, text in enumerate(texts)]


class CountingSource:
    """記錄上游被拉取次數的候選來源"""

    def __init__(self, candidates):
        self._candidates = list(candidates)
        self.pulled = 0

    def __iter__(self):
        for cand in self._candidates:
            self.pulled += 1
            yield cand


@pytest.fixture
def matcher():
    return CandidateStrokeMatcher(DictLookupDatabase(STROKES))


class TestPassThrough:
    """解析失敗時的轉交行為"""

    def test_identical_output(self, matcher):
        stream = FilterStream(matcher)
        upstream = make_candidates("窝", "我", "喔")
        assert list(stream.apply(upstream, None)) == upstream

    def test_lazy(self, matcher):
        stream = FilterStream(matcher)
        source = CountingSource(make_candidates("窝", "我", "喔"))

        result = stream.apply(source, None)
        assert source.pulled == 0

        first = next(result)
        assert first.text == "窝"
        assert source.pulled == 1

    def test_show_others_irrelevant(self, matcher):
        stream = FilterStream(matcher, show_others=False)
        upstream = make_candidates("窝", "我")
        assert list(stream.apply(upstream, None)) == upstream


class TestPartition:
    """命中優先與順序保持"""

    def test_matched_first_stable(self, matcher):
        stream = FilterStream(matcher)
        upstream = make_candidates("窝", "我", "喔", "我们", "沃")

        result = list(stream.apply(upstream, ParsedStrokeInput("wo", "p")))

        assert [c.text for c in result] == ["我", "我们", "窝", "喔", "沃"]

    def test_each_group_is_subsequence(self, matcher):
        stream = FilterStream(matcher)
        upstream = make_candidates("沃", "喔", "我", "卧", "窝", "我们")
        parsed = ParsedStrokeInput("wo", "s")

        result = list(stream.apply(upstream, parsed))
        matched = [c for c in upstream if matcher.matches(c, "s")]
        others = [c for c in upstream if not matcher.matches(c, "s")]

        assert result == matched + others
        assert len(result) == len(upstream)

    def test_hide_others(self, matcher):
        stream = FilterStream(matcher, show_others=False)
        upstream = make_candidates("窝", "我", "喔", "我们")

        result = list(stream.apply(upstream, ParsedStrokeInput("wo", "p")))

        assert [c.text for c in result] == ["我", "我们"]

    def test_alias_in_stroke(self, matcher):
        stream = FilterStream(matcher, show_others=False)
        upstream = make_candidates("窝", "沃", "我")

        result = list(stream.apply(upstream, ParsedStrokeInput("wo", "dd")))

        assert [c.text for c in result] == ["沃"]

    def test_sentence_goes_to_others(self, matcher):
        stream = FilterStream(matcher)
        sentence = Candidate("我们走", kind=CandidateKind.SENTENCE)
        upstream = [sentence] + make_candidates("窝", "我")

        result = list(stream.apply(upstream, ParsedStrokeInput("wo", "p")))
        assert result[0].text == "我"
        assert sentence in result[1:]

        hidden = list(FilterStream(matcher, show_others=False).apply(upstream, ParsedStrokeInput("wo", "p")))
        assert sentence not in hidden

    def test_no_match_with_others_hidden(self, matcher):
        stream = FilterStream(matcher, show_others=False)
        upstream = make_candidates("窝", "喔")
        assert list(stream.apply(upstream, ParsedStrokeInput("wo", "zzz"))) == []

    def test_upstream_visited_once(self, matcher):
        stream = FilterStream(matcher)
        source = CountingSource(make_candidates("窝", "我", "喔"))

        result = list(stream.apply(source, ParsedStrokeInput("wo", "p")))

        assert len(result) == 3
        assert source.pulled == 3

    def test_candidates_not_mutated(self, matcher):
        stream = FilterStream(matcher)
        upstream = make_candidates("窝", "我")
        result = list(stream.apply(upstream, ParsedStrokeInput("wo", "p")))
        assert result[0] is upstream[1]
        assert result[1] is upstream[0]


class TestFilterEvents:
    """事件回報"""

    def test_filtered_event(self, matcher):
        events = []
        stream = FilterStream(matcher, on_event=events.append)

        list(stream.apply(make_candidates("窝", "我", "喔"), ParsedStrokeInput("wo", "p")))

        assert events == [{
            "type": "filtered",
            "code": "wo",
            "stroke": "p",
            "matched": 1,
            "unmatched": 2,
            "show_others": True,
        }]

    def test_no_event_on_pass_through(self, matcher):
        events = []
        stream = FilterStream(matcher, on_event=events.append)
        list(stream.apply(make_candidates("窝"), None))
        assert events == []
