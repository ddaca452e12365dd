"""
筆畫碼解析器測試

驗證：
1. 以第一個引導鍵切割拼音碼與筆畫碼
2. 字母表限制（h s p n d z x）
3. 解析失敗時回傳 None（過濾器未啟用）
4. 引導鍵為字面字串，不受正規表達式特殊字元影響
"""

import pytest

from strokefilter.stroke.parser import (
    ParsedStrokeInput,
    StrokeCodeParser,
    is_valid_stroke_code,
    normalize_stroke_code,
)


class TestStrokeCodeParser:
    """基本解析"""

    def setup_method(self):
        self.parser = StrokeCodeParser(";")

    def test_basic_split(self):
        parsed = self.parser.parse("wo;p")
        assert parsed == ParsedStrokeInput(code="wo", stroke="p")
        assert parsed.pattern == "p"

    def test_full_alphabet(self):
        parsed = self.parser.parse("haoma;hspndzx")
        assert parsed.code == "haoma"
        assert parsed.stroke == "hspndzx"

    def test_alias_applied_to_pattern_only(self):
        parsed = self.parser.parse("wo;pd")
        assert parsed.stroke == "pd"
        assert parsed.pattern == "pn"

    @pytest.mark.parametrize("raw", [
        "wo",       # 沒有引導鍵
        ";p",       # 拼音碼為空
        "wo;",      # 筆畫碼為空
        "wo;pa",    # 非法字元
        "wo;P",     # 大寫不在字母表內
        "wo;p ",    # 結尾空白
        "",
    ])
    def test_parse_failure_returns_none(self, raw):
        assert self.parser.parse(raw) is None

    def test_splits_at_first_guide_key(self):
        """第一個引導鍵之後出現第二個引導鍵，筆畫碼不合法"""
        assert self.parser.parse("wo;h;p") is None
        assert self.parser.split("wo;h;p") == ("wo", "h;p")

    def test_has_guide_key(self):
        assert self.parser.has_guide_key("ma;")
        assert not self.parser.has_guide_key("ma")


class TestGuideKeyLiteral:
    """引導鍵視為字面字串"""

    @pytest.mark.parametrize("key", [".", "*", "[", "\\", "+", "$"])
    def test_regex_metacharacters(self, key):
        parser = StrokeCodeParser(key)
        assert parser.parse(f"wo{key}pn") == ("wo", "pn")
        assert parser.parse("wopn") is None

    def test_multi_character_key(self):
        parser = StrokeCodeParser("//")
        assert parser.parse("wo//hs") == ("wo", "hs")
        assert parser.parse("wo/hs") is None

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            StrokeCodeParser("")


class TestNormalizeStrokeCode:
    """正規化與字母表"""

    def test_alias(self):
        assert normalize_stroke_code("dxd") == "nxn"

    def test_wildcard_kept(self):
        assert normalize_stroke_code("xx") == "xx"

    def test_valid_alphabet(self):
        assert is_valid_stroke_code("hspndzx")
        assert not is_valid_stroke_code("")
        assert not is_valid_stroke_code("hq")
