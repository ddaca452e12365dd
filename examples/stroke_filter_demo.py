"""
筆畫過濾範例 - 逐字過濾多字詞

這個範例以記憶體內的宿主與碼表模擬輸入法：
輸入 haoma;z 過濾首字、選字後自動重新掛上引導鍵，接著過濾第二個字。
"""

import sys

from strokefilter import StrokeFilterConfig, StrokeFilterEngine, enable_debug_logging
from strokefilter.database.lookup import DictLookupDatabase
from strokefilter.host import MemoryComposition, TableCandidateSource

STROKES = {
    "好": "zphzsh",
    "号": "szhhz",
    "码": "hpszhzzh",
    "吗": "szhzzh",
}

TABLE = [
    ("hao", "好"),
    ("hao", "号"),
    ("ma", "码"),
    ("ma", "吗"),
    ("haoma", "号码"),
]


def show_menu(engine, source, ctx):
    menu = list(engine.filter(source.iterate(ctx.input), ctx.segment))
    print(f"  輸入: {ctx.input!r:12} 預編輯: {ctx.get_preedit()!r:12} 候選: {' '.join(c.text for c in menu)}")
    return menu


def demo_word_by_character():
    """展示逐字過濾與自動接續"""

    print("=" * 60)
    print("逐字筆畫過濾展示")
    print("=" * 60)

    ctx = MemoryComposition()
    source = TableCandidateSource(TABLE)
    engine = StrokeFilterEngine(StrokeFilterConfig(), database=DictLookupDatabase(STROKES))
    engine.init(ctx)

    for keys in ("haoma", ";", "z"):
        ctx.push_input(keys)
        show_menu(engine, source, ctx)

    menu = show_menu(engine, source, ctx)
    print(f"  選字: {menu[0].text}")
    ctx.select(menu[0])

    ctx.push_input("s")
    menu = show_menu(engine, source, ctx)
    print(f"  選字: {menu[0].text}")
    ctx.select(menu[0])

    print(f"  上屏: {ctx.last_commit}")
    engine.shutdown()


if __name__ == "__main__":
    if "--verbose" in sys.argv:
        enable_debug_logging()
    demo_word_by_character()
