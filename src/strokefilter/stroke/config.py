"""
筆畫碼配置模組

集中管理筆畫字母表、別名與萬用字元。
"""


class StrokeAlphabetConfig:
    """筆畫碼配置類別 - 五種基本筆畫加上別名與萬用字元"""

    # 資料庫中的筆畫類型
    # h=橫 s=豎 p=撇 n=捺/點 z=折
    STROKES = {
        "h": "橫",
        "s": "豎",
        "p": "撇",
        "n": "捺",
        "z": "折",
    }

    # 使用者輸入的別名：d(點) 與 n(捺) 等價，比對前一律轉成 n
    ALIASES = {
        "d": "n",
    }

    # 萬用字元：匹配任意一個筆畫
    WILDCARD = "x"

    # 使用者可輸入的完整字母表
    INPUT_ALPHABET = frozenset(STROKES) | frozenset(ALIASES) | {WILDCARD}

    # 預設引導鍵
    DEFAULT_GUIDE_KEY = ";"
