"""
事件模型（Event Model）

過濾器與接續控制器不直接輸出到 stdout。
若需要取得「這次過濾命中了幾個候選」「選字後是否重新掛上引導鍵」等資訊，
請在建立 StrokeFilterEngine 時傳入 on_event 回呼。

設計原則：
- 熱路徑允許降級（pass-through），但不允許「默默」降級：
  資料庫載入失敗會同時寫 WARNING 日誌並送出 degraded 事件。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class FilterEvent(TypedDict, total=False):
    type: Literal["filtered", "rearmed", "committed", "degraded"]
    engine: str

    # filtered
    code: str
    stroke: str
    matched: int
    unmatched: int
    show_others: bool

    # rearmed / committed
    input: str
    preedit: str

    # degraded
    stage: Literal["init", "compile_pattern"]
    degrade_reason: str
    exception_type: str
    exception_message: str


FilterEventHandler = Callable[[FilterEvent], None]
