"""
播放中歌詞行查詢

作用：
- 依目前播放時間找出應高亮的歌詞行
- 二分搜尋，可在每次播放刷新時呼叫
"""

from bisect import bisect_right
from typing import Optional

from .model import LrcTimeline


def find_active_index(timeline: LrcTimeline, current_time: float) -> Optional[int]:
    """
    找出 time <= current_time 中時間最大的一行

    時間相同的多行取索引最後的一行；未標記的行不參與比較，
    尚未到第一個時間戳或沒有任何時間戳時回傳 None。
    """
    times, indices = timeline.timed_order
    position = bisect_right(times, current_time)
    return indices[position - 1] if position else None
