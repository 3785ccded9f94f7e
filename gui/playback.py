"""
播放進度與歌詞高亮的橋接

作用：
- 接收播放器的播放位置（毫秒或秒）
- 每次更新後送出目前應高亮的歌詞行索引（-1 表示無）
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from core.lrc import LrcTimeline, find_active_index


class PlaybackLyricsBridge(QObject):
    """播放位置 → 歌詞行索引"""

    # 目前歌詞行索引（-1 表示尚無）
    active_line_changed = pyqtSignal(int)

    def __init__(self, timeline: Optional[LrcTimeline] = None, parent=None):
        super().__init__(parent)
        # 時間軸
        self.timeline = timeline if timeline is not None else LrcTimeline()
        # 最近一次的結果
        self.active_index = -1

    def set_timeline(self, timeline: LrcTimeline):
        """更換時間軸（下次更新時生效）"""
        self.timeline = timeline

    def on_position_changed(self, position_ms: int):
        """QMediaPlayer.positionChanged 對應的槽（毫秒）"""
        self.update_time(max(0, position_ms) / 1000.0)

    def update_time(self, seconds: float) -> int:
        """以秒數更新並送出結果"""
        index = find_active_index(self.timeline, seconds)
        self.active_index = -1 if index is None else index
        self.active_line_changed.emit(self.active_index)
        return self.active_index
