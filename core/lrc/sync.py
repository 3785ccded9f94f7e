"""
歌詞時間標記控制器

作用：
- 邊播邊把目前播放時間標記到歌詞行
- 新增 / 刪除 / 修改行，所有編輯都記錄到歷程
- 管理編輯游標與自動前進
"""

import logging
from typing import Optional

from .history import LrcHistory
from .model import LrcTimeline, LyricLine
from .timestamp import validate_seconds

logger = logging.getLogger(__name__)


class SyncController:
    """時間標記操作"""

    def __init__(self, timeline: Optional[LrcTimeline] = None, auto_advance: bool = True):
        # 編輯歷程（目前時間軸即歷程游標所在快照）
        self.history = LrcHistory(timeline if timeline is not None else LrcTimeline())
        # 編輯游標（與播放位置無關）
        self.current_line_index = 0
        # 標記後自動跳到下一個非空行
        self.auto_advance = auto_advance

    @property
    def timeline(self) -> LrcTimeline:
        """目前時間軸"""
        return self.history.current

    def sync_line(self, index: int, now_seconds: float) -> LrcTimeline:
        """將播放時間標記到指定行"""
        updated = self.timeline.with_time(index, validate_seconds(now_seconds))
        self.history.push(updated)
        logger.debug(f"Synced line {index} at {now_seconds:.3f}s")

        if self.auto_advance:
            next_index = index + 1
            while next_index < len(updated) and updated.lines[next_index].is_blank:
                next_index += 1
            if next_index < len(updated):
                self.current_line_index = next_index
        return updated

    def sync_current(self, now_seconds: float) -> LrcTimeline:
        """標記目前游標所在行"""
        return self.sync_line(self.current_line_index, now_seconds)

    def back_line(self):
        """游標回到上一行（不影響歷程）"""
        self.current_line_index = max(0, self.current_line_index - 1)

    def add_line(self, after_index: Optional[int] = None) -> LrcTimeline:
        """在指定行之後插入空白行（None 或 -1 表示插到最前面）"""
        if after_index is None:
            after_index = -1
        updated = self.timeline.inserted_after(after_index, LyricLine())
        self.history.push(updated)
        self.current_line_index = after_index + 1
        return updated

    def remove_line(self, index: int) -> LrcTimeline:
        """刪除指定行"""
        updated = self.timeline.removed(index)
        self.history.push(updated)

        if self.current_line_index >= index and self.current_line_index > 0:
            self.current_line_index -= 1
        elif not updated:
            self.current_line_index = 0
        return updated

    def edit_text(self, index: int, new_text: str) -> LrcTimeline:
        """修改指定行文字"""
        updated = self.timeline.with_text(index, new_text)
        self.history.push(updated)
        return updated

    def bulk_replace(self, timeline: LrcTimeline) -> LrcTimeline:
        """整份替換（貼上或上傳檔案），建立新的歷程基準"""
        self.history.reset(timeline)
        self.current_line_index = 0
        logger.info(f"Timeline replaced ({len(timeline)} lines)")
        return timeline

    def undo(self) -> LrcTimeline:
        """復原"""
        self.history.undo()
        self._clamp_cursor()
        return self.timeline

    def redo(self) -> LrcTimeline:
        """重做"""
        self.history.redo()
        self._clamp_cursor()
        return self.timeline

    def _clamp_cursor(self):
        self.current_line_index = max(0, min(self.current_line_index, len(self.timeline) - 1))
