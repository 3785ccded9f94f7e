"""
編輯歷程（復原 / 重做）

作用：
- 保存時間軸快照與目前游標
- 新的編輯會捨棄游標之後的快照
"""

from typing import List, Optional

from .model import LrcTimeline


class LrcHistory:
    """線性的復原/重做堆疊"""

    def __init__(self, timeline: Optional[LrcTimeline] = None):
        # 快照列表（LrcTimeline 為不可變值，可直接保存）
        self._snapshots: List[LrcTimeline] = []
        # 目前快照索引
        self._cursor = -1
        if timeline is not None:
            self.reset(timeline)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> LrcTimeline:
        """游標所在的快照"""
        if self._cursor < 0:
            raise LookupError('History is empty; call reset() first')
        return self._snapshots[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def __len__(self) -> int:
        return len(self._snapshots)

    def reset(self, timeline: LrcTimeline):
        """清空歷程並以單一快照作為新基準"""
        self._snapshots = [timeline]
        self._cursor = 0

    def push(self, timeline: LrcTimeline):
        """加入編輯後的快照（捨棄游標之後的內容）"""
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(timeline)
        self._cursor = len(self._snapshots) - 1

    def undo(self) -> Optional[LrcTimeline]:
        """退回上一個快照；無法退回時回傳 None"""
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._snapshots[self._cursor]

    def redo(self) -> Optional[LrcTimeline]:
        """前進到下一個快照；無法前進時回傳 None"""
        if not self.can_redo:
            return None
        self._cursor += 1
        return self._snapshots[self._cursor]
