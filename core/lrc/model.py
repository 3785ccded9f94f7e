"""
LRC 資料結構定義

作用：
- 定義歌詞行與時間軸的核心資料結構
- 時間軸為不可變值，每次編輯回傳新的時間軸
"""

import uuid
from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Iterable, Iterator, Optional, Tuple

from .errors import IndexOutOfRange
from .timestamp import validate_seconds


def new_line_id() -> str:
    """產生新的歌詞行 ID"""
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class LyricLine:
    """一行歌詞"""

    text: str = ''  # 文字內容（可為空）
    time: Optional[float] = None  # 開始時間（秒），None 表示尚未標記
    id: str = field(default_factory=new_line_id)  # 編輯期間保持不變的識別碼

    def __post_init__(self):
        if self.time is not None:
            validate_seconds(self.time)

    @property
    def is_timed(self) -> bool:
        """是否已有時間戳"""
        return self.time is not None

    @property
    def is_blank(self) -> bool:
        """去除空白後是否為空行"""
        return not self.text.strip()


@dataclass(frozen=True)
class LrcTimeline:
    """LRC 完整時間軸"""

    lines: Tuple[LyricLine, ...] = ()

    @classmethod
    def from_lines(cls, lines: Iterable[LyricLine]) -> 'LrcTimeline':
        """由歌詞行建立時間軸"""
        return cls(lines=tuple(lines))

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LyricLine]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> LyricLine:
        return self.lines[self._check_index(index)]

    @cached_property
    def timed_order(self) -> Tuple[Tuple[float, ...], Tuple[int, ...]]:
        """已標記行依 (時間, 索引) 排序後的時間與索引，首次使用時計算"""
        ordered = sorted(
            (line.time, index) for index, line in enumerate(self.lines) if line.time is not None
        )
        return tuple(time for time, _ in ordered), tuple(index for _, index in ordered)

    def pairs(self) -> Tuple[Tuple[Optional[float], str], ...]:
        """(time, text) 列表，忽略 ID"""
        return tuple((line.time, line.text) for line in self.lines)

    def with_time(self, index: int, time: Optional[float]) -> 'LrcTimeline':
        """設定指定行的時間"""
        return self._replace_line(index, time=time)

    def with_text(self, index: int, text: str) -> 'LrcTimeline':
        """設定指定行的文字"""
        return self._replace_line(index, text=text)

    def inserted_after(self, after_index: int, line: LyricLine) -> 'LrcTimeline':
        """在指定行之後插入（-1 表示插到最前面）"""
        if not -1 <= after_index < len(self.lines):
            raise IndexOutOfRange(after_index, len(self.lines))
        position = after_index + 1
        return LrcTimeline(self.lines[:position] + (line,) + self.lines[position:])

    def removed(self, index: int) -> 'LrcTimeline':
        """刪除指定索引的歌詞行"""
        index = self._check_index(index)
        return LrcTimeline(self.lines[:index] + self.lines[index + 1:])

    def _replace_line(self, index: int, **changes) -> 'LrcTimeline':
        index = self._check_index(index)
        line = replace(self.lines[index], **changes)
        return LrcTimeline(self.lines[:index] + (line,) + self.lines[index + 1:])

    def _check_index(self, index: int) -> int:
        # 不接受負數索引，避免 -1 意外指到最後一行
        if not 0 <= index < len(self.lines):
            raise IndexOutOfRange(index, len(self.lines))
        return index
