"""
LRC 解析器

作用：
- 解析 LRC 文字、位元組或檔案內容
- 過濾元資訊標籤、展開一行多個時間戳
- 轉換為依時間排序的 LrcTimeline
"""

import logging
import os
import re
from typing import List, Optional, Sequence, Tuple

import config

from .errors import InvalidTimestamp
from .model import LrcTimeline, LyricLine
from .timestamp import TIMESTAMP_PATTERN, decode_timestamp

logger = logging.getLogger(__name__)

# 元資訊行：[tag:任意內容]
METADATA_PATTERN = re.compile(r'^\[([a-zA-Z]+):.*\]$')
# 換行正規化（\r\n 與單獨的 \r 視為 \n）
NEWLINE_PATTERN = re.compile(r'\r\n?')


class LrcParser:
    """歌詞解析器"""

    def __init__(self, metadata_tags: Sequence[str] = config.METADATA_TAGS):
        # 一律過濾的元資訊標籤（小寫）
        self.metadata_tags = frozenset(tag.lower() for tag in metadata_tags)

    def parse_file(self, file_path: str, filter_metadata: bool = False) -> LrcTimeline:
        """依副檔名解析檔案"""
        ext = os.path.splitext(file_path)[1].lower()
        if ext not in ('.lrc', '.txt'):
            raise ValueError(f'Unsupported format: {ext}')
        with open(file_path, 'rb') as file_handle:
            data = file_handle.read()
        return self.parse_bytes(data, filter_metadata=filter_metadata)

    def parse_bytes(self, data: bytes, filter_metadata: bool = False) -> LrcTimeline:
        """解析位元組內容（嘗試多種編碼）"""
        return self.parse_string(self.decode(data), filter_metadata=filter_metadata)

    def decode(self, data: bytes) -> str:
        """位元組轉文字"""
        return decode_text(data)

    def parse_string(self, content: str, filter_metadata: bool = False) -> LrcTimeline:
        """
        解析 LRC 字串內容

        filter_metadata 為 True 時（貼上的純文字歌詞），
        未知的 [tag:...] 行也一併捨棄；已知元資訊標籤一律捨棄。
        """
        if not content:
            return LrcTimeline()

        lines: List[LyricLine] = []
        for raw_line in NEWLINE_PATTERN.sub('\n', content).split('\n'):
            line = raw_line.strip()
            if not line:
                continue

            if self._is_filtered_metadata(line, filter_metadata):
                continue

            lines.extend(self._parse_line(line))

        # 已標記的行依時間排序，未標記的行放最後（穩定排序）
        lines.sort(key=lambda item: (item.time is None, item.time or 0.0))
        return LrcTimeline.from_lines(lines)

    def _is_filtered_metadata(self, line: str, filter_metadata: bool) -> bool:
        """判斷是否為需要捨棄的元資訊行"""
        match = METADATA_PATTERN.match(line)
        if not match:
            return False
        if match.group(1).lower() in self.metadata_tags:
            return True
        return filter_metadata

    def _parse_line(self, line: str) -> List[LyricLine]:
        """解析單行，可能產生 0 行、1 行或多行"""
        times, text = self._extract_timestamps(line)
        if times is None:
            # 無時間戳：保留為尚未標記的歌詞
            return [LyricLine(text=line)]
        if not text:
            # 只有時間戳沒有文字
            return []
        return [LyricLine(text=text, time=time) for time in times]

    def _extract_timestamps(self, line: str) -> Tuple[Optional[List[float]], str]:
        """
        取出所有時間戳與剩餘文字
        格式：[mm:ss.xx][mm:ss.xx]內容
        """
        matches = list(TIMESTAMP_PATTERN.finditer(line))
        if not matches:
            return None, line

        times: List[float] = []
        for match in matches:
            minutes_str, seconds_str, fraction_str = match.groups()
            try:
                times.append(decode_timestamp(minutes_str, seconds_str, fraction_str or ''))
            except InvalidTimestamp as exc:
                logger.warning(f"Ignoring timestamps on line {line!r}: {exc}")
                return None, line

        text = TIMESTAMP_PATTERN.sub('', line).strip()
        return times, text


def decode_text(data: bytes) -> str:
    """將位元組解碼為文字（依序嘗試設定中的編碼）"""
    for encoding in config.LRC_READ_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode('utf-8', errors='replace')
