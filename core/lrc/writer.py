"""
LRC 寫入器

作用：
- 將 LrcTimeline 轉為 LRC 字串
- 寫入 LRC 檔案（UTF-8-SIG）
"""

import config

from .model import LrcTimeline, LyricLine
from .timestamp import format_timestamp


class LrcWriter:
    """LRC 文件寫入器"""

    def write_file(self, timeline: LrcTimeline, file_path: str):
        """寫入 LRC 檔案（UTF-8-SIG）"""
        content = self.to_string(timeline)
        # 強制使用 UTF-8-SIG（帶 BOM）
        with open(file_path, 'w', encoding=config.LRC_ENCODING, newline='\n') as file_handle:
            file_handle.write(content)

    def to_string(self, timeline: LrcTimeline) -> str:
        """將時間軸轉為 LRC 字串（空白行不輸出）"""
        return '\n'.join(
            self._format_line(line)
            for line in timeline
            if not line.is_blank
        )

    def _format_line(self, line: LyricLine) -> str:
        text = line.text.strip()
        if line.time is None:
            return text
        return f"{format_timestamp(line.time)} {text}"
