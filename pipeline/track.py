"""
歌曲歌詞紀錄

作用：
- 保存歌曲對應的 LRC 檔案路徑與純文字歌詞
- 以 JSON 保存 / 載入
"""

from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Optional
import json
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LyricsTrack:
    """一首歌的歌詞狀態"""

    # 基本信息
    track_id: str
    title: str = ""

    # 歌詞來源
    lrc_file_path: Optional[str] = None  # 已儲存的 LRC 路徑
    lyrics_text: Optional[str] = None  # 純文字歌詞（LRC 無法載入時使用）

    # 時間戳
    updated_at: str = ""

    def with_saved_lyrics(self, lrc_file_path: str, content: str) -> 'LyricsTrack':
        """存檔後的新紀錄"""
        return replace(
            self,
            lrc_file_path=lrc_file_path,
            lyrics_text=content,
            updated_at=datetime.now().isoformat(timespec='seconds'),
        )

    def to_dict(self) -> dict:
        """轉為字典"""
        return asdict(self)

    def save_to_json(self, file_path: str):
        """保存紀錄為 JSON"""
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
            logger.info(f"Track saved: {file_path}")
        except OSError as e:
            logger.error(f"Failed to save track: {e}")
            raise

    @classmethod
    def load_from_json(cls, file_path: str) -> 'LyricsTrack':
        """從 JSON 載入紀錄"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            track = cls(**data)
            logger.info(f"Track loaded: {file_path}")
            return track
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Failed to load track: {e}")
            raise
