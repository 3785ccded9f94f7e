"""
歌詞檔案存取

作用：
- 定義歌詞存取介面（讀取 LRC 位元組、寫入產生的 LRC）
- 提供以資料夾保存的實作
"""

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import config

from .track import LyricsTrack

logger = logging.getLogger(__name__)


class LyricsStoreError(Exception):
    """歌詞存取錯誤"""

    retryable = False


class LyricsLoadError(LyricsStoreError):
    """無法讀取 LRC 檔案"""


class LyricsSaveError(LyricsStoreError):
    """無法寫入 LRC 檔案（可重試）"""

    retryable = True


class LyricsStore(ABC):
    """歌詞存取介面"""

    @abstractmethod
    def load_lrc(self, path: str) -> bytes:
        """讀取 LRC 內容，失敗時拋出 LyricsLoadError"""

    @abstractmethod
    def save_lrc(self, track: LyricsTrack, content: str, uploaded: bool = False) -> str:
        """寫入 LRC 內容並回傳新路徑，失敗時拋出 LyricsSaveError"""


class FileLyricsStore(LyricsStore):
    """以資料夾保存 LRC 檔案"""

    def __init__(self, root: Union[str, Path, None] = None, encoding: str = config.LRC_ENCODING):
        # 儲存根目錄
        self.root = Path(root) if root is not None else config.LYRICS_STORE_DIR
        # 寫入編碼
        self.encoding = encoding

    def load_lrc(self, path: Optional[str]) -> bytes:
        if not path:
            raise LyricsLoadError('Track has no LRC file path')
        file_path = self._resolve(path)
        try:
            return file_path.read_bytes()
        except OSError as e:
            raise LyricsLoadError(f'Cannot read {file_path}: {e}') from e

    def save_lrc(self, track: LyricsTrack, content: str, uploaded: bool = False) -> str:
        suffix = '_uploaded' if uploaded else ''
        relative = f"{track.track_id}_{int(time.time() * 1000)}{suffix}.lrc"
        file_path = self.root / relative
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding=self.encoding, newline='\n') as file_handle:
                file_handle.write(content)
        except OSError as e:
            raise LyricsSaveError(f'Cannot write {file_path}: {e}') from e
        logger.info(f"LRC saved: {file_path}")
        return relative

    def _resolve(self, path: str) -> Path:
        """相對路徑以根目錄為基準"""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root / path.lstrip('/')
