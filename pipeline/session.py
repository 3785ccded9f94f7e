"""
歌詞編輯流程協調

作用：
- 載入歌曲歌詞（LRC 優先，失敗時改用純文字歌詞）
- 貼上 / 上傳整份歌詞
- 判斷未存檔變更並存檔
"""

import logging
from typing import Optional, Union

import config
from core.lrc import (
    LrcParser,
    LrcTimeline,
    LrcValidator,
    LrcWriter,
    SyncController,
    find_active_index,
)

from .storage import LyricsLoadError, LyricsSaveError, LyricsStore
from .track import LyricsTrack

logger = logging.getLogger(__name__)


class LyricsEditingSession:
    """單一歌曲的歌詞編輯狀態"""

    def __init__(self, store: LyricsStore, auto_advance: bool = config.DEFAULT_AUTO_ADVANCE):
        # 歌詞存取
        self.store = store
        # 預設自動前進
        self.auto_advance = auto_advance
        self.parser = LrcParser()
        self.writer = LrcWriter()
        self.validator = LrcValidator()
        # 目前歌曲與控制器
        self.track: Optional[LyricsTrack] = None
        self._controller: Optional[SyncController] = None
        # 上次存檔（或載入）時的 LRC 內容
        self._baseline = ''
        # 尚未存檔的上傳檔案原始內容
        self._pending_upload: Optional[str] = None

    @property
    def controller(self) -> SyncController:
        if self._controller is None:
            raise RuntimeError('No track loaded')
        return self._controller

    @property
    def timeline(self) -> LrcTimeline:
        return self.controller.timeline

    def load_track(self, track: LyricsTrack) -> LrcTimeline:
        """載入歌曲歌詞，捨棄前一首的所有狀態"""
        self.close()

        content = track.lyrics_text or ''
        from_file = False
        if track.lrc_file_path:
            try:
                content = self.parser.decode(self.store.load_lrc(track.lrc_file_path))
                from_file = True
            except LyricsLoadError as e:
                logger.warning(f"Falling back to plain lyrics for {track.track_id}: {e}")

        # 來自 LRC 檔案時保留未知標籤；純文字歌詞則過濾
        timeline = self.parser.parse_string(content, filter_metadata=not from_file)

        self.track = track
        self._controller = SyncController(timeline, auto_advance=self.auto_advance)
        self._baseline = self.writer.to_string(timeline)
        logger.info(f"Loaded {len(timeline)} lines for track {track.track_id} (from_file={from_file})")
        return timeline

    def switch_track(self, track: LyricsTrack) -> LrcTimeline:
        """切換到另一首歌"""
        return self.load_track(track)

    def paste_lyrics(self, text: str) -> LrcTimeline:
        """貼上整份歌詞（過濾所有標籤行）"""
        timeline = self.parser.parse_string(text, filter_metadata=True)
        return self.controller.bulk_replace(timeline)

    def upload_lrc(self, content: Union[bytes, str]) -> LrcTimeline:
        """上傳 LRC 檔案；存檔時保存原始內容"""
        if isinstance(content, bytes):
            content = self.parser.decode(content)
        timeline = self.parser.parse_string(content, filter_metadata=False)
        self.controller.bulk_replace(timeline)
        self._pending_upload = content
        return timeline

    def has_unsaved_changes(self) -> bool:
        """是否有尚未存檔的變更"""
        if self._controller is None:
            return False
        if self._pending_upload is not None:
            return True
        return self.writer.to_string(self.timeline) != self._baseline

    def save(self) -> LyricsTrack:
        """存檔並回傳更新後的歌曲紀錄；失敗時保留編輯狀態"""
        track = self._require_track()
        uploaded = self._pending_upload is not None
        content = self._pending_upload if uploaded else self.writer.to_string(self.timeline)

        ok, errors = self.validator.validate(self.timeline)
        if not ok:
            for error in errors:
                logger.warning(f"Line {error.line_index}: {error.error_type} - {error.message}")

        try:
            path = self.store.save_lrc(track, content, uploaded=uploaded)
        except LyricsSaveError as e:
            logger.error(f"Save failed for track {track.track_id}: {e}")
            raise

        self.track = track.with_saved_lyrics(path, content)
        self._baseline = self.writer.to_string(self.timeline)
        self._pending_upload = None
        return self.track

    def active_index(self, current_time: float) -> Optional[int]:
        """目前播放時間對應的歌詞行"""
        return find_active_index(self.timeline, current_time)

    def close(self):
        """結束編輯"""
        self.track = None
        self._controller = None
        self._baseline = ''
        self._pending_upload = None

    def _require_track(self) -> LyricsTrack:
        if self.track is None:
            raise RuntimeError('No track loaded')
        return self.track
