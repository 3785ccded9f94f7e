"""
Pipeline module exports
"""

from .session import LyricsEditingSession
from .storage import (
    FileLyricsStore,
    LyricsLoadError,
    LyricsSaveError,
    LyricsStore,
    LyricsStoreError,
)
from .track import LyricsTrack

__all__ = [
    'LyricsEditingSession',
    'LyricsStore',
    'FileLyricsStore',
    'LyricsStoreError',
    'LyricsLoadError',
    'LyricsSaveError',
    'LyricsTrack',
]
