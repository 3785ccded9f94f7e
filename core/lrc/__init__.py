"""
LRC 模組公開介面
"""

from .errors import IndexOutOfRange, InvalidTimestamp, LrcError
from .history import LrcHistory
from .model import LrcTimeline, LyricLine, new_line_id
from .parser import LrcParser
from .resolver import find_active_index
from .sync import SyncController
from .timestamp import decode_timestamp, format_clock, format_timestamp
from .validator import LrcValidator, ValidationError
from .writer import LrcWriter

__all__ = [
    'LrcError',
    'InvalidTimestamp',
    'IndexOutOfRange',
    'LyricLine',
    'LrcTimeline',
    'new_line_id',
    'format_timestamp',
    'format_clock',
    'decode_timestamp',
    'LrcParser',
    'LrcWriter',
    'LrcHistory',
    'SyncController',
    'find_active_index',
    'LrcValidator',
    'ValidationError',
]
