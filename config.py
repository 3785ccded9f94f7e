"""
Configuration for lrc-sync-engine
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
LYRICS_STORE_DIR = PROJECT_ROOT / 'lyrics-sync-files'

# LRC settings
LRC_ENCODING = 'utf-8-sig'
LRC_READ_ENCODINGS = ('utf-8-sig', 'utf-8', 'gbk')
TIME_FORMAT = 'mm:ss.xx'

# Metadata tags that are never kept as lyric lines
METADATA_TAGS = ('ti', 'ar', 'al', 'by', 'offset', 're', 've', 'length')

# Sync settings
DEFAULT_AUTO_ADVANCE = True

# Logging
LOG_FILE = 'lrc-sync.log'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
