"""
LRC 例外定義
"""


class LrcError(Exception):
    """LRC 模組的基礎例外"""


class InvalidTimestamp(LrcError, ValueError):
    """時間戳數值不合法（負數、溢位或非數字）"""


class IndexOutOfRange(LrcError, IndexError):
    """歌詞行索引超出範圍"""

    def __init__(self, index: int, length: int):
        super().__init__(f'Line index {index} out of range (0..{length - 1})')
        self.index = index  # 請求的索引
        self.length = length  # 時間軸長度
