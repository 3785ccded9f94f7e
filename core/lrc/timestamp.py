"""
LRC 時間戳編解碼

作用：
- 秒數 → [mm:ss.xx] 標籤（固定格式）
- 標籤數字 → 秒數（容許 2 或 3 位小數、. 或 : 分隔）
"""

import math
import re
from numbers import Real
from typing import Optional, Union

from .errors import InvalidTimestamp

# 時間戳語法：[m:ss]、[mm:ss.f]、[mm:ss:fff]
TIMESTAMP_PATTERN = re.compile(r'\[(\d{1,2}):(\d{2})(?:[.:](\d{1,3}))?\]')

# 浮點誤差容忍（避免 1.29 * 100 = 128.999... 被截成 .28）
_EPSILON = 1e-7


def validate_seconds(seconds) -> float:
    """確認秒數為非負的有限數值"""
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        raise InvalidTimestamp(f'Timestamp must be a number, got {seconds!r}')
    value = float(seconds)
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidTimestamp(f'Timestamp must be non-negative and finite, got {seconds!r}')
    return value


def format_timestamp(seconds: float) -> str:
    """將秒數格式化為 [mm:ss.xx]（百分秒採截斷）"""
    centisecs_total = int(math.floor(validate_seconds(seconds) * 100 + _EPSILON))
    minutes, rest = divmod(centisecs_total, 6000)
    secs, centisecs = divmod(rest, 100)
    return f"[{minutes:02d}:{secs:02d}.{centisecs:02d}]"


def format_clock(seconds: Optional[float]) -> str:
    """顯示用時間 mm:ss.xx，未設定時回傳 --:--"""
    if seconds is None:
        return '--:--'
    return format_timestamp(seconds)[1:-1]


def _to_int(value: Union[str, int], name: str) -> int:
    """數字欄位轉整數"""
    if isinstance(value, bool):
        raise InvalidTimestamp(f'{name} must be numeric, got {value!r}')
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.isdigit() and value.isascii():
        number = int(value)
    else:
        raise InvalidTimestamp(f'{name} must be numeric, got {value!r}')
    if number < 0:
        raise InvalidTimestamp(f'{name} must be non-negative, got {value!r}')
    return number


def decode_timestamp(minutes: Union[str, int], seconds: Union[str, int], fraction: str = '') -> float:
    """
    將時間戳欄位轉為秒數：
    fraction 的位數決定單位（2 位為百分秒、3 位為毫秒）
    """
    minutes_value = _to_int(minutes, 'minutes')
    seconds_value = _to_int(seconds, 'seconds')
    if seconds_value >= 60:
        raise InvalidTimestamp(f'seconds must be below 60, got {seconds!r}')

    total = minutes_value * 60 + seconds_value
    if not fraction:
        return float(total)

    if not isinstance(fraction, str) or len(fraction) > 3:
        raise InvalidTimestamp(f'fraction must be 1-3 digits, got {fraction!r}')
    fraction_value = _to_int(fraction, 'fraction')
    return total + fraction_value / (10 ** len(fraction))
