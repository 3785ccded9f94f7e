"""
LRC 驗證器

作用：
- 驗證時間軸順序（已標記行遞增、未標記行在最後）
- 找出存檔時會被捨棄的空行
"""

from dataclasses import dataclass
from typing import List, Tuple

from .model import LrcTimeline


@dataclass
class ValidationError:
    """驗證錯誤資訊"""

    line_index: int  # 行索引
    error_type: str  # 錯誤類型代碼
    message: str  # 錯誤訊息


class LrcValidator:
    """LRC 驗證器"""

    def validate(self, timeline: LrcTimeline) -> Tuple[bool, List[ValidationError]]:
        """驗證 LRC 時間軸內容"""
        errors: List[ValidationError] = []
        previous_time = None  # 前一個已標記行的時間
        first_unset_idx = None  # 第一個未標記行

        for line_idx, line in enumerate(timeline):
            # 檢查空行
            if line.is_blank:
                errors.append(
                    ValidationError(
                        line_index=line_idx,
                        error_type='EMPTY_TEXT',
                        message='Line has no text and will not be saved',
                    )
                )

            if line.time is None:
                if first_unset_idx is None:
                    first_unset_idx = line_idx
                continue

            # 未標記行之後不應再出現已標記行
            if first_unset_idx is not None:
                errors.append(
                    ValidationError(
                        line_index=line_idx,
                        error_type='UNSET_BEFORE_TIMED',
                        message=f'Timed line follows unset line {first_unset_idx}',
                    )
                )

            # 檢查時間順序（全域遞增）
            if previous_time is not None and line.time < previous_time:
                errors.append(
                    ValidationError(
                        line_index=line_idx,
                        error_type='TIME_ORDER',
                        message='Timestamp is earlier than the previous line',
                    )
                )
            previous_time = line.time

        return len(errors) == 0, errors
