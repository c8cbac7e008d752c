"""
Responsive two-column layout: list stack on the left, detail on the right.

Until the terminal reports both dimensions the dashboard renders stacked
with no width constraints; compute_layout returns None for that case.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

LEFT_RATIO = 0.3
MIN_COLUMN_WIDTH = 10
BORDER_WIDTH = 2
RESERVED_ROWS = 6  # borders, blank lines and the help line


@dataclass(frozen=True)
class Layout:
    left_width: int
    right_width: int
    list_width: int
    detail_width: int
    detail_height: int


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def compute_columns(total_width: int) -> Tuple[int, int]:
    left = max(_round_half_away(total_width * LEFT_RATIO), MIN_COLUMN_WIDTH)
    right = max(total_width - left, MIN_COLUMN_WIDTH)
    return left, right


def compute_layout(width: int, height: int) -> Optional[Layout]:
    if width <= 0 or height <= 0:
        return None
    left, right = compute_columns(width)
    return Layout(
        left_width=left,
        right_width=right,
        list_width=left - BORDER_WIDTH,
        detail_width=right - BORDER_WIDTH,
        detail_height=max(1, height - RESERVED_ROWS),
    )
