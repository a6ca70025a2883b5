from __future__ import annotations

from enum import Enum
from typing_extensions import TypeAlias

QuadrantIndex: TypeAlias = int


class Token(bytes, Enum):
    """输入中可识别的两种字符"""

    FULL_BLOCK = "\u2588".encode("utf-8")
    """U+2588 FULL BLOCK，表示已填充"""
    NBSP = "\u00a0".encode("utf-8")
    """U+00A0 NO-BREAK SPACE，表示空白"""

    @property
    def width(self) -> int:
        """UTF-8 编码的字节宽度"""
        return len(self.value)


MIN_TOKEN_WIDTH: int = min(t.width for t in Token)

# 8: 右下, 4: 右上, 2: 左下, 1: 左上
HALVE_BLOCKS: tuple[str, ...] = (
    "\u00a0",
    "▘",  # Quadrant Upper Left
    "▖",  # Quadrant Lower Left
    "▌",  # Left Half Block
    "▝",  # Quadrant Upper Right
    "▀",  # Upper Half Block
    "▞",  # Quadrant Upper Right and Lower Left
    "▛",  # Quadrant Upper Left and Upper Right and Lower Left
    "▗",  # Quadrant Lower Right
    "▚",  # Quadrant Upper Left and Lower Right
    "▄",  # Lower Half Block
    "▙",  # Quadrant Upper Left and Lower Left and Lower Right
    "▐",  # Right Half Block
    "▜",  # Quadrant Upper Left and Upper Right and Lower Right
    "▟",  # Quadrant Upper Right and Lower Left and Lower Right
    "\u2588",
)

HALVE_BLOCKS_UTF8: tuple[bytes, ...] = tuple(glyph.encode("utf-8") for glyph in HALVE_BLOCKS)

UPPER_LEFT = 0
LOWER_LEFT = 1
UPPER_RIGHT = 2
LOWER_RIGHT = 3


def quadrant_index(upper_left: bool, lower_left: bool, upper_right: bool, lower_right: bool) -> QuadrantIndex:
    return (
        upper_left << UPPER_LEFT | lower_left << LOWER_LEFT | upper_right << UPPER_RIGHT | lower_right << LOWER_RIGHT
    )
