from __future__ import annotations

from typing import Optional

from .exceptions import InvalidCharacterError, UnalignedError
from .glyphs import (
    HALVE_BLOCKS_UTF8,
    LOWER_LEFT,
    LOWER_RIGHT,
    MIN_TOKEN_WIDTH,
    UPPER_LEFT,
    UPPER_RIGHT,
    Token,
)

NEWLINE: int = ord("\n")

# 偶数位来自上行，奇数位来自下行
_CELL_ORDER: tuple[int, ...] = (UPPER_LEFT, LOWER_LEFT, UPPER_RIGHT, LOWER_RIGHT)


def is_terminated(line: bytes, cursor: int) -> bool:
    """游标是否已到达行尾（换行符或缓冲区末尾）"""
    return cursor >= len(line) or line[cursor] == NEWLINE


def classify(buffer: bytes, cursor: int, end: Optional[int] = None) -> tuple[bool, int]:
    """识别 `buffer[cursor:end]` 开头的字符

    :param buffer: 原始行
    :param cursor: 读取位置
    :param end: 读取上界，默认为缓冲区末尾
    :return: (是否为 FULL BLOCK, 消耗的字节数)
    :raises UnalignedError: 剩余字节不足一个完整字符
    :raises InvalidCharacterError: 字节完整但不是可识别的字符
    """
    if end is None:
        end = len(buffer)
    rest = buffer[cursor:end]
    for token in Token:
        if rest.startswith(token.value):
            return token is Token.FULL_BLOCK, token.width

    newline = rest.find(b"\n")
    if newline != -1:
        rest = rest[:newline]
    if len(rest) < MIN_TOKEN_WIDTH or any(token.value.startswith(rest) for token in Token):
        raise UnalignedError(cursor)
    raise InvalidCharacterError(cursor)


def encode(upper: bytes, lower: Optional[bytes] = None) -> bytes:
    """将一对源行合并为一行输出

    `lower` 为 `None` 时（输入行数为奇数的最后一行），下半部分全部视为空白。
    第一个识别错误会直接抛出，不会返回不完整的行。

    :return: 以换行符结尾的 UTF-8 编码输出行
    """
    lines = (upper, lower or b"")
    cursors = [0, 0]
    row = bytearray()
    while not is_terminated(upper, cursors[0]):
        index = 0
        for bit in _CELL_ORDER:
            side = bit & 1
            if side and is_terminated(lines[side], cursors[side]):
                continue
            filled, width = classify(lines[side], cursors[side])
            index |= filled << bit
            cursors[side] += width
        row += HALVE_BLOCKS_UTF8[index]
    row += b"\n"
    return bytes(row)
