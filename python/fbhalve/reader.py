from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from loguru import logger as log

from .encoder import encode
from .exceptions import EncodeError


@dataclass(frozen=True)
class LinePair:
    """组成一行输出的两行源文本"""

    upper: bytes
    """上行"""
    lower: Optional[bytes]
    """下行，输入在上行之后结束时为 `None`"""
    lineno: int
    """上行在源文件中的行号（从 1 开始）"""

    def encode(self) -> bytes:
        return encode(self.upper, self.lower)


def iter_line_pairs(stream: BinaryIO) -> Iterator[LinePair]:
    lines = iter(stream)
    lineno = 1
    for upper in lines:
        yield LinePair(upper, next(lines, None), lineno)
        lineno += 2


def halve(stream: BinaryIO) -> Iterator[bytes]:
    """逐行输出缩小后的图像

    遇到第一个错误时，之前的行已经全部产出，随后异常原样抛出。
    """
    for pair in iter_line_pairs(stream):
        try:
            row = pair.encode()
        except EncodeError as e:
            log.debug("第 {} 行附近编码失败: {}", pair.lineno, e)
            raise
        log.debug("第 {} 行编码完成，共 {} 字节", pair.lineno, len(row))
        yield row
