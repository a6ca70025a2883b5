class FBHalveError(Exception):
    """fbhalve 所有异常的基类"""


class EncodeError(FBHalveError, ValueError):
    """行对无法编码时引发的异常"""

    message: str = "Cannot encode input file"

    def __init__(self, offset: int) -> None:
        super().__init__(f"{self.message} (byte offset {offset})")
        self.offset: int = offset
        """出错位置在行内的字节偏移"""


class UnalignedError(EncodeError):
    """剩余字节不足以容纳一个完整字符，原图被截断或损坏"""

    message = "Unaligned input file"


class InvalidCharacterError(EncodeError):
    """出现了既非 FULL BLOCK 也非 NBSP 的字符"""

    message = "Invalid character in input file"
