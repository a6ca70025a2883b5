from __future__ import annotations

from fbhalve.glyphs import Token

FULL = Token.FULL_BLOCK.value
NBSP = Token.NBSP.value


def art(*rows: str) -> bytes:
    """`#` 为 FULL BLOCK，`.` 为 NBSP，每行以换行符结尾"""
    return b"".join(b"".join(FULL if c == "#" else NBSP for c in row) + b"\n" for row in rows)


# conftest.sample_art 的缩小结果
SAMPLE_ROWS = ["▛\u00a0▜\n", "\u00a0█\u00a0\n", "▘\u00a0▝\n"]
