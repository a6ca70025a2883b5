"""缩小使用 U+2588 FULL BLOCK 绘制的字符画"""
from __future__ import annotations

import argparse
import contextlib
import os
import sys
from dataclasses import dataclass
from typing import BinaryIO, Optional, Sequence
from typing_extensions import Self

from loguru import logger as log

from .exceptions import EncodeError
from .reader import halve

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

STDIN = "-"


@dataclass(frozen=True)
class Options:
    input: str
    """输入路径，`-` 表示标准输入"""
    prog: str
    """诊断信息中使用的程序名"""

    @classmethod
    def parse(cls, argv: Optional[Sequence[str]], prog: str) -> Self:
        """解析命令行

        没有任何选项：以 `-` 开头的参数（单个 `-` 除外）也视为输入路径。
        """
        parser = argparse.ArgumentParser(
            prog=prog,
            description=__doc__,
            epilog=f"Without inputfile or with '{STDIN}', {prog} will read from standard input",
            add_help=False,
        )
        parser.add_argument("inputfile", nargs="?", help="输入路径（单个横杠表示从 stdin 读取）")
        namespace, extra = parser.parse_known_args(argv)
        inputfile: Optional[str] = namespace.inputfile
        if extra:
            if inputfile is not None or len(extra) > 1:
                parser.error(f"unrecognized arguments: {' '.join(extra)}")
            inputfile = extra[0]
        return cls(input=STDIN if inputfile is None else inputfile, prog=prog)


def setup_logging() -> int:
    """替换 loguru 自带的 stderr 输出，调用者自行添加的 sink 不受影响

    :return: 新 sink 的 id
    """
    with contextlib.suppress(ValueError):
        log.remove(0)
    return log.add(sys.stderr, level="INFO", format="{message}", colorize=False)


def convert(src: BinaryIO, dst: BinaryIO, prog: str) -> int:
    try:
        for row in halve(src):
            dst.write(row)
    except EncodeError as e:
        log.error("{}: {}", prog, e.message)
        return EXIT_FAILURE
    finally:
        dst.flush()
    return EXIT_SUCCESS


def run(options: Options) -> int:
    dst = sys.stdout.buffer
    try:
        if options.input == STDIN:
            return convert(sys.stdin.buffer, dst, options.prog)
        with open(options.input, "rb") as src:
            return convert(src, dst, options.prog)
    except OSError as e:
        if e.filename is not None:
            log.error("{}: {}: {}", options.prog, e.strerror, e.filename)
        else:
            log.error("{}: {}", options.prog, e.strerror or e)
        return EXIT_FAILURE


def main(argv: Optional[Sequence[str]] = None, prog: Optional[str] = None) -> int:
    options = Options.parse(argv, prog or os.path.basename(sys.argv[0]))
    handler_id = setup_logging()
    try:
        return run(options)
    finally:
        log.remove(handler_id)
