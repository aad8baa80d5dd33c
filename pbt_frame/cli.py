from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import AppConfig, InputConfig, LoggingConfig
from .errors import FrameError
from .frame import run
from .log import configure_logging


logger = logging.getLogger("pbt_frame.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pbt-frame",
        description="Print lines of printable ASCII text inside a frame of asterisks.",
    )
    parser.add_argument(
        "lines",
        nargs="*",
        help="Lines to frame. If omitted, lines are read from --file or stdin.",
    )
    parser.add_argument(
        "--file",
        help="Read lines to frame from this file ('-' for stdin).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        help="Write log records to this file instead of stderr.",
    )
    args = parser.parse_args(argv)
    if args.lines and args.file:
        parser.error("positional lines and --file are mutually exclusive")
    return args


def build_config(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        input=InputConfig(
            lines=list(args.lines),
            file=Path(args.file) if args.file else None,
        ),
        logging=LoggingConfig(
            level=args.log_level,
            log_file=Path(args.log_file) if args.log_file else None,
        ),
    )


def split_lines(text: str) -> list[str]:
    """
    Split on line feeds only; a single trailing newline does not start a new line.

    Other separators recognised by ``str.splitlines`` (form feed, U+2028, ...)
    stay in the text so validation can reject them.
    """
    text = text.replace("\r\n", "\n")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(config: InputConfig) -> list[str]:
    if config.lines:
        return config.lines
    # 未提供文件或文件为 "-" 时从标准输入读取
    if config.file is None or str(config.file) == "-":
        data = sys.stdin.buffer.read()
    else:
        data = config.file.read_bytes()
    # 非法字节变为代理字符，由 validate 统一拒绝
    return split_lines(data.decode("utf-8", errors="surrogateescape"))


def main(argv: list[str] | None = None) -> int:
    config = build_config(parse_args(argv))
    configure_logging(config.logging)

    try:
        lines = read_lines(config.input)
    except OSError as exc:
        logger.info("cannot read input: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("framing %d line(s)", len(lines))
    try:
        run(lines, stream=sys.stdout)
    except FrameError as exc:
        logger.info("rejected input: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
