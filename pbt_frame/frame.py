from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from .errors import EmptyInputError, InvalidCharacterError
from .models import Frame


logger = logging.getLogger("pbt_frame.frame")

PRINTABLE_MIN = 32   # " "
PRINTABLE_MAX = 126  # "~"


def _is_printable(ch: str) -> bool:
    return PRINTABLE_MIN <= ord(ch) <= PRINTABLE_MAX


def is_printable_ascii(text: str) -> bool:
    return all(_is_printable(ch) for ch in text)


def validate(lines: Iterable[str]) -> list[str]:
    """
    Materialize ``lines`` and check every character of every line.

    Validation is all-or-nothing: the first character outside printable
    ASCII raises ``InvalidCharacterError`` for the whole input.
    """
    lines = list(lines)
    if not lines:
        raise EmptyInputError()

    for line_index, line in enumerate(lines):
        for column, ch in enumerate(line):
            if not _is_printable(ch):
                raise InvalidCharacterError(line_index, column, ch)
    return lines


def build(lines: Iterable[str]) -> list[str]:
    """
    Render ``lines`` inside a border of asterisks.

    Example:
        ["Hi"] -> ["******", "* Hi *", "******"]
    """
    lines = validate(lines)

    # len() counts code units; safe because validate() guarantees ASCII
    longest = max(len(s) for s in lines)
    border = "*" * (longest + 4)

    framed = [border]
    for s in lines:
        framed.append("* " + s + " " * (longest - len(s) + 1) + "*")
    framed.append(border)

    logger.debug("built frame: %d lines, width %d", len(framed), len(border))
    return framed


def build_frame(lines: Iterable[str]) -> Frame:
    return Frame(lines=tuple(build(lines)))


def render(lines: Iterable[str]) -> str:
    return "\n".join(build(lines))


def run(lines: Iterable[str], stream: TextIO | None = None) -> None:
    """Build the frame and print it, one newline-terminated block."""
    text = render(lines)
    out = stream if stream is not None else sys.stdout
    out.write(text + "\n")
