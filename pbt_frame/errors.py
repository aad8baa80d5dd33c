from __future__ import annotations


class FrameError(ValueError):
    """Base class for every error raised while building a frame."""


class EmptyInputError(FrameError):
    def __init__(self) -> None:
        super().__init__("cannot build a frame from an empty sequence of lines")


class InvalidCharacterError(FrameError):
    """
    Raised when any input line contains a character outside printable ASCII
    (code points 32..126). The whole build is aborted; the attributes point
    at the first offending character.
    """

    def __init__(self, line_index: int, column: int, character: str) -> None:
        self.line_index = line_index
        self.column = column
        self.character = character
        super().__init__(
            f"line {line_index}, column {column}: "
            f"character U+{ord(character):04X} is not printable ASCII"
        )
