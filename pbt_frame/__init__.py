"""
A small property-based testing tutorial.

The code under test renders a list of strings inside a frame of asterisks:
- every line of the frame has the same width (longest input + 4)
- the frame has two more lines than the input
- input outside printable ASCII is rejected as a whole

The ``strategies`` module provides the hypothesis generators used to check
those properties.
"""

from .errors import EmptyInputError, FrameError, InvalidCharacterError
from .frame import build, build_frame, is_printable_ascii, render, run, validate
from .models import Frame

__all__ = [
    "cli",
    "config",
    "errors",
    "frame",
    "log",
    "models",
    "strategies",
    "EmptyInputError",
    "Frame",
    "FrameError",
    "InvalidCharacterError",
    "build",
    "build_frame",
    "is_printable_ascii",
    "render",
    "run",
    "validate",
]
