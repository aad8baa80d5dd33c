"""
Hypothesis strategies producing inputs for the frame builder.

Valid inputs are non-empty lists of printable-ASCII strings; invalid inputs
are the same lists with exactly one character from outside 32..126 spliced in.
"""

from __future__ import annotations

from hypothesis import strategies as st

from .frame import PRINTABLE_MAX, PRINTABLE_MIN


def printable_ascii_text(min_size: int = 0, max_size: int | None = None) -> st.SearchStrategy[str]:
    return st.text(
        alphabet=st.characters(min_codepoint=PRINTABLE_MIN, max_codepoint=PRINTABLE_MAX),
        min_size=min_size,
        max_size=max_size,
    )


def frame_inputs(min_lines: int = 1, max_lines: int | None = None) -> st.SearchStrategy[list[str]]:
    return st.lists(printable_ascii_text(), min_size=min_lines, max_size=max_lines)


def invalid_character() -> st.SearchStrategy[str]:
    """Control characters, DEL and any non-ASCII code point (no surrogates)."""
    return st.one_of(
        st.characters(max_codepoint=PRINTABLE_MIN - 1),
        st.characters(min_codepoint=PRINTABLE_MAX + 1, exclude_categories=("Cs",)),
    )


@st.composite
def inputs_with_invalid_character(draw: st.DrawFn) -> list[str]:
    lines = draw(frame_inputs())
    bad = draw(invalid_character())
    line_index = draw(st.integers(min_value=0, max_value=len(lines) - 1))
    target = lines[line_index]
    column = draw(st.integers(min_value=0, max_value=len(target)))
    lines[line_index] = target[:column] + bad + target[column:]
    return lines
