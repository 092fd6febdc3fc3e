from __future__ import annotations

from enum import StrEnum


NBSP = "\u00a0"  # no-break space
NNBSP = "\u202f"  # narrow no-break space
EN_SPACE = "\u2002"  # demi-em space, after dialogue dashes
FIGURE_SPACE = "\u2007"

# Spaces that carry typographic intent and survive whitespace collapsing.
NO_BREAK_SPACES = frozenset((NBSP, NNBSP, EN_SPACE, FIGURE_SPACE))

ELLIPSIS = "…"
EN_DASH = "–"
EM_DASH = "—"

LEFT_GUILLEMET = "«"
RIGHT_GUILLEMET = "»"

LEFT_DOUBLE_QUOTE = "“"
RIGHT_DOUBLE_QUOTE = "”"
LEFT_SINGLE_QUOTE = "‘"
RIGHT_SINGLE_QUOTE = "’"
APOSTROPHE = RIGHT_SINGLE_QUOTE

OPENING_PUNCT = frozenset("([{" + LEFT_GUILLEMET + LEFT_DOUBLE_QUOTE + LEFT_SINGLE_QUOTE + EM_DASH + EN_DASH + "¿¡")
CLOSING_PUNCT = frozenset(")]}" + RIGHT_GUILLEMET + RIGHT_DOUBLE_QUOTE + RIGHT_SINGLE_QUOTE)


class CharClass(StrEnum):
    BOUNDARY = "boundary"
    SPACE = "space"
    OPENING = "opening"
    CLOSING = "closing"
    WORD = "word"
    PUNCT = "punct"


def char_class(ch: str | None) -> CharClass:
    """Classify a neighbour; None stands for start or end of text."""

    if ch is None:
        return CharClass.BOUNDARY
    if ch.isspace():
        return CharClass.SPACE
    if ch.isalnum():
        return CharClass.WORD
    if ch in OPENING_PUNCT:
        return CharClass.OPENING
    if ch in CLOSING_PUNCT:
        return CharClass.CLOSING
    return CharClass.PUNCT
