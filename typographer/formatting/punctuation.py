from __future__ import annotations

import re

from typographer.formatting.chars import ELLIPSIS, EM_DASH, EN_DASH, LEFT_GUILLEMET, NBSP, RIGHT_GUILLEMET
from typographer.formatting.config import TypographyConfig


_ellipsis_re = re.compile(r"\.{3,}")
_spaced_ellipsis_re = re.compile(r"\. \. \. ")
_dashes_re = re.compile(r"-{2,}")
_guillemets_re = re.compile(r"<<|>>")

_GUILLEMETS = {"<<": LEFT_GUILLEMET, ">>": RIGHT_GUILLEMET}


def replace_ellipsis(text: str) -> tuple[str, int]:
    """Replace each run of three or more periods with a single `…`."""

    return _ellipsis_re.subn(ELLIPSIS, text)


def _spaced_ellipsis(m: re.Match[str]) -> str:
    # Another period follows: the trailing space must not break either.
    last = NBSP if m.string[m.end() : m.end() + 1] == "." else " "
    return "." + NBSP + "." + NBSP + "." + last


def replace_spaced_ellipsis(text: str) -> tuple[str, int]:
    """Glue the periods of a spaced ellipsis (`. . . `) with no-break spaces."""

    return _spaced_ellipsis_re.subn(_spaced_ellipsis, text)


def _dash_run(m: re.Match[str]) -> str:
    # Greedy from the left: triples first, then a pair; a lone remainder stays a hyphen.
    em, rest = divmod(len(m.group(0)), 3)
    return EM_DASH * em + (EN_DASH if rest == 2 else "-" * rest)


def replace_dashes(text: str) -> tuple[str, int]:
    """`--` -> en dash, `---` -> em dash; `----` -> em dash + hyphen."""

    return _dashes_re.subn(_dash_run, text)


def replace_guillemets(text: str) -> tuple[str, int]:
    return _guillemets_re.subn(lambda m: _GUILLEMETS[m.group(0)], text)


def apply_punctuation(text: str, config: TypographyConfig) -> tuple[str, dict[str, int]]:
    stats: dict[str, int] = {}

    if config.ellipsis and ".." in text:
        text, n = replace_ellipsis(text)
        if n:
            stats["ellipsis"] = n

    if config.ellipsis and ". . . " in text:
        text, n = replace_spaced_ellipsis(text)
        if n:
            stats["spaced_ellipsis"] = n

    if config.dashes and "--" in text:
        text, n = replace_dashes(text)
        if n:
            stats["dashes"] = n

    if config.guillemets and ("<<" in text or ">>" in text):
        text, n = replace_guillemets(text)
        if n:
            stats["guillemets"] = n

    return text, stats


def clean_punctuation(text: str, config: TypographyConfig | None = None) -> str:
    return apply_punctuation(text, config or TypographyConfig())[0]
