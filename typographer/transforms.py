from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from enum import StrEnum

from typographer.caps import small_caps_tex
from typographer.escape import escape_html, escape_tex, nb_spaces_html, nb_spaces_tex, tex_space
from typographer.formatting.config import TypographyConfig
from typographer.formatting.french import format_french, format_french_markup
from typographer.formatting.punctuation import (
    replace_dashes,
    replace_ellipsis,
    replace_guillemets,
    replace_spaced_ellipsis,
)
from typographer.formatting.quotes import replace_quotes
from typographer.formatting.whitespace import normalize_whitespace


class Transformation(StrEnum):
    ESCAPE_HTML = "escape_html"
    ESCAPE_TEX = "escape_tex"
    ESCAPE_NB_SPACES = "escape_nb_spaces"
    ESCAPE_NB_SPACES_TEX = "escape_nb_spaces_tex"
    CLEAN_ELLIPSIS = "clean_ellipsis"
    CLEAN_DASHES = "clean_dashes"
    CLEAN_GUILLEMETS = "clean_guillemets"
    CLEAN_QUOTES = "clean_quotes"
    FORMAT_FRENCH = "format_french"
    FORMAT_FRENCH_TEX = "format_french_tex"
    SMALL_CAPS_TEX = "small_caps_tex"


DESCRIPTIONS: dict[Transformation, str] = {
    Transformation.ESCAPE_HTML: "escape text for HTML display",
    Transformation.ESCAPE_TEX: "escape text for LaTeX display",
    Transformation.ESCAPE_NB_SPACES: "escape narrow non-breaking spaces for HTML",
    Transformation.ESCAPE_NB_SPACES_TEX: "escape non-breaking spaces with LaTeX commands (~, \\,)",
    Transformation.CLEAN_ELLIPSIS: "use unicode character ‘…’ for ellipsis",
    Transformation.CLEAN_DASHES: "replace -- and --- with en and em dashes",
    Transformation.CLEAN_GUILLEMETS: "replace << and >> with guillemets",
    Transformation.CLEAN_QUOTES: "try to replace straight quotes with curly ones",
    Transformation.FORMAT_FRENCH: "try to apply french typographic rules",
    Transformation.FORMAT_FRENCH_TEX: "apply french typographic rules, writing spaces as LaTeX commands",
    Transformation.SMALL_CAPS_TEX: "typeset acronyms in LaTeX small caps",
}


def _build(config: TypographyConfig) -> dict[Transformation, Callable[[str], str]]:
    # The clean_* steps are explicit requests: they run whatever the config toggles say.
    return {
        Transformation.ESCAPE_HTML: escape_html,
        Transformation.ESCAPE_TEX: escape_tex,
        Transformation.ESCAPE_NB_SPACES: nb_spaces_html,
        Transformation.ESCAPE_NB_SPACES_TEX: nb_spaces_tex,
        Transformation.CLEAN_ELLIPSIS: lambda s: replace_spaced_ellipsis(replace_ellipsis(s)[0])[0],
        Transformation.CLEAN_DASHES: lambda s: replace_dashes(s)[0],
        Transformation.CLEAN_GUILLEMETS: lambda s: replace_guillemets(s)[0],
        Transformation.CLEAN_QUOTES: lambda s: replace_quotes(s, config.threshold_quote)[0],
        Transformation.FORMAT_FRENCH: lambda s: format_french(s, config),
        Transformation.FORMAT_FRENCH_TEX: lambda s: format_french_markup(s, config, tex_space),
        Transformation.SMALL_CAPS_TEX: small_caps_tex,
    }


def parse_transformations(names: Iterable[str]) -> list[Transformation]:
    out: list[Transformation] = []
    for name in names:
        try:
            out.append(Transformation(str(name).strip()))
        except ValueError:
            raise ValueError(f"unknown transformation: {name!r}") from None
    return out


def apply_transformations(text: str, names: Iterable[str], config: TypographyConfig) -> str:
    """Apply named transformations in the given order.

    Raises ValueError on an unknown name, before anything is applied.
    """

    steps = parse_transformations(names)
    table = _build(config)
    for step in steps:
        text = table[step](text)
    return text


_newline_re = re.compile(r"(\r\n|\r|\n)")


def transform_lines(text: str, names: Iterable[str], config: TypographyConfig) -> str:
    """Collapse whitespace on each line, then apply the transformations to it.

    Line endings are kept as they were.
    """

    names = list(names)
    parse_transformations(names)
    parts = _newline_re.split(text)
    # split() with a capture group alternates line bodies and separators.
    for i in range(0, len(parts), 2):
        parts[i] = apply_transformations(normalize_whitespace(parts[i]), names, config)
    return "".join(parts)
