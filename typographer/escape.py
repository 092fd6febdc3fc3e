"""Escaping for output formats.

These never run inside the formatting stages; callers sequence them before or
after. The ``*_space`` functions are space escapers for
`typographer.formatting.french.format_french_markup`.
"""

from __future__ import annotations

import re

from typographer.formatting.chars import EN_SPACE, NBSP, NNBSP


_HTML = {"<": "&lt;", ">": "&gt;", "&": "&amp;"}
_html_re = re.compile(r"[<>&]")

_TEX = {
    "-": "-{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "[": "{[}",
    "]": "{]}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "<": r"\textless{}",
    ">": r"\textgreater{}",
    "!": "!{}",
    "\\": r"\textbackslash{}",
}
# A hyphen followed by another one would form a TeX ligature.
_tex_re = re.compile(r"-(?=-)|[&%$#_{}\[\]~^<>!\\]")

_TEX_SPACES = {NNBSP: r"\,", EN_SPACE: r"\enspace ", NBSP: "~"}
_HTML_SPACES = {NNBSP: "&#8239;", EN_SPACE: "&#8194;", NBSP: "&#160;"}

_tex_spaces_re = re.compile("[" + NNBSP + EN_SPACE + NBSP + "]")
_nnbsp_token_re = re.compile(r"\S*" + NNBSP + r"[\S" + NNBSP + "]*")


def escape_html(text: str) -> str:
    if not _html_re.search(text):
        return text
    return _html_re.sub(lambda m: _HTML[m.group(0)], text)


def escape_tex(text: str) -> str:
    if not _tex_re.search(text):
        return text
    return _tex_re.sub(lambda m: _TEX[m.group(0)], text)


def escape_quotes(text: str) -> str:
    """Straight double quotes become single ones (safe inside HTML attributes)."""

    return text.replace('"', "'")


def nb_spaces_tex(text: str) -> str:
    return _tex_spaces_re.sub(lambda m: _TEX_SPACES[m.group(0)], text)


def nb_spaces_html(text: str) -> str:
    """Wrap words joined by narrow no-break spaces in ``<span class="nnbsp">``.

    Browsers render U+202F inconsistently, so it is written as a regular
    no-break space and the span lets a stylesheet narrow it.
    """

    return _nnbsp_token_re.sub(
        lambda m: '<span class="nnbsp">' + m.group(0).replace(NNBSP, "&#160;") + "</span>",
        text,
    )


def tex_space(space: str) -> str:
    return _TEX_SPACES.get(space, space)


def html_space(space: str) -> str:
    return _HTML_SPACES.get(space, space)
