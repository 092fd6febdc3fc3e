from __future__ import annotations

from typographer.escape import (
    escape_html,
    escape_quotes,
    escape_tex,
    html_space,
    nb_spaces_html,
    nb_spaces_tex,
    tex_space,
)
from typographer.formatting.chars import EN_SPACE, NBSP, NNBSP


def test_escape_html() -> None:
    assert escape_html("a < b & c > d") == "a &lt; b &amp; c &gt; d"
    assert escape_html("rien") == "rien"


def test_escape_tex() -> None:
    assert escape_tex("50% of $10 #1") == "50\\% of \\$10 \\#1"
    assert escape_tex("a_b {c} [d] ~ ^") == "a\\_b \\{c\\} {[}d{]} \\textasciitilde{} \\textasciicircum{}"
    assert escape_tex("a--b") == "a-{}-b"
    assert escape_tex("Hi!") == "Hi!{}"
    assert escape_tex("\\") == "\\textbackslash{}"


def test_escape_quotes() -> None:
    assert escape_quotes('say "hi"') == "say 'hi'"


def test_nb_spaces_tex() -> None:
    assert nb_spaces_tex(f"a{NNBSP}b{NBSP}c{EN_SPACE}d") == "a\\,b~c\\enspace d"


def test_nb_spaces_html_wraps_narrow_space_tokens() -> None:
    assert nb_spaces_html(f"Bonjour{NNBSP}!") == '<span class="nnbsp">Bonjour&#160;!</span>'
    assert nb_spaces_html(f"Il dit{NNBSP}!") == 'Il <span class="nnbsp">dit&#160;!</span>'
    assert nb_spaces_html("a b") == "a b"


def test_space_escapers() -> None:
    assert tex_space(NBSP) == "~"
    assert tex_space(NNBSP) == "\\,"
    assert tex_space("x") == "x"
    assert html_space(EN_SPACE) == "&#8194;"
    assert html_space(NNBSP) == "&#8239;"
