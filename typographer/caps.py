from __future__ import annotations

import re


_caps_re = re.compile(r"\b[^\W\d_]{2,}\b")
_dotted_caps_re = re.compile(r"\b(?:[^\W\d_]\.)+[^\W\d_]\b")


def _small_caps(m: re.Match[str]) -> str:
    word = m.group(0)
    if not word.isupper():
        return word
    return "\\textsc{" + word.lower() + "}"


def small_caps_tex(text: str) -> str:
    """Typeset acronyms (ACRONYM, A.W.D) in LaTeX small caps.

    Single capitals and capitalised words are left alone.
    """

    text = _caps_re.sub(_small_caps, text)
    return _dotted_caps_re.sub(_small_caps, text)
