from __future__ import annotations

import re

from typographer.formatting.chars import NO_BREAK_SPACES


_ws_run_re = re.compile(r"\s+")


def collapse_whitespace(text: str) -> tuple[str, int]:
    """Collapse every whitespace run to one character.

    - A run of breaking whitespace (spaces, tabs, newlines) becomes one ``" "``.
    - A run holding a no-break space collapses to the first no-break space,
      so spacing decided by the French formatter is not lost.
    - Leading and trailing runs are kept (collapsed), never trimmed.

    Returns (text, number of runs that changed).
    """

    changed = 0

    def _repl(m: re.Match[str]) -> str:
        nonlocal changed
        run = m.group(0)
        out = next((ch for ch in run if ch in NO_BREAK_SPACES), " ")
        if out != run:
            changed += 1
        return out

    return _ws_run_re.sub(_repl, text), changed


def normalize_whitespace(text: str) -> str:
    if not text:
        return text
    return collapse_whitespace(text)[0]
