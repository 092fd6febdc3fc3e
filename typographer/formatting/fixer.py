from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from typographer.formatting.config import TypographyConfig
from typographer.formatting.rules import apply_rules

logger = logging.getLogger(__name__)

_newline_re = re.compile(r"(\r\n|\r|\n)")


@dataclass
class FormatResult:
    text: str
    stats: dict[str, int]


def format_text(text: str, config: TypographyConfig) -> FormatResult:
    """Format a whole document line by line.

    Whitespace collapsing would otherwise merge lines, so each line is one
    unit (quotes are not paired across lines) and line endings are kept as
    they were.
    """

    stats: dict[str, int] = {}
    parts = _newline_re.split(text)
    lines = 0

    # split() with a capture group alternates line bodies and separators.
    for i in range(0, len(parts), 2):
        if not parts[i]:
            continue
        parts[i], line_stats = apply_rules(parts[i], config)
        lines += 1
        for k, v in line_stats.items():
            stats[k] = stats.get(k, 0) + v

    logger.debug("formatted %d lines: %s", lines, stats)
    return FormatResult(text="".join(parts), stats=stats)
