from __future__ import annotations

from typographer.formatting.config import TypographyConfig
from typographer.formatting.french import apply_french_spacing
from typographer.formatting.punctuation import apply_punctuation
from typographer.formatting.quotes import replace_quotes
from typographer.formatting.whitespace import collapse_whitespace


def apply_rules(text: str, config: TypographyConfig) -> tuple[str, dict[str, int]]:
    """Run every enabled stage in order and count what each one changed.

    whitespace -> punctuation (ellipsis, dashes, guillemets) -> quotes -> French spacing
    """

    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")

    stats: dict[str, int] = {}

    text, n = collapse_whitespace(text)
    if n:
        stats["normalize_whitespace"] = n

    text, punct_stats = apply_punctuation(text, config)
    stats.update(punct_stats)

    if config.quotes:
        text, n = replace_quotes(text, config.threshold_quote)
        if n:
            stats["quotes"] = n

    if config.french:
        text, n = apply_french_spacing(text, config)
        if n:
            stats["french_spacing"] = n

    return text, stats
