from __future__ import annotations

from dataclasses import dataclass, replace


DEFAULT_THRESHOLD_QUOTE = 20


@dataclass(frozen=True)
class TypographyConfig:
    # Punctuation rules
    ellipsis: bool = True
    # `--` and `<<` have other uses (options, shifts); default off.
    dashes: bool = False
    guillemets: bool = False

    # Quote heuristics
    quotes: bool = True
    # Max distance (in characters) scanned when pairing an ambiguous quote.
    # 0 disables pairing: only adjacency decides.
    threshold_quote: int = DEFAULT_THRESHOLD_QUOTE

    # French spacing
    french: bool = False
    # Uppercase word after a number, up to this length: currency/unit code (EUR, USD).
    threshold_currency: int = 3
    # Lowercase word after a number, up to this length: unit (km, kg).
    threshold_unit: int = 2
    # Capitalised word before `.`, up to this length: abbreviation (M., Dr.).
    threshold_real_word: int = 3

    def with_overrides(self, **changes: object) -> TypographyConfig:
        return replace(self, **changes)
