from __future__ import annotations

from collections.abc import Callable

from typographer.formatting.chars import (
    CLOSING_PUNCT,
    EM_DASH,
    EN_DASH,
    EN_SPACE,
    LEFT_GUILLEMET,
    NBSP,
    NNBSP,
    NO_BREAK_SPACES,
    OPENING_PUNCT,
    RIGHT_GUILLEMET,
)
from typographer.formatting.config import TypographyConfig
from typographer.formatting.punctuation import clean_punctuation
from typographer.formatting.quotes import classify_quotes
from typographer.formatting.whitespace import normalize_whitespace


# Receives NNBSP, NBSP or EN_SPACE; returns its representation in the target format.
SpaceEscaper = Callable[[str], str]

_MARKS = frozenset(":;!?")
_DASHES = frozenset((EM_DASH, EN_DASH, "-"))
_TROUBLE = _MARKS | _DASHES | {LEFT_GUILLEMET, RIGHT_GUILLEMET}
# Symbols after a number that are punctuation, not units.
_NOT_UNITS = _MARKS | OPENING_PUNCT | CLOSING_PUNCT | {'"', "'"}


def _identity(space: str) -> str:
    return space


class _FrenchSpacer:
    """Single pass deciding the space class around French punctuation.

    Spaces are only converted or inserted, never removed. Output positions
    holding a space decided here are tracked so the markup variant can escape
    exactly those and nothing else.
    """

    def __init__(self, text: str, config: TypographyConfig) -> None:
        self._chars = list(text)
        self._config = config
        self._out: list[str] = []
        self._decided: set[int] = set()
        # Input index of an ordinary space -> space class chosen ahead of time
        # (numbers, dialogue and incise dashes).
        self._ahead: dict[int, str] = {}
        self._changed = 0

    def run(self, escaper: SpaceEscaper) -> tuple[str, int]:
        self._mark_number_spaces()

        chars = self._chars
        n = len(chars)
        for i, ch in enumerate(chars):
            prev = self._out[-1] if self._out else None
            nxt = chars[i + 1] if i + 1 < n else None

            if ch.isspace():
                space = self._space_for(i, ch, prev, nxt)
                if space is None:
                    self._out.append(ch)
                else:
                    self._emit_space(space, ch)
                continue

            if ch in _MARKS and self._needs_space_before_mark(ch, prev, nxt):
                self._emit_space(NNBSP, None)
            elif ch == RIGHT_GUILLEMET and prev is not None and not prev.isspace():
                self._emit_space(NBSP, None)

            self._out.append(ch)

            if ch == LEFT_GUILLEMET and nxt is not None and not nxt.isspace():
                self._emit_space(NBSP, None)
            elif ch in _DASHES and nxt == " ":
                self._plan_dash(i, prev)

        text = "".join(escaper(c) if j in self._decided else c for j, c in enumerate(self._out))
        return text, self._changed

    def _emit_space(self, space: str, original: str | None) -> None:
        self._out.append(space)
        self._decided.add(len(self._out) - 1)
        if space != original:
            self._changed += 1

    def _space_for(self, i: int, ch: str, prev: str | None, nxt: str | None) -> str | None:
        if prev == LEFT_GUILLEMET or nxt == RIGHT_GUILLEMET:
            # Any class of no-break space already there is kept.
            return ch if ch in NO_BREAK_SPACES else NBSP
        if nxt is not None and nxt in _MARKS:
            return NNBSP
        if ch == " ":
            return self._ahead.get(i)
        return None

    @staticmethod
    def _needs_space_before_mark(ch: str, prev: str | None, nxt: str | None) -> bool:
        if prev is None or prev.isspace():
            return False
        # `?!` gets a single space; `(!)` none.
        if prev in _MARKS or prev in OPENING_PUNCT:
            return False
        if ch == ":":
            # 10:30, http://
            if nxt == "/" or (prev.isdigit() and nxt is not None and nxt.isdigit()):
                return False
        return True

    # Dashes

    def _plan_dash(self, i: int, prev: str | None) -> None:
        if i + 1 in self._ahead:
            return
        # A hyphen only counts as a dash when it stands alone.
        if self._chars[i] == "-" and prev is not None and not prev.isspace():
            return

        at_start = len(self._out) == 1 or (len(self._out) == 2 and self._out[0].isspace())
        if at_start:
            # Dialogue line.
            self._ahead[i + 1] = EN_SPACE
            return

        if prev is not None and prev in NO_BREAK_SPACES:
            # Closing dash of an incise: the space after it stays breakable.
            return

        closing = self._find_closing_dash(i + 1)
        if closing is not None:
            self._ahead[closing] = NBSP
        self._ahead[i + 1] = NBSP

    def _find_closing_dash(self, start: int) -> int | None:
        """Index of the space before the dash closing an incise, if the sentence has one."""

        chars = self._chars
        threshold = max(0, self._config.threshold_real_word)
        word: list[str] = []
        for j in range(start, len(chars)):
            ch = chars[j]
            if ch in "!?":
                if self._next_is_upper(j + 1):
                    return None
            elif ch in _DASHES:
                if chars[j - 1] == " ":
                    return j - 1
            elif ch == ".":
                # `M. Dupuis` is an abbreviation, `mal. Mais` ends the sentence.
                if self._next_is_upper(j + 1) and word and (not word[0].isupper() or len(word) > threshold):
                    return None
            elif ch.isspace():
                word = []
            else:
                word.append(ch)
        return None

    def _next_is_upper(self, start: int) -> bool:
        for ch in self._chars[start:]:
            if ch.isupper():
                return True
            if ch.islower():
                return False
        return False

    # Numbers

    def _mark_number_spaces(self) -> None:
        """10 000, 50 %, 10 € and 50 km keep the number glued to what follows."""

        chars = self._chars
        in_number = False
        for i in range(len(chars) - 1):
            ch = chars[i]
            if ch.isdigit():
                if i == 0 or not chars[i - 1].isalpha():
                    in_number = True
            elif ch == " ":
                if in_number and (chars[i + 1].isdigit() or self._is_unit(i + 1)):
                    self._ahead[i] = NNBSP
            elif not ch.isspace():
                in_number = False

    def _word_at(self, i: int) -> str:
        end = i
        while end < len(self._chars) and self._chars[end].isalpha():
            end += 1
        return "".join(self._chars[i:end])

    def _is_unit(self, i: int) -> bool:
        chars = self._chars
        ch = chars[i]
        if ch in _NOT_UNITS:
            return False
        if i + 1 < len(chars) and chars[i + 1].isalpha():
            if ch == "°":
                return True
            word = self._word_at(i)
            if ch.isupper():
                # EUR, USD; but not a shouted word.
                return len(word) <= max(0, self._config.threshold_currency) and word.isupper()
            if ch.isalpha():
                return len(word) <= max(0, self._config.threshold_unit)
            return False
        if ch.isupper():
            return True
        return not ch.isalpha() and not ch.isspace()


def apply_french_spacing(
    text: str,
    config: TypographyConfig,
    space_escaper: SpaceEscaper | None = None,
) -> tuple[str, int]:
    """Spacing pass only, on text already cleaned by the earlier stages."""

    if not any(ch in _TROUBLE or ch.isdigit() for ch in text):
        return text, 0
    return _FrenchSpacer(text, config).run(space_escaper or _identity)


def _prepare(text: str, config: TypographyConfig) -> str:
    text = normalize_whitespace(text)
    text = clean_punctuation(text, config)
    return classify_quotes(text, config)


def format_french(text: str, config: TypographyConfig | None = None) -> str:
    """Format one paragraph according to French typographic rules.

    Inserts narrow no-break spaces before `: ; ! ?` and no-break spaces inside
    guillemets, after running the whitespace, punctuation and quote stages
    enabled in ``config``. The start of the string is taken as the start of a
    line (dialogue dashes).
    """

    config = config or TypographyConfig()
    return apply_french_spacing(_prepare(text, config), config)[0]


def format_french_markup(
    text: str,
    config: TypographyConfig | None,
    space_escaper: SpaceEscaper,
) -> str:
    """Same as `format_french`, with every space it decides passed through `space_escaper`.

    The rest of the text is not escaped; run the target format's escaper
    before or after as needed.
    """

    config = config or TypographyConfig()
    return apply_french_spacing(_prepare(text, config), config, space_escaper)[0]
