from __future__ import annotations

from typographer.formatting.chars import (
    APOSTROPHE,
    LEFT_DOUBLE_QUOTE,
    LEFT_GUILLEMET,
    LEFT_SINGLE_QUOTE,
    NO_BREAK_SPACES,
    RIGHT_GUILLEMET,
    RIGHT_DOUBLE_QUOTE,
    RIGHT_SINGLE_QUOTE,
    CharClass,
    char_class,
)
from typographer.formatting.config import TypographyConfig


_GLYPHS = {
    '"': (LEFT_DOUBLE_QUOTE, RIGHT_DOUBLE_QUOTE),
    "'": (LEFT_SINGLE_QUOTE, RIGHT_SINGLE_QUOTE),
}

_OPEN = "open"
_CLOSE = "close"

_EDGE = frozenset((CharClass.BOUNDARY, CharClass.SPACE))
_LEADING = frozenset((CharClass.BOUNDARY, CharClass.SPACE, CharClass.OPENING))
_WORDLIKE = frozenset((CharClass.WORD, CharClass.CLOSING))

# Marks that French spacing precedes with a no-break space.
_SPACED_BEFORE = frozenset(":;!?" + RIGHT_GUILLEMET)


def _before(seq: list[str], j: int) -> str | None:
    """Neighbour before position `j`; a no-break space after `«` belongs to the guillemet."""

    if j >= 2 and seq[j - 1] in NO_BREAK_SPACES and seq[j - 2] == LEFT_GUILLEMET:
        return seq[j - 2]
    return seq[j - 1] if j >= 1 else None


def _after(seq: list[str], j: int) -> str | None:
    """Neighbour after position `j`; a no-break space before `: ; ! ? »` belongs to the mark."""

    if j + 2 < len(seq) and seq[j + 1] in NO_BREAK_SPACES and seq[j + 2] in _SPACED_BEFORE:
        return seq[j + 2]
    return seq[j + 1] if j + 1 < len(seq) else None


def _adjacency(prev: CharClass, nxt: CharClass) -> str | None:
    if prev in _LEADING and nxt in (CharClass.WORD, CharClass.OPENING):
        return _OPEN
    if prev in _WORDLIKE and nxt != CharClass.WORD:
        return _CLOSE
    if prev == CharClass.PUNCT and nxt in _EDGE:
        return _CLOSE
    return None


def _is_apostrophe(kind: str, prev: CharClass, nxt: CharClass) -> bool:
    return kind == "'" and prev in _WORDLIKE and nxt == CharClass.WORD


class _QuoteScanner:
    """One left-to-right pass over the code points of a single text.

    Pairing state is a stack of input indices per quote kind, holding openers
    that were emitted and still wait for a partner. The previous neighbour is
    read from the output built so far (a resolved opener counts as opening
    punctuation), the next neighbour from the input.
    """

    def __init__(self, text: str, threshold: int) -> None:
        self._chars = list(text)
        self._threshold = max(0, int(threshold))
        self._out: list[str] = []
        self._pending: dict[str, list[int]] = {kind: [] for kind in _GLYPHS}

    def run(self) -> tuple[str, int]:
        changed = 0
        for i, ch in enumerate(self._chars):
            if ch in _GLYPHS:
                new = self._resolve(i, ch)
                if new != ch:
                    changed += 1
                ch = new
            self._out.append(ch)
        return "".join(self._out), changed

    def _resolve(self, i: int, kind: str) -> str:
        stack = self._pending[kind]
        opening, closing = _GLYPHS[kind]

        prev_ch = _before(self._out, len(self._out))
        next_ch = _after(self._chars, i)
        prev_cls = char_class(prev_ch)
        next_cls = char_class(next_ch)

        # 5'10", 12" pizza: a mark after a number, unless it closes an open quote.
        if prev_ch is not None and prev_ch.isdigit() and not stack:
            return kind

        if _is_apostrophe(kind, prev_cls, next_cls):
            return APOSTROPHE

        if prev_cls in _EDGE and next_cls in _EDGE:
            return kind

        role = _adjacency(prev_cls, next_cls)
        if role == _OPEN:
            # Elided century ('60s) unless a closing partner is close by.
            if kind == "'" and next_ch is not None and next_ch.isdigit():
                if stack or self._find_partner(i, kind) is None:
                    return APOSTROPHE
            stack.append(i)
            return opening

        if role == _CLOSE:
            if stack:
                stack.pop()
                return closing
            # Plurals' possessive, goin' ... ; an unopened double quote stays straight.
            return APOSTROPHE if kind == "'" else kind

        if self._threshold == 0:
            return kind
        if stack and i - stack[-1] <= self._threshold:
            stack.pop()
            return closing
        if self._find_partner(i, kind) is not None:
            stack.append(i)
            return opening
        return kind

    def _find_partner(self, i: int, kind: str) -> int | None:
        """Nearest quote of the same kind ahead that could close a span at `i`."""

        chars = self._chars
        end = min(len(chars), i + 1 + self._threshold)
        for j in range(i + 1, end):
            if chars[j] != kind:
                continue
            prev_cls = char_class(_before(chars, j))
            next_cls = char_class(_after(chars, j))
            if _is_apostrophe(kind, prev_cls, next_cls):
                continue
            if prev_cls in _EDGE and next_cls in _EDGE:
                continue
            if _adjacency(prev_cls, next_cls) == _OPEN:
                continue
            return j
        return None


def replace_quotes(text: str, threshold: int) -> tuple[str, int]:
    if '"' not in text and "'" not in text:
        return text, 0
    return _QuoteScanner(text, threshold).run()


def classify_quotes(text: str, config: TypographyConfig | None = None) -> str:
    """Replace straight quotes with directional ones where the context allows.

    Ambiguous quotes are left straight rather than guessed. Disabled (no-op)
    when ``config.quotes`` is false.
    """

    config = config or TypographyConfig()
    if not config.quotes:
        return text
    return replace_quotes(text, config.threshold_quote)[0]
