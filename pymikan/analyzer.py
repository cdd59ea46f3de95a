"""Token analysis: folds classified runes into indivisible tokens.

The analyzer is a finite-state reducer. ``AnalyzerState`` describes the token
being built, ``step`` consumes one rune and reports the spans it completes,
and ``finish`` flushes whatever is left at the end of the input. ``analyze``
is a left-to-right fold of ``step`` over the text.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType

from .classifier import classify, glue_kind
from .types import GlueKind, RuneClass, Token

# (char_start, char_end, rune_class) of a completed token
Span = tuple[int, int, RuneClass]

_SOLITARY = frozenset(
    {RuneClass.SPACE, RuneClass.FULLWIDTH_SPACE, RuneClass.STANDALONE_BREAK}
)

# Runes that may continue a digit run across a trailing mark: 3.14, 1,000
_DIGIT_SEPARATORS = frozenset(".,")

# (open class, next class) -> resulting open class. Missing pairs never merge.
MERGE_TABLE: MappingProxyType[tuple[RuneClass, RuneClass], RuneClass] = (
    MappingProxyType(
        {
            (RuneClass.KANJI, RuneClass.KANJI): RuneClass.KANJI,
            # okurigana
            (RuneClass.KANJI, RuneClass.HIRAGANA): RuneClass.HIRAGANA,
            (RuneClass.HIRAGANA, RuneClass.HIRAGANA): RuneClass.HIRAGANA,
            (RuneClass.KATAKANA, RuneClass.KATAKANA): RuneClass.KATAKANA,
            (RuneClass.KATAKANA, RuneClass.HIRAGANA): RuneClass.HIRAGANA,
            (
                RuneClass.HALFWIDTH_KATAKANA,
                RuneClass.HALFWIDTH_KATAKANA,
            ): RuneClass.HALFWIDTH_KATAKANA,
            (RuneClass.HALFWIDTH_KATAKANA, RuneClass.HIRAGANA): RuneClass.HIRAGANA,
            (RuneClass.LETTER, RuneClass.LETTER): RuneClass.LETTER,
            # particle after a latin word: Androidを
            (RuneClass.LETTER, RuneClass.HIRAGANA): RuneClass.HIRAGANA,
            (RuneClass.DIGIT, RuneClass.DIGIT): RuneClass.DIGIT,
            (RuneClass.DIGIT, RuneClass.HIRAGANA): RuneClass.HIRAGANA,
            (RuneClass.OTHER, RuneClass.OTHER): RuneClass.OTHER,
        }
    )
)


@dataclass(frozen=True)
class AnalyzerState:
    """The token currently being built.

    ``start`` is None while no token is open. ``open_class`` stays None while
    the token holds only glue punctuation. A ``sealed`` token was closed by a
    trailing mark and accepts further glue but no substantive rune.
    """

    start: int | None = None
    open_class: RuneClass | None = None
    sealed: bool = False
    last_rune: str = ""

    @property
    def is_empty(self) -> bool:
        return self.start is None


EMPTY = AnalyzerState()


def _flush(state: AnalyzerState, pos: int) -> tuple[Span, ...]:
    if state.start is None:
        return ()
    rune_class = state.open_class or RuneClass.GLUE_PUNCTUATION
    return ((state.start, pos, rune_class),)


def merge_class(state: AnalyzerState, rune_class: RuneClass) -> RuneClass | None:
    """Resulting open class if ``rune_class`` extends the open token, else None."""
    if state.sealed:
        if (
            state.open_class is RuneClass.DIGIT
            and rune_class is RuneClass.DIGIT
            and state.last_rune in _DIGIT_SEPARATORS
        ):
            return RuneClass.DIGIT
        return None
    if state.open_class is None:
        return rune_class
    return MERGE_TABLE.get((state.open_class, rune_class))


def step(
    state: AnalyzerState, rune: str, pos: int
) -> tuple[tuple[Span, ...], AnalyzerState]:
    """Consume the rune at ``pos``.

    Returns:
        The spans completed by this rune and the next state
    """
    rune_class = classify(rune)

    if rune_class in _SOLITARY:
        return (*_flush(state, pos), (pos, pos + 1, rune_class)), EMPTY

    if rune_class is RuneClass.GLUE_PUNCTUATION:
        kind = glue_kind(rune)
        if state.is_empty:
            return (), AnalyzerState(
                start=pos, sealed=kind is GlueKind.TRAIL, last_rune=rune
            )
        if kind is GlueKind.LEAD and (state.open_class is not None or state.sealed):
            return _flush(state, pos), AnalyzerState(start=pos, last_rune=rune)
        return (), replace(
            state, sealed=state.sealed or kind is GlueKind.TRAIL, last_rune=rune
        )

    if state.is_empty:
        return (), AnalyzerState(start=pos, open_class=rune_class, last_rune=rune)

    merged = merge_class(state, rune_class)
    if merged is None:
        return _flush(state, pos), AnalyzerState(
            start=pos, open_class=rune_class, last_rune=rune
        )
    return (), replace(state, open_class=merged, sealed=False, last_rune=rune)


def finish(state: AnalyzerState, pos: int) -> tuple[Span, ...]:
    """Flush the open token at end of input (``pos`` is the text length)."""
    return _flush(state, pos)


def analyze_tokens(text: str) -> list[Token]:
    """Split ``text`` into tokens that carry offsets and their open class.

    Joining the token texts in order reproduces ``text`` exactly.
    """
    spans: list[Span] = []
    state = EMPTY
    for pos, rune in enumerate(text):
        emitted, state = step(state, rune, pos)
        spans.extend(emitted)
    spans.extend(finish(state, len(text)))
    return [
        Token(text=text[start:end], char_start=start, char_end=end, rune_class=cls)
        for start, end, cls in spans
    ]


def analyze(text: str) -> list[str]:
    """Split ``text`` into indivisible tokens.

    >>> analyze("Hello & World")
    ['Hello', ' ', '&', ' ', 'World']
    """
    return [token.text for token in analyze_tokens(text)]
