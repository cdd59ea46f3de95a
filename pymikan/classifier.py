"""Rune classification for mixed-script segmentation.

Maps a single code point to the semantic class the analyzer merges on. The
mapping is data-driven: a sorted table of code point ranges searched with
``bisect``, plus an override table for single characters that is consulted
first. Anything not listed is an ordinary letter.
"""

from __future__ import annotations

from bisect import bisect_right
from types import MappingProxyType

from .types import GlueKind, RuneClass

_K = RuneClass.KANJI
_H = RuneClass.HIRAGANA
_KK = RuneClass.KATAKANA
_HK = RuneClass.HALFWIDTH_KATAKANA
_D = RuneClass.DIGIT

# (first, last, class), sorted by first code point and non-overlapping.
RUNE_RANGES: tuple[tuple[int, int, RuneClass], ...] = (
    (0x0030, 0x0039, _D),  # 0-9
    (0x2E80, 0x2FDF, _K),  # CJK radicals, Kangxi radicals
    (0x3005, 0x3007, _K),  # 々 〆 〇
    (0x3021, 0x3029, _K),  # Hangzhou numerals
    (0x3038, 0x303B, _K),
    (0x3040, 0x309F, _H),  # Hiragana, incl. combining voicing marks
    (0x30A0, 0x30FF, _KK),  # Katakana
    (0x31F0, 0x31FF, _KK),  # Katakana phonetic extensions
    (0x3200, 0x32CF, _K),  # Parenthesized and circled CJK, e.g. ㈱
    (0x32D0, 0x32FE, _KK),  # Circled katakana
    (0x32FF, 0x32FF, _K),  # Square era name Reiwa
    (0x3300, 0x33FF, _K),  # CJK compatibility squares, e.g. ㍿
    (0x3400, 0x4DBF, _K),  # CJK extension A
    (0x4E00, 0x9FFF, _K),  # CJK unified ideographs
    (0xF900, 0xFAFF, _K),  # CJK compatibility ideographs
    (0xFF10, 0xFF19, _D),  # Fullwidth digits
    (0xFF66, 0xFF9F, _HK),  # Halfwidth katakana, incl. ｰ ﾞ ﾟ
    (0x20000, 0x3134F, _K),  # Supplementary ideographic planes
)

_RANGE_STARTS = tuple(first for first, _, _ in RUNE_RANGES)

JOIN_GLUE = (
    "'\u2019`"
    "\u00b4"  # spacing acute accent
    "-_"
    "\u30fc"  # ー prolonged sound mark
    "\u30fb\uff65"  # ・ ･ middle dots
    "\u00a0"  # no-break space
    ")]}"
    "）］｝」』】〕〉》｣"
)

TRAIL_GLUE = (
    "、。.,!?:;"
    "，．！？：；｡､"
    "…‥"
    "~"
)

LEAD_GLUE = "([{（［｛「『【〔〈《｢"

SPACES = " \t\n\r"
FULLWIDTH_SPACE = "\u3000"

# Always a token of their own: ampersands and the fullwidth tilde marks
STANDALONE_BREAKS = "&\uff06\u301c\uff5e"

OTHER_SYMBOLS = '"#$%*+/<=>@\\^|'


def _build_glue_kinds() -> dict[str, GlueKind]:
    kinds: dict[str, GlueKind] = {}
    for chars, kind in (
        (JOIN_GLUE, GlueKind.JOIN),
        (TRAIL_GLUE, GlueKind.TRAIL),
        (LEAD_GLUE, GlueKind.LEAD),
    ):
        for char in chars:
            kinds[char] = kind
    return kinds


def _build_overrides() -> dict[str, RuneClass]:
    overrides: dict[str, RuneClass] = {}
    for char in GLUE_KINDS:
        overrides[char] = RuneClass.GLUE_PUNCTUATION
    for char in SPACES:
        overrides[char] = RuneClass.SPACE
    overrides[FULLWIDTH_SPACE] = RuneClass.FULLWIDTH_SPACE
    for char in STANDALONE_BREAKS:
        overrides[char] = RuneClass.STANDALONE_BREAK
    for char in OTHER_SYMBOLS:
        overrides[char] = RuneClass.OTHER
    return overrides


GLUE_KINDS = MappingProxyType(_build_glue_kinds())
RUNE_OVERRIDES = MappingProxyType(_build_overrides())


def classify(rune: str) -> RuneClass:
    """Return the semantic class of a single character.

    Args:
        rune: A string of exactly one character

    Returns:
        The rune's class; code points outside every table are ``LETTER``
    """
    override = RUNE_OVERRIDES.get(rune)
    if override is not None:
        return override
    cp = ord(rune)
    idx = bisect_right(_RANGE_STARTS, cp) - 1
    if idx >= 0:
        first, last, rune_class = RUNE_RANGES[idx]
        if first <= cp <= last:
            return rune_class
    return RuneClass.LETTER


def glue_kind(rune: str) -> GlueKind | None:
    """Return how a glue punctuation mark attaches, or None for other runes."""
    return GLUE_KINDS.get(rune)
