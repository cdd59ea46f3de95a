from __future__ import annotations

import unicodedata

from .constants import NARROW_WIDTH, WIDE_EAST_ASIAN_WIDTHS, WIDE_WIDTH


def rune_width(rune: str) -> int:
    """
    Display columns of a single character: 2 for wide/fullwidth East Asian
    forms, 1 for everything else.
    """
    if unicodedata.east_asian_width(rune) in WIDE_EAST_ASIAN_WIDTHS:
        return WIDE_WIDTH
    return NARROW_WIDTH


def token_width(text: str) -> int:
    """
    Calculate the display width of a token (or any string).
    """
    return sum(rune_width(c) for c in text)
