from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RuneClass(Enum):
    """Semantic class of a single code point."""

    KANJI = "kanji"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    HALFWIDTH_KATAKANA = "halfwidth_katakana"
    LETTER = "letter"
    DIGIT = "digit"
    SPACE = "space"
    FULLWIDTH_SPACE = "fullwidth_space"
    GLUE_PUNCTUATION = "glue_punctuation"
    STANDALONE_BREAK = "standalone_break"
    OTHER = "other"


class GlueKind(Enum):
    """How a glue punctuation mark attaches to its neighbours."""

    # Extends the token on either side (apostrophes, hyphens, closing brackets)
    JOIN = "join"
    # Attaches backward and closes the token (terminators, ASCII tilde)
    TRAIL = "trail"
    # Attaches forward only (opening brackets)
    LEAD = "lead"


@dataclass(frozen=True)
class Token:
    """An indivisible run of text with offsets into the analyzed string."""

    text: str
    char_start: int
    char_end: int
    # Open class when the token was completed; GLUE_PUNCTUATION for glue-only.
    rune_class: RuneClass


@dataclass(frozen=True)
class Line:
    """A wrapped line: adjacent tokens packed within the width budget."""

    text: str
    char_start: int
    char_end: int
    width: int
    tokens: tuple[Token, ...] = ()
