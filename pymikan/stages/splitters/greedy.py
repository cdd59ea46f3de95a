from __future__ import annotations

import logging

from ...types import Line, Token
from ...width import token_width

logger = logging.getLogger(__name__)

__all__ = ["GreedyLineSplitter"]


def _close(tokens: list[Token], width: int) -> Line:
    return Line(
        text="".join(token.text for token in tokens),
        char_start=tokens[0].char_start,
        char_end=tokens[-1].char_end,
        width=width,
        tokens=tuple(tokens),
    )


class GreedyLineSplitter:
    """First-fit packing: a token goes on the current line if it still fits."""

    def split(self, tokens: list[Token], rune_width: int) -> list[Line]:
        lines: list[Line] = []
        current: list[Token] = []
        current_width = 0

        for token in tokens:
            width = token_width(token.text)
            if current and current_width + width > rune_width:
                lines.append(_close(current, current_width))
                current = []
                current_width = 0
            if width > rune_width:
                logger.debug(
                    f"Token {token.text[:20]!r} is {width} columns wide, "
                    f"exceeding rune_width={rune_width}"
                )
            current.append(token)
            current_width += width

        if current:
            lines.append(_close(current, current_width))
        return lines
