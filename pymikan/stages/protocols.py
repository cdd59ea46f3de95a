from __future__ import annotations

from typing import Protocol

from ..types import Line, Token


class LineSplitter(Protocol):
    def split(self, tokens: list[Token], rune_width: int) -> list[Line]:
        """Pack analyzed tokens into lines of at most ``rune_width`` columns."""
        ...
