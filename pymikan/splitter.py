from __future__ import annotations

import logging
from dataclasses import replace

from .analyzer import analyze_tokens
from .splitter_config import SplitterConfig, validate_rune_width
from .stages.protocols import LineSplitter
from .stages.splitters.greedy import GreedyLineSplitter
from .types import Line

logger = logging.getLogger(__name__)


class Splitter:
    """Wraps mixed-script text into lines of bounded display width.

    Text is analyzed into indivisible tokens which the line splitter stage
    packs into lines; a token is never broken across lines. Instances hold
    only their frozen configuration and can be shared between threads.
    """

    def __init__(
        self,
        config: SplitterConfig | None = None,
        *,
        rune_width: int | None = None,
        line_splitter: LineSplitter | None = None,
    ) -> None:
        config = config or SplitterConfig()
        if rune_width is not None:
            config = replace(config, rune_width=rune_width)
        config.validate()
        self.config = config
        self.line_splitter = line_splitter or GreedyLineSplitter()

    @property
    def rune_width(self) -> int:
        return self.config.rune_width

    def _resolve_width(self, rune_width: int | None) -> int:
        if rune_width is None:
            return self.config.rune_width
        return validate_rune_width(rune_width)

    def split_lines(self, text: str, *, rune_width: int | None = None) -> list[Line]:
        """Split ``text`` into lines with offsets, widths and their tokens.

        Args:
            text: Text to wrap
            rune_width: Optional per-call override of the configured width

        Returns:
            Lines whose texts concatenate back to ``text``

        Raises:
            ConfigurationError: If ``rune_width`` is not a positive integer
        """
        width = self._resolve_width(rune_width)
        tokens = analyze_tokens(text)
        lines = self.line_splitter.split(tokens, width)
        logger.debug(
            f"Split {len(text)} chars into {len(tokens)} tokens, "
            f"{len(lines)} lines (rune_width={width})"
        )
        return lines

    def split(self, text: str, *, rune_width: int | None = None) -> list[str]:
        """Split ``text`` into line strings."""
        return [line.text for line in self.split_lines(text, rune_width=rune_width)]


def split(text: str, rune_width: int) -> list[str]:
    """Wrap ``text`` greedily into lines of at most ``rune_width`` columns.

    >>> split("常に最新、最高のモバイル。", 16)
    ['常に最新、最高の', 'モバイル。']
    """
    return Splitter(rune_width=rune_width).split(text)
