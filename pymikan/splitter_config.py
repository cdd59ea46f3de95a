from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_RUNE_WIDTH
from .errors import ConfigurationError


def validate_rune_width(rune_width: object) -> int:
    """Return ``rune_width`` if it is a usable column budget.

    Raises:
        ConfigurationError: If the value is not a positive integer
    """
    # bool is an int subclass but never a meaningful width
    if isinstance(rune_width, bool) or not isinstance(rune_width, int):
        raise ConfigurationError(
            f"rune_width must be a positive integer, got {rune_width!r}"
        )
    if rune_width <= 0:
        raise ConfigurationError(
            f"rune_width must be greater than 0, got {rune_width}"
        )
    return rune_width


@dataclass(frozen=True)
class SplitterConfig:
    """User-facing configuration for line splitting.

    Keep this frozen+hashable so a single instance can be shared across
    threads and splitters.
    """

    # Display columns available per line
    rune_width: int = DEFAULT_RUNE_WIDTH

    def validate(self) -> None:
        validate_rune_width(self.rune_width)
