from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a splitter is configured with an unusable rune width."""
