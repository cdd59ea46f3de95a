"""PyMikan - width-aware line splitting for Japanese-mixed text."""

from .analyzer import analyze, analyze_tokens
from .classifier import classify
from .errors import ConfigurationError
from .splitter import Splitter, split
from .splitter_config import SplitterConfig
from .types import Line, RuneClass, Token
from .width import token_width

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "analyze",
    "analyze_tokens",
    "classify",
    "token_width",
    "split",
    "Splitter",
    "SplitterConfig",
    "ConfigurationError",
    "Line",
    "RuneClass",
    "Token",
]
