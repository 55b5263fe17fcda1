"""SSML-safe text sanitization for speech-synthesis requests."""

from .escaper import TagPreservingEscaper
from .exceptions import ConfigError, PatternCompileError, SSMLError
from .processor import SSMLProcessor
from .registry import PatternRegistry, PatternRule
from .stripper import MarkupStripper, strip_markdown

__all__ = [
    "ConfigError",
    "MarkupStripper",
    "PatternCompileError",
    "PatternRegistry",
    "PatternRule",
    "SSMLError",
    "SSMLProcessor",
    "TagPreservingEscaper",
    "strip_markdown",
]
