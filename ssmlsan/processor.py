"""Facade tying the preserve-tag registry, escaper and stripper together."""

import logging

from .config import SSMLConfig
from .escaper import TagPreservingEscaper
from .registry import PatternRegistry
from .stripper import MarkupStripper

logger = logging.getLogger(__name__)


class SSMLProcessor:
    """
    Prepares text for an SSML speech request.

    Build one at startup, from a registry or an SSMLConfig, and hand the
    same instance to everything that needs it. It holds no per-call
    state, so concurrent use is safe.
    """

    def __init__(self, registry: PatternRegistry):
        self.registry = registry
        self.escaper = TagPreservingEscaper(registry)
        self.stripper = MarkupStripper()

    @classmethod
    def from_config(cls, config: SSMLConfig) -> "SSMLProcessor":
        """
        Compile the configured preserve tags into a processor.

        Raises:
            PatternCompileError: If any preserve tag pattern is invalid
        """
        registry = PatternRegistry(config.rules())
        logger.debug(f"Preserving tags: {registry.names}")
        return cls(registry)

    def escape_ssml(self, text: str) -> str:
        """Escape ``text``, keeping configured SSML tags verbatim."""
        return self.escaper.escape(text)

    def strip_markdown(self, text: str) -> str:
        """Remove Markdown syntax so it is not read aloud."""
        return self.stripper.strip(text)

    def sanitize(self, text: str, strip: bool = True) -> str:
        """
        Make free-form text safe to embed in an SSML document.

        Markdown is stripped first (unless ``strip`` is False), then the
        result is escaped with the preserve tags kept intact.
        """
        if strip:
            text = self.stripper.strip(text)
        return self.escaper.escape(text)
