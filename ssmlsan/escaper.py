"""Escape text for SSML while letting whitelisted tags through untouched."""

import html
import logging

from .consts import PLACEHOLDER_TEMPLATE
from .registry import PatternRegistry

logger = logging.getLogger(__name__)


class TagPreservingEscaper:
    """
    HTML-escapes text, except for spans matched by the registry's rules.

    Each matched span is swapped for a placeholder token, the whole text
    is escaped, and the placeholders are swapped back for the original
    spans. Rules are applied in registry order.

    Input that already contains a string identical to a generated
    placeholder (``__SSML_PLACEHOLDER_<name>_<n>__``) may be corrupted on
    restoration. This is a known limitation and is not guarded against.
    """

    def __init__(self, registry: PatternRegistry):
        self.registry = registry

    def escape(self, text: str) -> str:
        placeholders: dict[str, str] = {}
        counter = 0
        working = text

        for name, pattern in self.registry:

            def _stash(match, name=name):
                nonlocal counter
                placeholder = PLACEHOLDER_TEMPLATE.format(name=name, counter=counter)
                placeholders[placeholder] = match.group(0)
                counter += 1
                return placeholder

            working = pattern.sub(_stash, working)

        escaped = html.escape(working, quote=True)

        # Newest first: a later rule may have matched inside an earlier placeholder.
        for placeholder, original in reversed(placeholders.items()):
            escaped = escaped.replace(placeholder, original, 1)

        if placeholders:
            logger.debug(f"Preserved {len(placeholders)} tag span(s)")
        return escaped
