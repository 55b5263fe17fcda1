"""Named preserve-tag patterns, compiled once and shared read-only."""

import re
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .consts import RULE_NAME_PATTERN
from .exceptions import ConfigError, PatternCompileError

logger = logging.getLogger(__name__)

_RULE_NAME = re.compile(RULE_NAME_PATTERN)


@dataclass(frozen=True)
class PatternRule:
    """A named regular expression marking spans that must not be escaped."""

    name: str
    pattern: str


class PatternRegistry:
    """
    Ordered, immutable mapping of rule name to compiled pattern.

    Every rule is compiled in the constructor. If any rule fails, a
    PatternCompileError is raised and no registry is produced, so a
    half-built registry can never be observed. Rule names end up inside
    escaper placeholders, so only letters, digits, "_" and "-" are
    accepted; anything else raises ConfigError.

    Iteration order is the order the rules were supplied in, which is
    also the precedence order used by the escaper: a span consumed by an
    earlier rule is never seen by a later one. A repeated name replaces
    the earlier pattern but keeps the earlier position.
    """

    def __init__(self, rules: Iterable[PatternRule]):
        compiled: dict[str, re.Pattern] = {}
        for rule in rules:
            if not _RULE_NAME.fullmatch(rule.name):
                raise ConfigError(
                    f"Invalid preserve pattern name '{rule.name}': "
                    "use letters, digits, '_' or '-'"
                )
            try:
                compiled[rule.name] = re.compile(rule.pattern)
            except re.error as e:
                raise PatternCompileError(rule.name, e) from e
        self._patterns: Mapping[str, re.Pattern] = MappingProxyType(compiled)
        logger.debug(f"Compiled {len(compiled)} preserve pattern(s)")

    @property
    def patterns(self) -> Mapping[str, re.Pattern]:
        return self._patterns

    @property
    def names(self) -> list[str]:
        return list(self._patterns)

    def __getitem__(self, name: str) -> re.Pattern:
        return self._patterns[name]

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[tuple[str, re.Pattern]]:
        return iter(self._patterns.items())

    def __repr__(self) -> str:
        return f"PatternRegistry({self.names!r})"
