"""Custom exceptions for ssmlsan.

This module defines a small hierarchy of exceptions. Only configuration
problems are errors here: escaping and stripping are total over any string.
"""

import re


class SSMLError(Exception):
    """Base exception for all ssmlsan errors.

    All custom exceptions in this package inherit from SSMLError,
    allowing callers to catch all of them with a single except clause.
    """

    pass


class ConfigError(SSMLError):
    """Configuration file errors.

    Raised when:
    - Config file not found or unreadable
    - Invalid YAML syntax
    - Invalid config values
    """

    pass


class PatternCompileError(ConfigError):
    """A preserve-tag pattern failed to compile.

    Raised while building a PatternRegistry. Carries the offending rule name
    and the underlying ``re.error`` so startup can report exactly which
    configured tag is broken.
    """

    def __init__(self, rule_name: str, error: re.error):
        super().__init__(
            f"Failed to compile preserve pattern '{rule_name}': {error}"
        )
        self.rule_name = rule_name
        self.error = error
