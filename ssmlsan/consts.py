"""Constants for ssmlsan text processing."""

# =============================================================================
# Tag-preserving escaper
# =============================================================================

# Stand-in for a preserved span while the rest of the text is escaped.
# Only underscores, letters and digits, so html.escape leaves it alone.
PLACEHOLDER_TEMPLATE = "__SSML_PLACEHOLDER_{name}_{counter}__"

# Rule names are embedded in placeholders, so they must survive html.escape.
RULE_NAME_PATTERN = r"[A-Za-z0-9_-]+"

# Preserve tags used when no configuration file is given.
DEFAULT_PRESERVE_TAGS = [
    {"name": "break", "pattern": r"<break\b[^>]*/>"},
    {"name": "emphasis", "pattern": r"</?emphasis\b[^>]*>"},
    {"name": "prosody", "pattern": r"</?prosody\b[^>]*>"},
    {"name": "say_as", "pattern": r"</?say-as\b[^>]*>"},
    {"name": "phoneme", "pattern": r"</?phoneme\b[^>]*>"},
    {"name": "sub", "pattern": r"</?sub\b[^>]*>"},
]

# =============================================================================
# Markdown stripper
# =============================================================================

# Top-level domains recognised when removing bare domains such as
# "example.com/docs" that are not prefixed by a scheme or "www.".
DOMAIN_TLDS = [
    "com",
    "org",
    "net",
    "edu",
    "gov",
    "io",
    "ai",
    "cn",
    "xyz",
    "top",
    "info",
    "me",
    "site",
    "club",
    "dev",
    "app",
    "tech",
    "tv",
    "gg",
    "so",
    "uk",
    "jp",
    "de",
    "fr",
    "au",
    "ca",
    "us",
    "hk",
    "sg",
]

# Characters a URL may not end with; they usually close the sentence instead.
URL_TRAILING_PUNCTUATION = ".,;:!?'\")]"

# =============================================================================
# Logging
# =============================================================================

FORMAT = "%(levelname)s --- %(message)s"
