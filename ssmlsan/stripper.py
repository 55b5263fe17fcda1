"""
Markdown stripping for narration text.

LLM and user text often arrives as Markdown. A speech engine would read
the asterisks, hashes and URLs aloud, so they are removed here by a fixed
sequence of regex rewrite passes. Order matters: later passes assume the
syntax handled by earlier ones is already gone.

This is surface rewriting, not a Markdown parser. URL, domain and email
passes match ASCII only, so addresses embedded in unspaced CJK text are
cut out without eating the neighbouring words.

Stripping is idempotent for ordinary prose, but not for every input: the
backslash pass runs late, so an escaped marker such as "\\- item" becomes
"- item" after one strip and "item" after a second.
"""

import re

from .consts import DOMAIN_TLDS, URL_TRAILING_PUNCTUATION

# Printable ASCII except "<"; URLs never run on into non-ASCII text.
_URL_CHAR = "[!-;=-~]"
_URL_END = "(?![" + re.escape(URL_TRAILING_PUNCTUATION) + "])" + _URL_CHAR
_TLDS = "|".join(DOMAIN_TLDS)

# (description, pattern, replacement), applied top to bottom.
REWRITE_PASSES: list[tuple[str, re.Pattern, str]] = [
    ("fenced code", re.compile(r"```[\s\S]*?```"), ""),
    ("inline code", re.compile(r"`[^`\n]*`"), ""),
    ("heading", re.compile(r"^[ \t]{0,3}#{1,6}[ \t]+", re.M), ""),
    ("list bullet", re.compile(r"^[ \t]*[-*+][ \t]+", re.M), ""),
    # Strongest delimiter first so "**x**" is not read as "*" + "*x*" + "*".
    ("strong", re.compile(r"(?<!\\)\*\*([^*\n]+?)(?<!\\)\*\*"), r"\1"),
    ("em", re.compile(r"(?<!\\)\*([^*\n]+?)(?<!\\)\*"), r"\1"),
    ("strong underscore", re.compile(r"(?<!\\)__([^_\n]+?)(?<!\\)__"), r"\1"),
    ("em underscore", re.compile(r"(?<!\\)_([^_\n]+?)(?<!\\)_"), r"\1"),
    ("image", re.compile(r"!\[[^\]]*\]\([^)]*\)"), ""),
    ("link", re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    (
        "html anchor",
        re.compile(
            r"""<a\s+[^>]*?href\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]+)[^>]*>(.*?)</a\s*>""",
            re.I | re.S,
        ),
        r"\1",
    ),
    ("html image", re.compile(r"<img\b[^>]*>", re.I | re.S), ""),
    ("autolink", re.compile(r"<(?:https?://|www\.)[^>\s]+>", re.I), ""),
    (
        "bare url",
        re.compile(
            r"(?<![@\w])(?:https?://|ftp://|www\.)(?:" + _URL_CHAR + "*" + _URL_END + ")?",
            re.I | re.A,
        ),
        "",
    ),
    (
        "bare domain",
        re.compile(
            # (?!@) leaves "me.io@x.com" whole for the email pass.
            r"(?<![@\w.-])(?:[a-z0-9-]+\.)+(?:" + _TLDS + r")\b(?!@)"
            r"(?:/(?:" + _URL_CHAR + "*" + _URL_END + ")?)?",
            re.I | re.A,
        ),
        "",
    ),
    ("email", re.compile(r"\b[\w.+-]+@[\w-]+(?:\.[\w-]+)+\b", re.A), ""),
    ("blockquote", re.compile(r"^[ \t]*(?:>[ \t]?)+", re.M), ""),
    (
        "horizontal rule",
        re.compile(r"^[ \t]*(?:-{3,}|\*{3,}|_{3,})[ \t]*$", re.M),
        "",
    ),
    ("backslash escape", re.compile(r"\\([*_`\\\[\]()>#+\-])"), r"\1"),
    # Leaves ">" alone: it may be a comparison or part of preserved SSML.
    ("stray symbols", re.compile(r"[#*_`]+"), ""),
    ("horizontal whitespace", re.compile(r"[\t\f\v]+"), " "),
    ("space runs", re.compile(r" {2,}"), " "),
    ("blank lines", re.compile(r"\n{3,}"), "\n\n"),
]


class MarkupStripper:
    """Turns Markdown-flavoured prose into plain narration text."""

    passes = REWRITE_PASSES

    def strip(self, text: str) -> str:
        if not text:
            return ""

        for _name, pattern, replacement in self.passes:
            text = pattern.sub(replacement, text)

        return text.strip()


_default_stripper = MarkupStripper()


def strip_markdown(text: str) -> str:
    """
    Strip Markdown formatting, links, URLs and emails from ``text``.

    Args:
        text: Raw text, possibly containing Markdown or inline HTML

    Returns:
        Plain text with collapsed whitespace, or "" for empty input
    """
    return _default_stripper.strip(text)
