"""
Tests for ssmlsan.escaper module.

Tests tag-preserving SSML escaping.
"""

import html

import pytest

from ssmlsan.escaper import TagPreservingEscaper
from ssmlsan.registry import PatternRegistry, PatternRule


@pytest.fixture
def escaper(break_registry):
    return TagPreservingEscaper(break_registry)


class TestEscapeWithoutMatches:
    """Text with no preserved spans is escaped like html.escape."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain text",
            "Tom & Jerry",
            "1 < 2 > 0",
            "she said \"hi\" and 'bye'",
            "<speak>not preserved</speak>",
        ],
    )
    def test_matches_html_escape(self, escaper, text):
        assert escaper.escape(text) == html.escape(text)

    def test_empty_registry_escapes_everything(self):
        escaper = TagPreservingEscaper(PatternRegistry([]))
        assert escaper.escape("<break/> & more") == "&lt;break/&gt; &amp; more"


class TestPreservation:
    """Preserved spans come back byte-for-byte."""

    def test_break_tag_scenario(self, escaper):
        text = 'Hello <break time="200ms"/> & welcome'
        assert escaper.escape(text) == 'Hello <break time="200ms"/> &amp; welcome'

    def test_multiple_matches_of_one_rule(self, escaper):
        text = "a <break/> b <break time='1s'/> c"
        assert escaper.escape(text) == "a <break/> b <break time='1s'/> c"

    def test_outside_characters_still_escaped(self, ssml_registry):
        escaper = TagPreservingEscaper(ssml_registry)
        text = '<prosody rate="slow">5 < 6 & "quotes"</prosody><b>x</b>'
        assert escaper.escape(text) == (
            '<prosody rate="slow">5 &lt; 6 &amp; &quot;quotes&quot;</prosody>'
            "&lt;b&gt;x&lt;/b&gt;"
        )

    def test_single_quote_escaped(self, escaper):
        assert escaper.escape("it's") == "it&#x27;s"

    def test_many_spans_restored_in_place(self, escaper):
        """Counters past 9 do not confuse restoration."""
        text = " ".join(f"w{i}<break/>" for i in range(12))
        assert escaper.escape(text) == text

    def test_repeated_calls_are_independent(self, escaper):
        text = "x <break/> & y"
        assert escaper.escape(text) == escaper.escape(text)
        assert "__SSML_PLACEHOLDER_" not in escaper.escape(text)


class TestPrecedence:
    """Earlier rules consume spans before later rules see them."""

    def test_earlier_rule_wins_overlap(self):
        registry = PatternRegistry(
            [
                PatternRule("whole", r"<say-as[^>]*>.*?</say-as>"),
                PatternRule("open", r"<say-as[^>]*>"),
            ]
        )
        escaper = TagPreservingEscaper(registry)
        text = '<say-as interpret-as="digits">1 & 2</say-as>'
        assert escaper.escape(text) == text

    def test_later_rule_matching_inside_placeholder(self):
        """A later rule that matches placeholder text does not leak it."""
        registry = PatternRegistry(
            [
                PatternRule("break", r"<break[^>]*/>"),
                PatternRule("word", "PLACEHOLDER"),
            ]
        )
        escaper = TagPreservingEscaper(registry)
        assert escaper.escape("a <break/> & b") == "a <break/> &amp; b"

    def test_later_rule_cannot_rematch(self):
        registry = PatternRegistry(
            [
                PatternRule("open", r"<say-as[^>]*>"),
                PatternRule("whole", r"<say-as[^>]*>.*?</say-as>"),
            ]
        )
        escaper = TagPreservingEscaper(registry)
        text = '<say-as interpret-as="digits">1 & 2</say-as>'
        assert escaper.escape(text) == (
            '<say-as interpret-as="digits">1 &amp; 2&lt;/say-as&gt;'
        )
