"""
Unit Tests for HTML Sanitization.
"""

import pytest

from modules.backend.core.sanitize import HTML_ESCAPES, sanitize_html


class TestSanitizeHtml:
    """Tests for sanitize_html."""

    def test_escapes_markup(self):
        """Tags become entities, including the closing slash."""
        assert sanitize_html("<b>hi</b>") == "&lt;b&gt;hi&lt;&#x2F;b&gt;"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("&", "&amp;"),
            ("<", "&lt;"),
            (">", "&gt;"),
            ('"', "&quot;"),
            ("'", "&#x27;"),
            ("/", "&#x2F;"),
        ],
    )
    def test_escapes_each_special_character(self, raw, expected):
        assert sanitize_html(raw) == expected

    def test_ampersand_is_not_double_escaped(self):
        """Entities produced for later characters keep a single &."""
        assert sanitize_html("a < b & c") == "a &lt; b &amp; c"
        assert sanitize_html("&lt;") == "&amp;lt;"

    def test_plain_text_unchanged(self):
        assert sanitize_html("Buy milk") == "Buy milk"

    def test_ampersand_escaped_first(self):
        assert HTML_ESCAPES[0] == ("&", "&amp;")
