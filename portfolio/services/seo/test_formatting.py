"""Tests for escaping and formatting helpers."""
import html
import re
from datetime import datetime, timedelta, timezone
import xml.sax.saxutils as saxutils

import pytest
from hypothesis import given, strategies as st

from portfolio.services.seo.constants import SEO_CONSTANTS
from portfolio.services.seo.formatting import (
    escape_html,
    escape_xml,
    format_iso_datetime,
    format_priority,
    is_present,
    present_items,
    truncate_description,
)


class TestEscapeHtml:
    """Tests for HTML escaping."""

    def test_escapes_all_special_characters(self):
        assert escape_html('<a href="x">Tom & Jerry\'s</a>') == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;"
        )

    def test_plain_text_unchanged(self):
        assert escape_html("AI/ML Engineer") == "AI/ML Engineer"

    def test_not_idempotent(self):
        """Escaping twice escapes the ampersands produced by the first pass."""
        assert escape_html(escape_html("&")) == "&amp;amp;"

    @given(st.text())
    def test_output_has_no_raw_specials(self, text: str):
        """Property: Escaped output never contains a raw <, >, " or '."""
        escaped = escape_html(text)
        for char in '<>"\'':
            assert char not in escaped

    @given(st.text())
    def test_unescape_restores_input(self, text: str):
        """Property: Escaping loses no information."""
        assert html.unescape(escape_html(text)) == text


class TestEscapeXml:
    """Tests for XML escaping."""

    def test_escapes_all_special_characters(self):
        assert escape_xml("a<b>&\"c'") == "a&lt;b&gt;&amp;&quot;c&apos;"

    def test_url_with_ampersand(self):
        assert escape_xml("https://example.com/a&b") == "https://example.com/a&amp;b"

    @given(st.text())
    def test_unescape_restores_input(self, text: str):
        """Property: XML escaping round-trips through saxutils.unescape."""
        restored = saxutils.unescape(escape_xml(text), {"&quot;": '"', "&apos;": "'"})
        assert restored == text


class TestTruncateDescription:
    """Tests for description truncation."""

    def test_short_text_unchanged(self):
        assert truncate_description("Short description") == "Short description"

    def test_exact_limit_unchanged(self):
        text = "A" * SEO_CONSTANTS.DESCRIPTION_MAX_LENGTH
        assert truncate_description(text) == text

    def test_one_over_limit_is_truncated(self):
        result = truncate_description("A" * 161)
        assert len(result) == 160
        assert result == "A" * 157 + "..."

    def test_custom_limit(self):
        assert truncate_description("abcdefghij", max_length=8) == "abcde..."

    @given(st.text(max_size=400))
    def test_never_exceeds_limit(self, text: str):
        """Property: Output length never exceeds 160 characters."""
        result = truncate_description(text)
        assert len(result) <= SEO_CONSTANTS.DESCRIPTION_MAX_LENGTH
        if len(text) <= SEO_CONSTANTS.DESCRIPTION_MAX_LENGTH:
            assert result == text
        else:
            assert result.endswith("...")
            assert result[:-3] == text[:157]


class TestPresence:
    """Tests for optional value handling."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_values_are_absent(self, value):
        assert is_present(value) is False

    def test_text_is_present(self):
        assert is_present(" x ") is True

    def test_present_items_drops_blanks(self):
        assert present_items(["AI", "", "  ", "ML"]) == ["AI", "ML"]

    def test_present_items_handles_none(self):
        assert present_items(None) == []


class TestFormatIsoDatetime:
    """Tests for sitemap timestamp formatting."""

    def test_naive_datetime_treated_as_utc(self):
        value = datetime(2024, 1, 15, 10, 30, 0, 123456)
        assert format_iso_datetime(value) == "2024-01-15T10:30:00.123Z"

    def test_aware_datetime_converted_to_utc(self):
        value = datetime(2024, 1, 15, 16, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        assert format_iso_datetime(value) == "2024-01-15T10:30:00.000Z"

    def test_defaults_to_now(self):
        result = format_iso_datetime()
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", result)


class TestFormatPriority:
    """Tests for priority rendering."""

    @pytest.mark.parametrize("priority, expected", [
        (1.0, "1"),
        (0.0, "0"),
        (0.5, "0.5"),
        (0.8, "0.8"),
        (1.5, "1"),
        (-0.2, "0"),
    ])
    def test_shortest_form(self, priority, expected):
        assert format_priority(priority) == expected

    @pytest.mark.parametrize("priority", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, priority):
        with pytest.raises(ValueError):
            format_priority(priority)

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_always_within_range(self, priority: float):
        """Property: Rendered priority parses back into [0, 1]."""
        assert 0.0 <= float(format_priority(priority)) <= 1.0
