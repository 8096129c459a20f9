"""
Unit Tests for Formatter
========================

Tests for the value formatting registry.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from microformats.core.errors import ConfigError, InvalidCoordinateError
from microformats.core.rendering.formatter import Formatter


class TestFormatDispatch:
    """Test dispatching format names to formatting methods."""

    def test_format_by_name(self, formatter):
        """Test a format name selects the as_ method."""
        assert formatter.format("Ada", "text") == "Ada"

    def test_format_name_case_insensitive(self, formatter):
        """Test format names are matched case-insensitively."""
        assert formatter.format("<b>", "TEXT") == "&lt;b&gt;"

    def test_format_with_parameters(self, formatter):
        """Test list formats pass extra arguments."""
        assert formatter.format(3.14159, ["decimal", 3]) == "3.142"

    def test_unknown_format(self, formatter):
        """Test unknown format names raise ConfigError."""
        with pytest.raises(ConfigError, match="Unknown format"):
            formatter.format("x", "sparkle")

    def test_empty_format_list(self, formatter):
        """Test an empty format list raises ConfigError."""
        with pytest.raises(ConfigError):
            formatter.format("x", [])

    def test_has_format(self, formatter):
        """Test format availability checks."""
        assert formatter.has_format("latitude")
        assert not formatter.has_format("sparkle")


class TestTextFormats:
    """Test text-like formats."""

    def test_text_escapes_html(self, formatter):
        """Test text is HTML-escaped."""
        assert formatter.as_text('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"

    def test_none_renders_null_display(self, formatter):
        """Test missing values render as the null display text."""
        assert formatter.as_text(None) == ""
        assert formatter.format(None, "email") == ""

    def test_raw_and_html_verbatim(self, formatter):
        """Test raw and html formats do not escape."""
        assert formatter.as_raw("<b>x</b>") == "<b>x</b>"
        assert formatter.as_html("<b>x</b>") == "<b>x</b>"

    def test_ntext_line_breaks(self, formatter):
        """Test ntext converts newlines to line breaks."""
        assert formatter.as_ntext("a\nb") == "a<br>\nb"

    def test_email(self, formatter):
        """Test email renders a mailto link."""
        assert formatter.as_email("ada@example.com") == (
            '<a href="mailto:ada@example.com">ada@example.com</a>'
        )

    def test_url_adds_scheme(self, formatter):
        """Test url prepends http:// when no scheme is given."""
        assert formatter.as_url("example.com") == '<a href="http://example.com">example.com</a>'
        assert formatter.as_url("https://example.com") == (
            '<a href="https://example.com">https://example.com</a>'
        )


class TestScalarFormats:
    """Test numeric, boolean and date formats."""

    def test_boolean(self, formatter):
        """Test booleans use the configured texts."""
        assert formatter.as_boolean(True) == "Yes"
        assert formatter.as_boolean(0) == "No"

    def test_integer(self, formatter):
        """Test integers truncate fractions."""
        assert formatter.as_integer("42.9") == "42"

    def test_decimal(self, formatter):
        """Test decimals are rendered with fixed places."""
        assert formatter.as_decimal(Decimal("2.5")) == "2.50"
        assert formatter.as_decimal(1, 0) == "1"

    def test_decimal_invalid(self, formatter):
        """Test non-numeric decimals raise ValueError."""
        with pytest.raises(ValueError):
            formatter.as_decimal("many")

    def test_date(self, formatter):
        """Test dates use the configured strftime format."""
        assert formatter.as_date(date(2015, 3, 7)) == "Mar 07, 2015"
        assert formatter.as_date("2015-03-07") == "Mar 07, 2015"
        assert formatter.as_date(date(2015, 3, 7), "%Y-%m-%d") == "2015-03-07"

    def test_datetime(self, formatter):
        """Test date/times use the configured strftime format."""
        assert formatter.as_datetime(datetime(2015, 3, 7, 9, 5, 1)) == "Mar 07, 2015 09:05:01"

    def test_invalid_date(self, formatter):
        """Test unparseable dates raise ValueError."""
        with pytest.raises(ValueError):
            formatter.as_date("yesterday")


class TestCoordinateFormats:
    """Test latitude and longitude formats."""

    def test_latitude(self, formatter):
        """Test latitude uses the default coordinate format."""
        assert formatter.format(45.5, "latitude") == "45.500000°"

    def test_latitude_with_format(self, formatter):
        """Test latitude with an explicit DMS format."""
        assert formatter.format(45.5, ["latitude", "%02d %02.6f h"]) == "45° 30.000000′ N"

    def test_longitude(self, formatter):
        """Test longitude formatting."""
        assert formatter.format(-73.935242, "longitude") == "-73.935242°"

    def test_invalid_latitude_propagates(self, formatter):
        """Test invalid coordinates propagate unchanged."""
        with pytest.raises(InvalidCoordinateError):
            formatter.format(91, "latitude")

    def test_settings_symbols(self, test_settings):
        """Test the formatter passes configured symbols to the coordinate formatter."""
        settings = test_settings.model_copy(update={"coordinate_symbols": ["d", "m", "s"]})
        assert Formatter(settings).format(45.5, ["latitude", "%d %d"]) == "45d 30m"
