"""
Formatter
=========

Value formatting registry: turns a raw value plus a format name such as
"text", "date" or "latitude" into displayable text.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Optional, Tuple, Union

from microformats.config.logging import get_logger
from microformats.config.settings import Settings, get_settings
from microformats.core.errors import ConfigError
from microformats.core.rendering.coordinates import CoordinateFormatter
from microformats.core.rendering.html import escape_html

logger = get_logger(__name__)

FormatSpec = Union[str, List[Any], Tuple[Any, ...]]


class Formatter:
    """
    Formats values for display.

    ``format(value, "name")`` dispatches to ``as_name(value)``; a list such as
    ``["decimal", 2]`` passes the remaining items as extra arguments.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="formatter")
        self.coordinates = CoordinateFormatter(
            default_format=self.settings.coordinate_format,
            symbols=self.settings.coordinate_symbols,
            hemispheres=self.settings.hemispheres,
        )

    def format(self, value: Any, format: FormatSpec) -> str:
        """
        Format a value.

        Args:
            value: The value to format
            format: Format name, or a list of the name and extra arguments

        Returns:
            The formatted value

        Raises:
            ConfigError: If the format name is unknown
        """
        if isinstance(format, (list, tuple)):
            if not format:
                raise ConfigError("The format specification cannot be empty.")
            name, params = str(format[0]), list(format[1:])
        else:
            name, params = str(format), []

        method = self._get_method(name)
        return method(value, *params)

    def has_format(self, name: str) -> bool:
        """Whether the registry supports the named format."""
        return callable(getattr(self, f"as_{name.lower()}", None))

    def _get_method(self, name: str) -> Callable[..., str]:
        method = getattr(self, f"as_{name.lower()}", None)
        if not callable(method):
            self.logger.error("Unknown format", format=name)
            raise ConfigError(f'Unknown format type: "{name}"')
        return method

    def _null(self) -> str:
        return self.settings.null_display

    def as_raw(self, value: Any) -> str:
        """Value as-is, without escaping."""
        if value is None:
            return self._null()
        return str(value)

    def as_text(self, value: Any) -> str:
        """Value as HTML-escaped text."""
        if value is None:
            return self._null()
        return escape_html(str(value))

    def as_ntext(self, value: Any) -> str:
        """Escaped text with newlines converted to line breaks."""
        if value is None:
            return self._null()
        return escape_html(str(value)).replace("\n", "<br>\n")

    def as_html(self, value: Any) -> str:
        """Value as trusted HTML."""
        if value is None:
            return self._null()
        return str(value)

    def as_email(self, value: Any) -> str:
        """Value as a mailto link."""
        if value is None:
            return self._null()
        address = escape_html(str(value))
        return f'<a href="mailto:{address}">{address}</a>'

    def as_url(self, value: Any) -> str:
        """Value as a hyperlink; ``http://`` is prepended when no scheme is given."""
        if value is None:
            return self._null()
        url = str(value)
        href = url if "://" in url else f"http://{url}"
        return f'<a href="{escape_html(href)}">{escape_html(url)}</a>'

    def as_boolean(self, value: Any) -> str:
        """Value as one of the configured boolean texts."""
        if value is None:
            return self._null()
        return self.settings.boolean_format[1 if value else 0]

    def as_integer(self, value: Any) -> str:
        """Value as an integer, truncating any fraction."""
        if value is None:
            return self._null()
        return str(int(self._to_decimal(value)))

    def as_decimal(self, value: Any, decimals: int = 2) -> str:
        """Value as a decimal number with a fixed number of places."""
        if value is None:
            return self._null()
        return f"{self._to_decimal(value):.{int(decimals)}f}"

    def as_date(self, value: Any, format: Optional[str] = None) -> str:
        """Value as a date, using strftime ``format`` or the configured date format."""
        if value is None:
            return self._null()
        return self._to_datetime(value).strftime(format or self.settings.date_format)

    def as_datetime(self, value: Any, format: Optional[str] = None) -> str:
        """Value as a date and time."""
        if value is None:
            return self._null()
        return self._to_datetime(value).strftime(format or self.settings.datetime_format)

    def as_latitude(self, value: Any, format: Optional[str] = None) -> str:
        """Value as a DMS latitude. See :class:`CoordinateFormatter`."""
        if value is None:
            return self._null()
        return self.coordinates.as_latitude(value, format)

    def as_longitude(self, value: Any, format: Optional[str] = None) -> str:
        """Value as a DMS longitude. See :class:`CoordinateFormatter`."""
        if value is None:
            return self._null()
        return self.coordinates.as_longitude(value, format)

    def _to_decimal(self, value: Any) -> Decimal:
        try:
            return Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f'"{value}" is not a numeric value.')

    def _to_datetime(self, value: Any) -> Union[date, datetime]:
        if isinstance(value, (date, datetime)):
            return value
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value)
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                raise ValueError(f'"{value}" is not a valid date value.')
        raise ValueError(f'"{value}" is not a valid date value.')
