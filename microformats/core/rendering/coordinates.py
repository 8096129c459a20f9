"""
Coordinate Formatter
====================

Format decimal degree latitudes and longitudes as degrees, minutes and
seconds (DMS) strings.

The format is up to four space separated groups: one to three printf-style
number directives for degrees, minutes and seconds, and an optional trailing
``h`` requesting a hemisphere letter instead of a signed value.

Example formats:
- ``%02.4f`` - decimal degrees with leading zeros and four decimal places
- ``%02d %02.4f`` - whole degrees and decimal minutes with four decimal places
- ``%02d %02d %02.2f h`` - degrees, minutes, seconds with two decimal places
  and the hemisphere
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence
import math
import re

from microformats.config.logging import get_logger
from microformats.config.settings import get_settings
from microformats.core.errors import FormatError, InvalidCoordinateError

logger = get_logger(__name__)

IS_LATITUDE = True
IS_LONGITUDE = False
MAX_LATITUDE = 90
MAX_LONGITUDE = 180
HEMISPHERE_TOKEN = "h"

_NUMBER_DIRECTIVE = re.compile(r"^%[-+ 0#]*\d*(?:\.\d+)?[diouxXeEfFgG]$")


def _to_number(value: Any) -> Optional[float]:
    """Convert a numeric value or numeric string to float, or None if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


class CoordinateFormatter:
    """Formats latitude and longitude values as DMS strings."""

    def __init__(
        self,
        default_format: Optional[str] = None,
        symbols: Optional[Sequence[str]] = None,
        hemispheres: Optional[Dict[str, str]] = None,
    ) -> None:
        if not (default_format and symbols and hemispheres):
            settings = get_settings()
            default_format = default_format or settings.coordinate_format
            symbols = symbols or settings.coordinate_symbols
            hemispheres = hemispheres or settings.hemispheres

        self.default_format = default_format
        self.symbols = list(symbols)
        self.hemispheres = dict(hemispheres)
        self.logger: Any = logger.bind(component="coordinates")

    def as_latitude(self, value: Any, format: Optional[str] = None) -> str:
        """
        Format the value as a latitude.

        Args:
            value: Decimal degrees, number or numeric string
            format: DMS format; the default coordinate format if None

        Returns:
            The formatted latitude

        Raises:
            InvalidCoordinateError: If the value is not numeric or exceeds 90 degrees
            FormatError: If the format is invalid
        """
        number = _to_number(value)
        if number is None or abs(number) > MAX_LATITUDE:
            self.logger.error("Invalid latitude", value=value)
            raise InvalidCoordinateError(f'Invalid latitude "{value}"')
        return self.format_coordinate(number, format, IS_LATITUDE)

    def as_longitude(self, value: Any, format: Optional[str] = None) -> str:
        """
        Format the value as a longitude.

        Args:
            value: Decimal degrees, number or numeric string
            format: DMS format; the default coordinate format if None

        Returns:
            The formatted longitude

        Raises:
            InvalidCoordinateError: If the value is not numeric or exceeds 180 degrees
            FormatError: If the format is invalid
        """
        number = _to_number(value)
        if number is None or abs(number) > MAX_LONGITUDE:
            self.logger.error("Invalid longitude", value=value)
            raise InvalidCoordinateError(f'Invalid longitude "{value}"')
        return self.format_coordinate(number, format, IS_LONGITUDE)

    def format_coordinate(self, value: float, format: Optional[str], is_latitude: bool) -> str:
        """
        Format a coordinate.

        Components beyond the supplied directives are dropped, not rounded
        into the last one; ``%d`` truncates.

        Args:
            value: Signed decimal degrees
            format: DMS format; the default coordinate format if None
            is_latitude: Selects N/S (True) or E/W (False) hemisphere letters

        Returns:
            The formatted coordinate
        """
        if format is None:
            format = self.default_format

        directives = self._parse_format(format)

        if directives and directives[-1] == HEMISPHERE_TOKEN:
            directives = directives[:-1]
            if is_latitude:
                hemisphere = " " + self.hemispheres["s" if value < 0 else "n"]
            else:
                hemisphere = " " + self.hemispheres["w" if value < 0 else "e"]
        else:
            hemisphere = ""

        negative = value < 0
        abs_value = abs(value)
        whole_degrees = math.floor(abs_value)
        minutes = (abs_value - whole_degrees) * 60
        # Seconds come from the absolute value, not the rounded minutes
        seconds = (abs_value - whole_degrees) * 3600 - math.floor(minutes) * 60
        components = [abs_value, minutes, seconds]

        parts: List[str] = []
        for directive, component, symbol in zip(directives, components, self.symbols):
            parts.append(self._apply_directive(directive, component) + symbol)

        sign = "-" if negative and not hemisphere else ""
        return sign + " ".join(parts) + hemisphere

    def _parse_format(self, format: str) -> List[str]:
        """Split a DMS format into directives and validate them."""
        sections = format.split()
        if sections and sections[-1] == HEMISPHERE_TOKEN:
            numeric = sections[:-1]
        else:
            numeric = sections

        if not numeric or len(numeric) > 3:
            self.logger.error("Invalid coordinate format", format=format)
            raise FormatError(
                f'Invalid coordinate format "{format}": expected 1 to 3 number directives'
            )

        for directive in numeric:
            if not _NUMBER_DIRECTIVE.match(directive):
                self.logger.error("Invalid coordinate directive", directive=directive)
                raise FormatError(f'Invalid coordinate format directive "{directive}"')

        return sections

    def _apply_directive(self, directive: str, component: float) -> str:
        try:
            return directive % component
        except (TypeError, ValueError) as e:
            raise FormatError(f'Invalid coordinate format directive "{directive}": {e}')
