"""
Exceptions
==========

Errors raised while configuring, normalizing and formatting microformats.
"""


class MicroformatError(Exception):
    """Base class for all microformat rendering errors."""

    pass


class ConfigError(MicroformatError):
    """Exception raised when a microformat or attribute configuration is invalid."""

    pass


class InvalidCoordinateError(MicroformatError, ValueError):
    """Exception raised when a latitude or longitude value is not usable."""

    pass


class FormatError(MicroformatError, ValueError):
    """Exception raised when a coordinate format directive is invalid."""

    pass
