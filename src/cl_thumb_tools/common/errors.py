"""Exceptions raised by the thumbnail geometry engine."""


class ThumbnailError(Exception):
    """Raised when a thumbnail request cannot be planned."""


class GeometryParseError(ThumbnailError):
    """Raised when a required geometry string has no width or height."""


class DimensionsUnavailable(ThumbnailError):
    """Raised when the dimensions of a source file cannot be determined."""


class DegenerateGeometry(ThumbnailError, ValueError):
    """Raised when a crop computation is handed a zero-sized source."""


class CommandNotFound(ThumbnailError):
    """Raised when an external measuring command is not installed."""
