class CoordinateError(Exception):
    """Base coordinate exception."""


class UnsupportedConversionError(CoordinateError):
    """Raised when a source or target reference system cannot be resolved."""


class CoordinateParseError(CoordinateError):
    """Raised when location text is not a list of lng,lat pairs."""


class CoordinateRangeError(CoordinateError):
    """Raised when a point is outside valid longitude/latitude ranges."""
