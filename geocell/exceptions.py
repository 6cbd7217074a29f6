"""Errors raised by geocell."""


class GeohashError(ValueError):
    """Base class for geohash failures."""


class InvalidSymbolError(GeohashError):
    """Raised when a character is not part of the base32 geohash alphabet."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Invalid character in geohash: {symbol!r}")


class PrecisionError(GeohashError):
    """Raised when a precision or hash length is not usable."""


class CoordinateRangeError(GeohashError):
    """Raised when a coordinate falls outside the valid lon/lat ranges."""


class ConfigError(GeohashError):
    """Raised when a GEOCELL_* environment variable holds an unusable value."""
