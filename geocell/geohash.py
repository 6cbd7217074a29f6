from typing import Optional

from geocell.alphabet import BITS_PER_SYMBOL
from geocell.codec import LAT_RANGE, LON_RANGE, Coordinate, decode, decode_bbox, encode
from geocell.config import check_precision, load_settings
from geocell.exceptions import CoordinateRangeError, PrecisionError
from geocell.neighbors import neighbors


class Geohash:
    """Geohash encoder/decoder bound to a single precision."""

    def __init__(self, precision: Optional[int] = None):
        """Initialize with the given precision, or the configured default."""
        if precision is None:
            precision = load_settings().default_precision
        self.precision = check_precision(precision)

    def _check_length(self, geohash: str) -> None:
        if len(geohash) != self.precision:
            raise PrecisionError(
                f"Geohash length {len(geohash)} doesn't match precision {self.precision}"
            )

    def encode(self, lat: float, lon: float) -> str:
        """Encode a latitude and longitude into a geohash."""
        if not LAT_RANGE[0] <= lat <= LAT_RANGE[1]:
            raise CoordinateRangeError(f"Latitude {lat} must be between -90 and 90")
        if not LON_RANGE[0] <= lon <= LON_RANGE[1]:
            raise CoordinateRangeError(f"Longitude {lon} must be between -180 and 180")
        return encode(Coordinate(lon, lat), self.precision)

    def decode(self, geohash: str) -> tuple[float, float]:
        """Decode a geohash into a latitude and longitude."""
        self._check_length(geohash)
        center, _, _ = decode(geohash)
        return center.y, center.x

    def bbox(self, geohash: str) -> tuple[Coordinate, Coordinate]:
        self._check_length(geohash)
        return decode_bbox(geohash)

    def cell_size(self) -> tuple[float, float]:
        """Size of a geohash cell at this precision.

        Returns:
            (latitude_height, longitude_width) in degrees
        """
        bit_length = self.precision * BITS_PER_SYMBOL
        lat_bits = bit_length // 2
        lon_bits = bit_length - lat_bits

        lat_height = 180.0 / (1 << lat_bits)
        lon_width = 360.0 / (1 << lon_bits)
        return lat_height, lon_width

    def get_neighbors(self, geohash: str) -> dict[str, str]:
        """
        Compute the 8 neighboring geohashes (N, S, E, W, NE, NW, SE, SW).
        """
        self._check_length(geohash)
        return neighbors(geohash).as_dict()
