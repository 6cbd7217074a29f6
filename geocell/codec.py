"""Interval-halving geohash codec.

Bits alternate between longitude and latitude, starting with longitude.
Each bit halves the active axis: 1 keeps the upper half, 0 the lower one.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator

from geocell.alphabet import BITS_PER_SYMBOL, symbol_for, value_for
from geocell.exceptions import GeohashError

LON_RANGE = (-180.0, 180.0)
LAT_RANGE = (-90.0, 90.0)


@dataclass(frozen=True)
class Coordinate:
    """A point in degrees: x is longitude, y is latitude."""

    x: float
    y: float


def _bisect(coordinate: Coordinate, bit_count: int) -> Iterator[int]:
    """Yield the geohash bits of a coordinate, most significant first."""
    min_lon, max_lon = LON_RANGE
    min_lat, max_lat = LAT_RANGE
    is_lon = True

    for _ in range(bit_count):
        if is_lon:
            mid = (min_lon + max_lon) / 2
            if coordinate.x > mid:
                min_lon = mid
                bit = 1
            else:
                max_lon = mid
                bit = 0
        else:
            mid = (min_lat + max_lat) / 2
            if coordinate.y > mid:
                min_lat = mid
                bit = 1
            else:
                max_lat = mid
                bit = 0
        is_lon = not is_lon
        yield bit


def _narrow(bits: Iterable[int]) -> tuple[Coordinate, Coordinate]:
    """Replay a bit sequence into the bounding box it denotes."""
    min_lon, max_lon = LON_RANGE
    min_lat, max_lat = LAT_RANGE
    is_lon = True

    for bit in bits:
        if is_lon:
            mid = (min_lon + max_lon) / 2
            if bit:
                min_lon = mid
            else:
                max_lon = mid
        else:
            mid = (min_lat + max_lat) / 2
            if bit:
                min_lat = mid
            else:
                max_lat = mid
        is_lon = not is_lon

    return Coordinate(min_lon, min_lat), Coordinate(max_lon, max_lat)


def encode(coordinate: Coordinate, length: int) -> str:
    """Encode a coordinate into a geohash of ``length`` characters.

    Coordinates are not range checked; callers pass lon in [-180, 180] and
    lat in [-90, 90].
    """
    out: list[str] = []
    value = 0
    for index, bit in enumerate(_bisect(coordinate, length * BITS_PER_SYMBOL), 1):
        value = (value << 1) | bit
        if index % BITS_PER_SYMBOL == 0:
            out.append(symbol_for(value))
            value = 0
    return "".join(out)


def encode_fixed_bits(coordinate: Coordinate, bit_count: int) -> int:
    """Encode a coordinate into an unsigned integer holding ``bit_count`` bits.

    The bits are the same as the first ``bit_count`` bits of :func:`encode`.
    """
    value = 0
    for bit in _bisect(coordinate, bit_count):
        value = (value << 1) | bit
    return value


def decode_bbox(geohash: str) -> tuple[Coordinate, Coordinate]:
    """Decode a geohash into its (min, max) corners.

    Raises:
        InvalidSymbolError: if a character is not in the geohash alphabet.
    """
    values = [value_for(symbol) for symbol in geohash]
    bits = (
        (value >> shift) & 1
        for value in values
        for shift in range(BITS_PER_SYMBOL - 1, -1, -1)
    )
    return _narrow(bits)


def decode_fixed_bits(value: int, bit_count: int) -> tuple[Coordinate, Coordinate]:
    """Decode an integer hash produced by :func:`encode_fixed_bits`."""
    if value < 0 or value >> bit_count:
        raise GeohashError(f"Value {value} does not fit in {bit_count} bits")
    bits = ((value >> (bit_count - 1 - i)) & 1 for i in range(bit_count))
    return _narrow(bits)


def decode(geohash: str) -> tuple[Coordinate, float, float]:
    """Decode a geohash into ``(center, lon_error, lat_error)``.

    The errors are half the width and half the height of the cell.
    """
    lo, hi = decode_bbox(geohash)
    center = Coordinate((lo.x + hi.x) / 2, (lo.y + hi.y) / 2)
    return center, (hi.x - lo.x) / 2, (hi.y - lo.y) / 2
