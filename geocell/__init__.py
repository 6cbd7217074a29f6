"""Geohash encoding, decoding and neighbor lookup."""

from geocell.alphabet import BASE32, symbol_for, value_for
from geocell.codec import (
    Coordinate,
    decode,
    decode_bbox,
    decode_fixed_bits,
    encode,
    encode_fixed_bits,
)
from geocell.exceptions import (
    ConfigError,
    CoordinateRangeError,
    GeohashError,
    InvalidSymbolError,
    PrecisionError,
)
from geocell.geohash import Geohash
from geocell.neighbors import Direction, Neighbors, neighbor, neighbors

__version__ = "0.1.0"

__all__ = [
    "BASE32",
    "ConfigError",
    "Coordinate",
    "CoordinateRangeError",
    "Direction",
    "Geohash",
    "GeohashError",
    "InvalidSymbolError",
    "Neighbors",
    "PrecisionError",
    "decode",
    "decode_bbox",
    "decode_fixed_bits",
    "encode",
    "encode_fixed_bits",
    "neighbor",
    "neighbors",
    "symbol_for",
    "value_for",
]
