"""Base32 code table shared by the encoder and decoder."""

from geocell.exceptions import InvalidSymbolError

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"  # Standard Base32 characters, no a/i/l/o
BITS_PER_SYMBOL = 5

_DECODE_MAP = {symbol: value for value, symbol in enumerate(BASE32)}


def symbol_for(value: int) -> str:
    """Map a 5-bit value (0-31) to its geohash character."""
    return BASE32[value]


def value_for(symbol: str) -> int:
    """Map a geohash character back to its 5-bit value.

    Lookup is case sensitive: only the lowercase table is accepted.
    """
    try:
        return _DECODE_MAP[symbol]
    except KeyError:
        raise InvalidSymbolError(symbol) from None
