"""Adjacent cell lookup by nudging the decoded center across a cell edge."""

import logging
from dataclasses import asdict, dataclass
from enum import Enum

from geocell.codec import LAT_RANGE, LON_RANGE, Coordinate, decode, encode

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Compass directions, valued as (lat_step, lon_step)."""

    N = (1, 0)
    NE = (1, 1)
    E = (0, 1)
    SE = (-1, 1)
    S = (-1, 0)
    SW = (-1, -1)
    W = (0, -1)
    NW = (1, -1)

    @property
    def steps(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        lat_step, lon_step = self.value
        return Direction((-lat_step, -lon_step))


@dataclass(frozen=True)
class Neighbors:
    """The eight cells around a geohash, all at the same length."""

    sw: str
    s: str
    se: str
    w: str
    e: str
    nw: str
    n: str
    ne: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def _nudge(center: Coordinate, lon_error: float, lat_error: float,
           direction: Direction) -> Coordinate:
    lat_step, lon_step = direction.steps
    target = Coordinate(
        center.x + 2 * abs(lon_error) * lon_step,
        center.y + 2 * abs(lat_error) * lat_step,
    )
    # Poles and the antimeridian are not wrapped or clamped
    if not (LON_RANGE[0] <= target.x <= LON_RANGE[1]
            and LAT_RANGE[0] <= target.y <= LAT_RANGE[1]):
        logger.debug("Neighbor %s of %s leaves the valid range: %s",
                     direction.name, center, target)
    return target


def neighbor(geohash: str, direction: Direction) -> str:
    """Return the geohash adjacent to ``geohash`` in ``direction``.

    Raises:
        InvalidSymbolError: if ``geohash`` contains a character outside the alphabet.
    """
    center, lon_error, lat_error = decode(geohash)
    return encode(_nudge(center, lon_error, lat_error, direction), len(geohash))


def neighbors(geohash: str) -> Neighbors:
    """Compute the 8 neighboring geohashes (N, NE, E, SE, S, SW, W, NW)."""
    center, lon_error, lat_error = decode(geohash)
    length = len(geohash)
    cells = {
        direction.name.lower(): encode(
            _nudge(center, lon_error, lat_error, direction), length
        )
        for direction in Direction
    }
    return Neighbors(**cells)
