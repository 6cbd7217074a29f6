"""CLI entrypoint for geocell."""

import logging
import math

import click
from rich.console import Console
from rich.table import Table

from geocell.codec import Coordinate, decode, decode_bbox, encode
from geocell.config import MAX_PRECISION, MIN_PRECISION, load_settings
from geocell.exceptions import GeohashError, InvalidSymbolError
from geocell.neighbors import neighbors

logger = logging.getLogger(__name__)

console = Console()


def _rejected(geohash: str, exc: InvalidSymbolError) -> click.BadParameter:
    logger.warning("Rejected geohash %r: %s", geohash, exc)
    return click.BadParameter(str(exc), param_hint="GEOHASH")


def _finite(ctx, param, value):
    # FloatRange lets NaN through since every comparison with it is false
    if value is not None and math.isnan(value):
        raise click.BadParameter("must be a number, not NaN")
    return value


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """Geohash encoding, decoding and neighbor lookup."""
    try:
        settings = load_settings()
    except GeohashError as exc:
        raise click.UsageError(str(exc)) from exc
    logging.basicConfig(level=settings.log_level)
    ctx.obj = settings


@cli.command("encode")
@click.option("--lon", type=click.FloatRange(-180, 180), required=True, callback=_finite,
              help="Longitude in degrees.")
@click.option("--lat", type=click.FloatRange(-90, 90), required=True, callback=_finite,
              help="Latitude in degrees.")
@click.option("--precision", type=click.IntRange(MIN_PRECISION, MAX_PRECISION), default=None,
              help="Geohash length (defaults to GEOCELL_DEFAULT_PRECISION).")
@click.pass_obj
def encode_cmd(settings, lon: float, lat: float, precision):
    """Encode a longitude/latitude pair into a geohash."""
    if precision is None:
        precision = settings.default_precision
    click.echo(encode(Coordinate(lon, lat), precision))


@cli.command("decode")
@click.argument("geohash")
def decode_cmd(geohash: str):
    """Decode a geohash into its center, errors and bounding box."""
    try:
        center, lon_error, lat_error = decode(geohash)
        lo, hi = decode_bbox(geohash)
    except InvalidSymbolError as exc:
        raise _rejected(geohash, exc) from exc

    table = Table(title=f"Geohash {geohash}")
    table.add_column("Field", style="bold")
    table.add_column("Longitude", justify="right")
    table.add_column("Latitude", justify="right")

    table.add_row("center", repr(center.x), repr(center.y))
    table.add_row("error", repr(lon_error), repr(lat_error))
    table.add_row("min", repr(lo.x), repr(lo.y))
    table.add_row("max", repr(hi.x), repr(hi.y))

    console.print(table)


@cli.command("neighbors")
@click.argument("geohash")
def neighbors_cmd(geohash: str):
    """Show the eight cells around a geohash."""
    try:
        cells = neighbors(geohash)
    except InvalidSymbolError as exc:
        raise _rejected(geohash, exc) from exc

    table = Table(title=f"Neighbors of {geohash}")
    table.add_column("Direction", style="bold")
    table.add_column("Geohash")

    for direction, cell in cells.as_dict().items():
        table.add_row(direction.upper(), cell)

    console.print(table)
