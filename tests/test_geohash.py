"""Tests for the precision-bound Geohash helper."""

import pytest

from geocell.codec import Coordinate
from geocell.exceptions import CoordinateRangeError, PrecisionError
from geocell.geohash import Geohash


class TestGeohash:
    def test_encode_lat_lon_order(self):
        assert Geohash(precision=9).encode(37.8324, 112.5584) == "ww8p1r4t8"
        assert Geohash(precision=3).encode(32, 117) == "wte"

    def test_decode(self):
        lat, lon = Geohash(precision=9).decode("ww8p1r4t8")
        assert lat == pytest.approx(37.8324, abs=1e-4)
        assert lon == pytest.approx(112.5584, abs=1e-4)

    def test_willis_tower_roundtrip(self):
        geo = Geohash(precision=6)
        encoded = geo.encode(41.878738, -87.6359612)
        lat, lon = geo.decode(encoded)
        lat_height, lon_width = geo.cell_size()
        assert abs(lat - 41.878738) <= lat_height / 2
        assert abs(lon - -87.6359612) <= lon_width / 2

    def test_bbox(self):
        lo, hi = Geohash(precision=5).bbox("9q60y")
        assert lo.x < -120.6623 < hi.x
        assert lo.y < 35.3003 < hi.y
        assert isinstance(lo, Coordinate)

    def test_cell_size(self):
        assert Geohash(precision=4).cell_size() == (0.17578125, 0.3515625)
        assert Geohash(precision=5).cell_size() == (0.0439453125, 0.0439453125)

    def test_get_neighbors(self):
        cells = Geohash(precision=4).get_neighbors("9g3m")
        assert cells["n"] == "9g3q"
        assert cells["sw"] == "9g3h"
        assert len(cells) == 8

    @pytest.mark.parametrize("precision", [0, 13, -1])
    def test_invalid_precision(self, precision):
        with pytest.raises(PrecisionError):
            Geohash(precision=precision)

    def test_length_mismatch(self):
        geo = Geohash(precision=5)
        with pytest.raises(PrecisionError):
            geo.decode("9q60")
        with pytest.raises(PrecisionError):
            geo.get_neighbors("9q60y6")

    @pytest.mark.parametrize("lat,lon", [(91, 0), (-90.5, 0), (0, 180.01), (0, -181)])
    def test_out_of_range(self, lat, lon):
        with pytest.raises(CoordinateRangeError):
            Geohash(precision=5).encode(lat, lon)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Geohash(precision=20)

    def test_default_precision(self, monkeypatch):
        monkeypatch.delenv("GEOCELL_DEFAULT_PRECISION", raising=False)
        assert Geohash().precision == 5
        monkeypatch.setenv("GEOCELL_DEFAULT_PRECISION", "8")
        assert Geohash().precision == 8
