import math

import pytest

from src.ecoroute.models.domain import BinRecord, GeoPoint
from src.ecoroute.services.geospatial import distance, haversine_km


def test_haversine_one_degree_of_longitude_on_equator():
    expected = 6371.0 * math.radians(1.0)
    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(expected, rel=1e-9)


def test_distance_is_symmetric():
    points = [
        GeoPoint(28.6949, 77.1350),
        GeoPoint(28.7012, 77.1281),
        GeoPoint(-33.8688, 151.2093),
        GeoPoint(51.5074, -0.1278),
    ]
    for a in points:
        for b in points:
            assert distance(a, b) == distance(b, a)


def test_distance_to_self_is_zero():
    point = GeoPoint(28.6949, 77.1350)
    assert distance(point, point) == 0


def test_distance_accepts_bins_and_points():
    depot = GeoPoint(0.0, 0.0)
    bin_ = BinRecord(bin_id="BIN-001", latitude=0.0, longitude=1.0, level=50, last_update="2024-01-01T00:00:00Z")

    assert distance(depot, bin_) == haversine_km(0.0, 0.0, 0.0, 1.0)


def test_nan_coordinates_propagate():
    assert math.isnan(haversine_km(float("nan"), 0.0, 0.0, 1.0))
