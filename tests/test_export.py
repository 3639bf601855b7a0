import csv
import io

import pytest

from src.ecoroute.models.domain import BinRecord, GeoPoint, RouteMode
from src.ecoroute.services.export.geojson import (
    build_map_overlays,
    export_geojson,
    linestring_to_wkt,
    marker_color,
    route_coordinates,
)
from src.ecoroute.services.outputs.formatter import comparison_table, comparison_to_csv, threshold_note
from src.ecoroute.services.routing.service import compare_routes

DEPOT = GeoPoint(0.0, 0.0)


def _bin(bid: str, lat: float, lon: float, level: int) -> BinRecord:
    return BinRecord(bin_id=bid, latitude=lat, longitude=lon, level=level, last_update="2024-01-01T00:00:00Z")


def test_marker_color_thresholds():
    assert marker_color(100) == "#ef4444"
    assert marker_color(86) == "#ef4444"
    assert marker_color(85) == "#f59e0b"
    assert marker_color(51) == "#f59e0b"
    assert marker_color(50) == "#10b981"
    assert marker_color(0) == "#10b981"


def test_route_coordinates_close_at_depot():
    path = [_bin("A", 0.0, 1.0, 80), _bin("C", 1.0, 1.0, 90)]

    coords = route_coordinates(path, DEPOT)

    assert coords == [[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [0.0, 0.0]]


def test_linestring_to_wkt_uses_lon_lat_order():
    assert linestring_to_wkt([[1.0, 2.0], [3.0, 4.0]]) == "LINESTRING(2.0 1.0,4.0 3.0)"
    with pytest.raises(ValueError):
        linestring_to_wkt([[1.0, 2.0]])


def test_build_map_overlays_contains_markers_and_route():
    bins = [_bin("A", 0.0, 1.0, 80), _bin("B", 0.0, 2.0, 60), _bin("C", 1.0, 1.0, 90)]
    path = [bins[0], bins[2]]

    overlays = build_map_overlays(bins, path, DEPOT, RouteMode.OPTIMIZED)

    assert [m["bin_id"] for m in overlays["markers"]] == ["A", "B", "C"]
    assert overlays["markers"][2]["color"] == "#ef4444"
    assert overlays["markers"][0]["popup"] == "A - Fill Level: 80%"
    assert overlays["route"]["mode"] == "OPTIMIZED"
    assert overlays["route"]["stops"] == ["A", "C"]
    assert overlays["route"]["coordinates"][0] == overlays["route"]["coordinates"][-1]
    assert overlays["depot"]["position"] == [0.0, 0.0]


def test_empty_route_still_draws_depot_loop():
    overlays = build_map_overlays([], [], DEPOT, RouteMode.OPTIMIZED)

    assert overlays["route"]["coordinates"] == [[0.0, 0.0], [0.0, 0.0]]


def test_export_geojson_feature_collection():
    bins = [_bin("A", 0.5, 1.0, 80), _bin("B", 0.0, 2.0, 60)]

    collection = export_geojson(bins, [bins[0]], DEPOT)

    assert collection["type"] == "FeatureCollection"
    kinds = [feature["properties"]["kind"] for feature in collection["features"]]
    assert kinds == ["bin", "bin", "depot", "route"]
    assert collection["features"][0]["geometry"]["coordinates"] == [1.0, 0.5]
    route = collection["features"][-1]["geometry"]
    assert route["type"] == "LineString"
    assert route["coordinates"] == [[0.0, 0.0], [1.0, 0.5], [0.0, 0.0]]


def test_comparison_table_rows():
    bins = [_bin("A", 0.0, 0.01, 80), _bin("B", 0.0, 0.02, 60), _bin("C", 0.01, 0.01, 90)]
    comparison = compare_routes(bins, RouteMode.OPTIMIZED, DEPOT)

    rows = comparison_table(comparison)

    assert [row["metric"] for row in rows] == ["Distance", "Fuel", "Time", "Bins Picked"]
    assert rows[0]["fixed"].endswith(" km")
    assert rows[1]["optimized"].endswith(" L")
    assert rows[2]["fixed"] == f"{comparison.fixed_metrics.time_min} m"
    assert rows[0]["gain"] == f"{comparison.gains.distance_pct:.1f}%"
    assert rows[3] == {"metric": "Bins Picked", "fixed": "3", "optimized": "2", "gain": "-"}


def test_comparison_table_with_empty_collection():
    rows = comparison_table(compare_routes([], RouteMode.FIXED, DEPOT))

    assert rows[0] == {"metric": "Distance", "fixed": "0 km", "optimized": "0 km", "gain": "0.0%"}


def test_comparison_to_csv():
    comparison = compare_routes([_bin("A", 0.0, 0.01, 80)], RouteMode.FIXED, DEPOT)

    reader = csv.DictReader(io.StringIO(comparison_to_csv(comparison)))
    rows = list(reader)

    assert reader.fieldnames == ["metric", "fixed", "optimized", "gain"]
    assert len(rows) == 4
    assert rows[0]["gain"] == "0.0%"


def test_threshold_note_mentions_threshold():
    assert "<70%" in threshold_note()
