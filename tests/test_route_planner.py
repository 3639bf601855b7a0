from src.ecoroute.models.domain import BinRecord, GeoPoint, RouteMode
from src.ecoroute.services.routing.planner import nearest_neighbor_order, plan_route

DEPOT = GeoPoint(0.0, 0.0)


def _bin(bid: str, lat: float, lon: float, level: int) -> BinRecord:
    return BinRecord(bin_id=bid, latitude=lat, longitude=lon, level=level, last_update="2024-01-01T00:00:00Z")


def _scenario_bins() -> list[BinRecord]:
    return [
        _bin("A", 0.0, 1.0, 80),
        _bin("B", 0.0, 2.0, 60),
        _bin("C", 1.0, 1.0, 90),
    ]


def test_fixed_mode_returns_all_bins_in_order():
    bins = _scenario_bins()

    path = plan_route(bins, RouteMode.FIXED, DEPOT)

    assert [b.bin_id for b in path] == ["A", "B", "C"]
    assert path == bins


def test_fixed_mode_with_empty_input():
    assert plan_route([], RouteMode.FIXED, DEPOT) == []


def test_optimized_mode_skips_low_bins_and_visits_nearest_first():
    path = plan_route(_scenario_bins(), RouteMode.OPTIMIZED, DEPOT)

    assert [b.bin_id for b in path] == ["A", "C"]


def test_optimized_threshold_is_inclusive():
    assert [b.bin_id for b in plan_route([_bin("EDGE", 0.0, 1.0, 70)], RouteMode.OPTIMIZED, DEPOT)] == ["EDGE"]
    assert plan_route([_bin("LOW", 0.0, 1.0, 69)], RouteMode.OPTIMIZED, DEPOT) == []


def test_optimized_mode_with_no_full_bins_is_empty():
    bins = [_bin("A", 0.0, 1.0, 10), _bin("B", 0.0, 2.0, 0)]
    assert plan_route(bins, RouteMode.OPTIMIZED, DEPOT) == []
    assert plan_route([], RouteMode.OPTIMIZED, DEPOT) == []


def test_optimized_includes_each_full_bin_exactly_once():
    bins = [
        _bin(f"BIN-{i:03d}", 0.01 * (i % 5), 0.013 * (i % 7), level)
        for i, level in enumerate([95, 12, 70, 69, 100, 88, 30, 71, 70, 5])
    ]

    path = plan_route(bins, RouteMode.OPTIMIZED, DEPOT)

    expected = {b.bin_id for b in bins if b.level >= 70}
    assert sorted(b.bin_id for b in path) == sorted(expected)
    assert all(b.level >= 70 for b in path)


def test_optimized_mode_is_deterministic():
    bins = [_bin(f"B{i}", 0.002 * i, 0.003 * ((i * 7) % 11), 80 + i) for i in range(12)]

    first = plan_route(bins, RouteMode.OPTIMIZED, DEPOT)
    second = plan_route(bins, RouteMode.OPTIMIZED, DEPOT)

    assert [b.bin_id for b in first] == [b.bin_id for b in second]


def test_equidistant_candidates_keep_input_order():
    east = _bin("EAST", 0.0, 1.0, 90)
    west = _bin("WEST", 0.0, -1.0, 90)

    assert [b.bin_id for b in nearest_neighbor_order([east, west], DEPOT)] == ["EAST", "WEST"]
    assert [b.bin_id for b in nearest_neighbor_order([west, east], DEPOT)] == ["WEST", "EAST"]


def test_greedy_advances_from_last_visited_bin():
    bins = [
        _bin("FAR", 0.0, 3.0, 90),
        _bin("NEAR", 0.0, 1.0, 90),
        _bin("MID", 0.0, 2.0, 90),
    ]

    path = plan_route(bins, RouteMode.OPTIMIZED, DEPOT)

    assert [b.bin_id for b in path] == ["NEAR", "MID", "FAR"]


def test_plan_does_not_mutate_input():
    bins = _scenario_bins()
    snapshot = list(bins)

    plan_route(bins, RouteMode.OPTIMIZED, DEPOT)

    assert bins == snapshot


def test_custom_threshold_override():
    path = plan_route(_scenario_bins(), RouteMode.OPTIMIZED, DEPOT, threshold=85)
    assert [b.bin_id for b in path] == ["C"]


def test_mode_accepts_wire_value():
    path = plan_route(_scenario_bins(), "FIXED", DEPOT)
    assert len(path) == 3
