"""Map overlay and GeoJSON export utilities."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ...models.domain import BinRecord, GeoPoint, RouteMode

LEVEL_CRITICAL_COLOR = "#ef4444"
LEVEL_WARNING_COLOR = "#f59e0b"
LEVEL_OK_COLOR = "#10b981"


def marker_color(level: int) -> str:
    """Marker fill colour for a bin's fill level."""
    if level > 85:
        return LEVEL_CRITICAL_COLOR
    if level > 50:
        return LEVEL_WARNING_COLOR
    return LEVEL_OK_COLOR


def route_coordinates(path: Sequence[BinRecord], depot: GeoPoint) -> List[List[float]]:
    """Closed polyline ``[depot, *bins, depot]`` as [lat, lon] pairs."""
    coordinates = [[depot.latitude, depot.longitude]]
    coordinates.extend([bin_.latitude, bin_.longitude] for bin_ in path)
    coordinates.append([depot.latitude, depot.longitude])
    return coordinates


def linestring_to_wkt(coordinates: List[List[float]]) -> str:
    """Convert linestring coordinates to WKT format.

    Args:
        coordinates: List of [lat, lon] pairs

    Returns:
        WKT LINESTRING string
    """
    if not coordinates or len(coordinates) < 2:
        raise ValueError("LineString must have at least 2 coordinates")

    # WKT uses lon,lat order (x,y)
    coord_pairs = [f"{lon} {lat}" for lat, lon in coordinates]
    return f"LINESTRING({','.join(coord_pairs)})"


def build_map_overlays(
    bins: Sequence[BinRecord],
    path: Sequence[BinRecord],
    depot: GeoPoint,
    mode: RouteMode,
) -> Dict[str, Any]:
    """Everything the map needs: bin markers, the depot marker and the route line."""
    markers = [
        {
            "bin_id": bin_.bin_id,
            "position": [bin_.latitude, bin_.longitude],
            "level": bin_.level,
            "color": marker_color(bin_.level),
            "popup": f"{bin_.bin_id} - Fill Level: {bin_.level}%",
        }
        for bin_ in bins
    ]
    coordinates = route_coordinates(path, depot)
    return {
        "markers": markers,
        "depot": {"label": "Central Depot", "position": [depot.latitude, depot.longitude]},
        "route": {
            "mode": RouteMode(mode).value,
            "stops": [bin_.bin_id for bin_ in path],
            "coordinates": coordinates,
            "wkt": linestring_to_wkt(coordinates),
        },
    }


def export_geojson(bins: Sequence[BinRecord], path: Sequence[BinRecord], depot: GeoPoint) -> Dict[str, Any]:
    """GeoJSON FeatureCollection of bins, depot and the route (lon/lat order)."""
    features: List[Dict[str, Any]] = []

    for bin_ in bins:
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [bin_.longitude, bin_.latitude]},
                "properties": {
                    "kind": "bin",
                    "id": bin_.bin_id,
                    "level": bin_.level,
                    "lastUpdate": bin_.last_update,
                    "color": marker_color(bin_.level),
                },
            }
        )

    features.append(
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [depot.longitude, depot.latitude]},
            "properties": {"kind": "depot", "name": "Central Depot"},
        }
    )

    features.append(
        {
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [[lon, lat] for lat, lon in route_coordinates(path, depot)],
            },
            "properties": {"kind": "route", "stops": [bin_.bin_id for bin_ in path]},
        }
    )

    return {"type": "FeatureCollection", "features": features}
