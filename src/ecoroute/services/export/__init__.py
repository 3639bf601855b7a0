"""Export services."""

from .geojson import (
    build_map_overlays,
    export_geojson,
    linestring_to_wkt,
    marker_color,
    route_coordinates,
)

__all__ = [
    "build_map_overlays",
    "export_geojson",
    "linestring_to_wkt",
    "marker_color",
    "route_coordinates",
]
