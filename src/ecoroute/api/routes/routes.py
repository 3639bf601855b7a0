"""Routing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from ...models.domain import RouteMode
from ...schemas.bins import BinRecordModel
from ...schemas.routing import (
    ComparisonRowModel,
    RouteComparisonResponse,
    RouteGainsModel,
    RouteMetricsModel,
    RouteModeModel,
    RoutePathResponse,
)
from ...services.dashboard.state import get_state
from ...services.export.geojson import build_map_overlays, export_geojson
from ...services.outputs.formatter import comparison_table, comparison_to_csv, threshold_note

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("/mode", response_model=RouteModeModel, status_code=status.HTTP_200_OK)
def get_mode() -> RouteModeModel:
    return RouteModeModel(mode=get_state().mode)


@router.put("/mode", response_model=RouteModeModel, status_code=status.HTTP_200_OK)
def set_mode(payload: RouteModeModel) -> RouteModeModel:
    get_state().set_mode(payload.mode)
    return RouteModeModel(mode=get_state().mode)


@router.get("/path", response_model=RoutePathResponse, status_code=status.HTTP_200_OK)
def get_path(mode: RouteMode | None = Query(default=None, description="Route variant; defaults to the active mode.")) -> RoutePathResponse:
    comparison = get_state().comparison
    selected = mode or comparison.mode
    path = comparison.path_for(selected)
    metrics = comparison.optimized_metrics if selected is RouteMode.OPTIMIZED else comparison.fixed_metrics
    return RoutePathResponse(
        mode=selected,
        depot=[comparison.depot.latitude, comparison.depot.longitude],
        stops=[BinRecordModel.from_domain(bin_) for bin_ in path],
        metrics=RouteMetricsModel.from_domain(metrics),
    )


@router.get("/comparison", response_model=RouteComparisonResponse, status_code=status.HTTP_200_OK)
def get_comparison() -> RouteComparisonResponse:
    comparison = get_state().comparison
    gains = comparison.gains
    return RouteComparisonResponse(
        mode=comparison.mode,
        fixed=RouteMetricsModel.from_domain(comparison.fixed_metrics),
        optimized=RouteMetricsModel.from_domain(comparison.optimized_metrics),
        gains=RouteGainsModel(
            distance_pct=round(gains.distance_pct, 1),
            fuel_pct=round(gains.fuel_pct, 1),
            time_pct=round(gains.time_pct, 1),
        ),
        table=[ComparisonRowModel(**row) for row in comparison_table(comparison)],
        note=threshold_note(),
    )


@router.get("/comparison.csv", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
def get_comparison_csv() -> PlainTextResponse:
    return PlainTextResponse(comparison_to_csv(get_state().comparison), media_type="text/csv")


@router.get("/overlays", status_code=status.HTTP_200_OK)
def get_overlays(mode: RouteMode | None = Query(default=None, description="Route variant; defaults to the active mode.")) -> dict:
    comparison = get_state().comparison
    selected = mode or comparison.mode
    return build_map_overlays(comparison.fixed_path, comparison.path_for(selected), comparison.depot, selected)


@router.get("/geojson", status_code=status.HTTP_200_OK)
def get_geojson(mode: RouteMode | None = Query(default=None, description="Route variant; defaults to the active mode.")) -> dict:
    comparison = get_state().comparison
    selected = mode or comparison.mode
    return export_geojson(comparison.fixed_path, comparison.path_for(selected), comparison.depot)
