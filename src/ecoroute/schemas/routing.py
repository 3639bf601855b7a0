"""Routing request/response schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from ..models.domain import RouteMetrics, RouteMode
from .bins import BinRecordModel


class RouteModeModel(BaseModel):
    mode: RouteMode


class RouteMetricsModel(BaseModel):
    distance_km: float
    fuel_liters: float
    time_min: int
    bins_collected: int

    @classmethod
    def from_domain(cls, metrics: RouteMetrics) -> "RouteMetricsModel":
        return cls(
            distance_km=metrics.distance_km,
            fuel_liters=metrics.fuel_liters,
            time_min=metrics.time_min,
            bins_collected=metrics.bins_collected,
        )


class RouteGainsModel(BaseModel):
    distance_pct: float
    fuel_pct: float
    time_pct: float


class ComparisonRowModel(BaseModel):
    metric: str
    fixed: str
    optimized: str
    gain: str


class RouteComparisonResponse(BaseModel):
    mode: RouteMode
    fixed: RouteMetricsModel
    optimized: RouteMetricsModel
    gains: RouteGainsModel
    table: List[ComparisonRowModel]
    note: str


class RoutePathResponse(BaseModel):
    mode: RouteMode
    depot: List[float]
    stops: List[BinRecordModel]
    metrics: RouteMetricsModel
