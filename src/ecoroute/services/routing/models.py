"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...models.domain import BinRecord, GeoPoint, RouteMetrics, RouteMode


@dataclass(frozen=True, slots=True)
class RouteGains:
    distance_pct: float
    fuel_pct: float
    time_pct: float


@dataclass(frozen=True, slots=True)
class RouteComparison:
    mode: RouteMode
    depot: GeoPoint
    fixed_path: List[BinRecord]
    optimized_path: List[BinRecord]
    fixed_metrics: RouteMetrics
    optimized_metrics: RouteMetrics
    gains: RouteGains

    @property
    def active_path(self) -> List[BinRecord]:
        return self.optimized_path if self.mode is RouteMode.OPTIMIZED else self.fixed_path

    @property
    def active_metrics(self) -> RouteMetrics:
        return self.optimized_metrics if self.mode is RouteMode.OPTIMIZED else self.fixed_metrics

    def path_for(self, mode: RouteMode) -> List[BinRecord]:
        return self.optimized_path if mode is RouteMode.OPTIMIZED else self.fixed_path
