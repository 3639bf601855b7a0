"""Routing orchestration service."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import BinRecord, GeoPoint, RouteMode
from .metrics import CostModel, compute_gain, evaluate_route
from .models import RouteComparison, RouteGains
from .planner import plan_route


def compare_routes(
    bins: Sequence[BinRecord],
    mode: RouteMode,
    depot: GeoPoint,
    cost_model: Optional[CostModel] = None,
    *,
    threshold: Optional[int] = None,
) -> RouteComparison:
    """Plan and evaluate both route variants for the current bin collection."""

    fixed_path = plan_route(bins, RouteMode.FIXED, depot)
    optimized_path = plan_route(bins, RouteMode.OPTIMIZED, depot, threshold=threshold)

    fixed_metrics = evaluate_route(fixed_path, depot, cost_model)
    optimized_metrics = evaluate_route(optimized_path, depot, cost_model)

    gains = RouteGains(
        distance_pct=compute_gain(fixed_metrics.distance_km, optimized_metrics.distance_km),
        fuel_pct=compute_gain(fixed_metrics.fuel_liters, optimized_metrics.fuel_liters),
        time_pct=compute_gain(fixed_metrics.time_min, optimized_metrics.time_min),
    )

    return RouteComparison(
        mode=RouteMode(mode),
        depot=depot,
        fixed_path=fixed_path,
        optimized_path=optimized_path,
        fixed_metrics=fixed_metrics,
        optimized_metrics=optimized_metrics,
        gains=gains,
    )
