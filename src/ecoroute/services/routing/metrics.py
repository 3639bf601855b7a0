"""Distance, fuel and time accounting for a closed collection route."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import BinRecord, GeoPoint, RouteMetrics
from ..geospatial import distance

EMPTY_METRICS = RouteMetrics(distance_km=0.0, fuel_liters=0.0, time_min=0, bins_collected=0)


@dataclass(frozen=True, slots=True)
class CostModel:
    fuel_consumption_l_per_km: float
    truck_speed_kmh: float
    time_per_bin_min: float

    @classmethod
    def from_settings(cls) -> "CostModel":
        return cls(
            fuel_consumption_l_per_km=settings.fuel_consumption_l_per_km,
            truck_speed_kmh=settings.truck_speed_kmh,
            time_per_bin_min=settings.time_per_bin_min,
        )


DEFAULT_COST_MODEL = CostModel.from_settings()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def route_distance_km(path: Sequence[BinRecord], depot: GeoPoint) -> float:
    """Length of depot -> each bin in order -> depot."""
    if not path:
        return 0.0

    total = 0.0
    current: GeoPoint | BinRecord = depot
    for bin_ in path:
        total += distance(current, bin_)
        current = bin_

    # Return to depot
    total += distance(current, depot)
    return total


def evaluate_route(
    path: Sequence[BinRecord],
    depot: GeoPoint,
    cost_model: Optional[CostModel] = None,
) -> RouteMetrics:
    if not path:
        return EMPTY_METRICS

    model = cost_model or DEFAULT_COST_MODEL
    total_distance = route_distance_km(path, depot)
    fuel = total_distance * model.fuel_consumption_l_per_km
    drive_time = (total_distance / model.truck_speed_kmh) * 60
    collection_time = len(path) * model.time_per_bin_min

    return RouteMetrics(
        distance_km=round(total_distance, 2),
        fuel_liters=round(fuel, 2),
        time_min=_round_half_up(drive_time + collection_time),
        bins_collected=len(path),
    )


def compute_gain(fixed_value: float, optimized_value: float) -> float:
    """Percentage saved by the optimized route relative to the fixed one."""
    if fixed_value == 0:
        return 0.0
    return ((fixed_value - optimized_value) / fixed_value) * 100
