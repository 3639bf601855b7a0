"""Serializers for the fixed-vs-optimized comparison table."""

from __future__ import annotations

import csv
import io
from typing import List

from ...config import settings
from ..routing.models import RouteComparison

TABLE_FIELDS = ["metric", "fixed", "optimized", "gain"]


def _number(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def _gain(value: float) -> str:
    return f"{value:.1f}%"


def comparison_table(comparison: RouteComparison) -> List[dict]:
    fixed = comparison.fixed_metrics
    optimized = comparison.optimized_metrics
    gains = comparison.gains
    return [
        {
            "metric": "Distance",
            "fixed": f"{_number(fixed.distance_km)} km",
            "optimized": f"{_number(optimized.distance_km)} km",
            "gain": _gain(gains.distance_pct),
        },
        {
            "metric": "Fuel",
            "fixed": f"{_number(fixed.fuel_liters)} L",
            "optimized": f"{_number(optimized.fuel_liters)} L",
            "gain": _gain(gains.fuel_pct),
        },
        {
            "metric": "Time",
            "fixed": f"{fixed.time_min} m",
            "optimized": f"{optimized.time_min} m",
            "gain": _gain(gains.time_pct),
        },
        {
            "metric": "Bins Picked",
            "fixed": str(fixed.bins_collected),
            "optimized": str(optimized.bins_collected),
            "gain": "-",
        },
    ]


def threshold_note() -> str:
    return (
        f"Optimized route ignores bins with <{settings.optimize_fill_threshold}% fill level "
        "to reduce unnecessary pickups and fuel waste."
    )


def comparison_to_csv(comparison: RouteComparison) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=TABLE_FIELDS)
    writer.writeheader()
    for row in comparison_table(comparison):
        writer.writerow(row)
    return buffer.getvalue()
