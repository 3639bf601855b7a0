"""Collection route planning for fixed and fill-level optimized runs."""

from __future__ import annotations

from typing import Optional, Sequence

from ...config import settings
from ...models.domain import BinRecord, GeoPoint, RouteMode
from ..geospatial import distance


def select_candidates(bins: Sequence[BinRecord], threshold: int) -> list[BinRecord]:
    """Bins full enough to be worth a pickup (threshold inclusive)."""
    return [bin_ for bin_ in bins if bin_.level >= threshold]


def nearest_neighbor_order(candidates: Sequence[BinRecord], start: GeoPoint) -> list[BinRecord]:
    """Order bins greedily by always driving to the closest remaining one.

    Candidates are scanned in their current order and the first strict minimum
    wins, so equidistant bins keep their relative input order.
    """
    remaining = list(candidates)
    path: list[BinRecord] = []
    current = start

    while remaining:
        nearest_index = 0
        min_distance = distance(current, remaining[0])
        for index in range(1, len(remaining)):
            candidate_distance = distance(current, remaining[index])
            if candidate_distance < min_distance:
                min_distance = candidate_distance
                nearest_index = index

        next_bin = remaining.pop(nearest_index)
        path.append(next_bin)
        current = next_bin.position

    return path


def plan_route(
    bins: Sequence[BinRecord],
    mode: RouteMode,
    depot: GeoPoint,
    *,
    threshold: Optional[int] = None,
) -> list[BinRecord]:
    """Return the ordered visitation sequence for ``mode`` starting at ``depot``.

    Fixed routes visit every bin in the order given. Optimized routes skip bins
    below the fill threshold and order the rest by nearest neighbour.
    """
    if RouteMode(mode) is RouteMode.FIXED:
        return list(bins)

    limit = settings.optimize_fill_threshold if threshold is None else threshold
    return nearest_neighbor_order(select_candidates(bins, limit), depot)
