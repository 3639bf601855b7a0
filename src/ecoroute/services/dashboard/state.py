"""In-memory dashboard state with recompute-on-change notifications.

The state owns the bin collection, the active route mode and the depot. Every
change replaces the collection wholesale and recomputes both route variants,
then hands the fresh :class:`RouteComparison` to subscribers.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable, Iterable, Optional

from ...config import settings
from ...data.bins_repository import (
    default_depot,
    generate_mock_bins,
    parse_bins_json,
    regenerate_levels,
    validate_bins,
)
from ...models.domain import BinRecord, GeoPoint, RouteMode, WorkerReport
from ..routing.metrics import CostModel
from ..routing.models import RouteComparison
from ..routing.service import compare_routes

logger = logging.getLogger(__name__)

Listener = Callable[[RouteComparison], None]
Transform = Callable[[tuple[BinRecord, ...]], tuple[BinRecord, ...]]


class DashboardState:
    def __init__(
        self,
        bins: Optional[Iterable[BinRecord]] = None,
        *,
        mode: RouteMode = RouteMode.OPTIMIZED,
        depot: Optional[GeoPoint] = None,
        cost_model: Optional[CostModel] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._rng = rng or random.Random(settings.mock_seed)
        self._depot = depot or default_depot()
        self._cost_model = cost_model or CostModel.from_settings()
        self._mode = RouteMode(mode)
        self._bins: tuple[BinRecord, ...] = (
            tuple(bins) if bins is not None else generate_mock_bins(center=self._depot, rng=self._rng)
        )
        self._reports: list[WorkerReport] = []
        self._listeners: list[Listener] = []
        self._comparison = self._recompute()

    @property
    def bins(self) -> tuple[BinRecord, ...]:
        return self._bins

    @property
    def mode(self) -> RouteMode:
        return self._mode

    @property
    def depot(self) -> GeoPoint:
        return self._depot

    @property
    def comparison(self) -> RouteComparison:
        return self._comparison

    @property
    def reports(self) -> list[WorkerReport]:
        return list(self._reports)

    def subscribe(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _recompute(self) -> RouteComparison:
        return compare_routes(self._bins, self._mode, self._depot, self._cost_model)

    def _apply(
        self,
        *,
        bins: Optional[tuple[BinRecord, ...]] = None,
        transform: Optional[Transform] = None,
        mode: Optional[RouteMode] = None,
    ) -> RouteComparison:
        # transform reads the current collection, so it must run under the lock
        with self._lock:
            if bins is not None:
                self._bins = bins
            if transform is not None:
                self._bins = transform(self._bins)
            if mode is not None:
                self._mode = mode
            self._comparison = self._recompute()
            comparison = self._comparison
            listeners = list(self._listeners)

        logger.info(
            "Dashboard recomputed: mode=%s bins=%d fixed=%.2fkm optimized=%.2fkm",
            comparison.mode.value,
            len(comparison.fixed_path),
            comparison.fixed_metrics.distance_km,
            comparison.optimized_metrics.distance_km,
        )
        for listener in listeners:
            listener(comparison)
        return comparison

    def replace_bins(self, bins: Iterable[BinRecord]) -> RouteComparison:
        return self._apply(bins=tuple(bins))

    def load_records(self, items: object) -> RouteComparison:
        """Validate decoded JSON items and replace the collection; no change on failure."""
        return self._apply(bins=validate_bins(items))

    def load_json(self, payload: str | bytes) -> RouteComparison:
        """Replace the collection from a JSON document; no change on failure."""
        return self._apply(bins=parse_bins_json(payload))

    def refresh_levels(self, rng: Optional[random.Random] = None) -> RouteComparison:
        source = rng or self._rng
        return self._apply(transform=lambda current: regenerate_levels(current, rng=source))

    def reset(self) -> RouteComparison:
        return self._apply(transform=lambda _current: generate_mock_bins(center=self._depot, rng=self._rng))

    def set_mode(self, mode: RouteMode) -> RouteComparison:
        return self._apply(mode=RouteMode(mode))

    def add_report(self, report: WorkerReport) -> WorkerReport:
        with self._lock:
            if not any(bin_.bin_id == report.bin_id for bin_ in self._bins):
                logger.warning("Report for unknown bin %s rejected", report.bin_id)
                raise KeyError(report.bin_id)
            self._reports.append(report)
        logger.info("Bin %s reported as %s", report.bin_id, report.status)
        return report


_state: Optional[DashboardState] = None
_state_lock = threading.Lock()


def get_state() -> DashboardState:
    """Return the process-wide dashboard state, creating it on first use."""
    global _state
    with _state_lock:
        if _state is None:
            _state = DashboardState()
        return _state


def reset_state(state: Optional[DashboardState] = None) -> DashboardState:
    """Swap the process-wide state (used at startup and in tests)."""
    global _state
    with _state_lock:
        _state = state or DashboardState()
        return _state
