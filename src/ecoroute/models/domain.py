"""Domain models for bins, depot locations and route results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class BinRecord:
    """A monitored waste bin with its latest fill reading."""

    bin_id: str
    latitude: float
    longitude: float
    level: int
    last_update: str

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)


class RouteMode(str, Enum):
    FIXED = "FIXED"
    OPTIMIZED = "OPTIMIZED"


@dataclass(frozen=True, slots=True)
class RouteMetrics:
    distance_km: float
    fuel_liters: float
    time_min: int
    bins_collected: int


ReportStatus = Literal["CLEARED", "BLOCKED", "FULL"]


@dataclass(frozen=True, slots=True)
class WorkerReport:
    """Field report filed by a collection driver for a single bin."""

    bin_id: str
    status: ReportStatus
    timestamp: str
    image_url: Optional[str] = None
