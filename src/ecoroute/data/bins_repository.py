"""Data access helpers for mock and uploaded bin collections."""

from __future__ import annotations

import json
import random
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from pydantic import TypeAdapter, ValidationError

from ..config import settings
from ..models.domain import BinRecord, GeoPoint
from ..schemas.bins import BinRecordModel

_BIN_LIST_ADAPTER = TypeAdapter(list[BinRecordModel])
_RNG = random.Random(settings.mock_seed)


class BinDataError(ValueError):
    """Raised when externally supplied bin data cannot be used."""


def default_depot() -> GeoPoint:
    return GeoPoint(settings.depot_latitude, settings.depot_longitude)


def _timestamp(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def _make_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else _RNG


def generate_mock_bins(
    count: Optional[int] = None,
    center: Optional[GeoPoint] = None,
    spread_deg: Optional[float] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> tuple[BinRecord, ...]:
    """Scatter synthetic bins in a small square around the depot."""

    count = settings.mock_bin_count if count is None else count
    center = center or default_depot()
    spread = settings.mock_spread_deg if spread_deg is None else spread_deg
    rng = _make_rng(rng)
    stamp = _timestamp(now)

    bins: list[BinRecord] = []
    for index in range(1, count + 1):
        bins.append(
            BinRecord(
                bin_id=f"BIN-{index:03d}",
                latitude=center.latitude + (rng.random() - 0.5) * spread,
                longitude=center.longitude + (rng.random() - 0.5) * spread,
                level=rng.randrange(100),
                last_update=stamp,
            )
        )
    return tuple(bins)


def regenerate_levels(
    bins: Iterable[BinRecord],
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> tuple[BinRecord, ...]:
    """Return a new collection with fresh random fill levels."""

    rng = _make_rng(rng)
    stamp = _timestamp(now)
    return tuple(replace(bin_, level=rng.randrange(100), last_update=stamp) for bin_ in bins)


def validate_bins(items: Any) -> tuple[BinRecord, ...]:
    """Validate already-decoded bin data and convert it to domain records."""

    if not isinstance(items, list):
        raise BinDataError("Bin data must be a JSON array of bin objects.")
    try:
        models = _BIN_LIST_ADAPTER.validate_python(items)
    except ValidationError as exc:
        raise BinDataError(f"Invalid bin record: {exc.errors()[0]['msg']}") from exc

    seen: set[str] = set()
    duplicates: list[str] = []
    for model in models:
        if model.bin_id in seen:
            duplicates.append(model.bin_id)
        seen.add(model.bin_id)
    if duplicates:
        raise BinDataError(f"Duplicate bin ids: {', '.join(sorted(set(duplicates)))}")

    return tuple(model.to_domain() for model in models)


def parse_bins_json(payload: str | bytes) -> tuple[BinRecord, ...]:
    """Decode an uploaded JSON document into bin records."""

    try:
        decoded = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BinDataError("Invalid JSON file format") from exc
    return validate_bins(decoded)
