"""Driver field report endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, HTTPException, status

from ...models.domain import WorkerReport
from ...schemas.reports import WorkerReportModel, WorkerReportRequest
from ...services.dashboard.state import get_state

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=List[WorkerReportModel], status_code=status.HTTP_200_OK)
def list_reports() -> List[WorkerReportModel]:
    return [WorkerReportModel.from_domain(report) for report in get_state().reports]


@router.post("", response_model=WorkerReportModel, status_code=status.HTTP_201_CREATED)
def submit_report(payload: WorkerReportRequest) -> WorkerReportModel:
    report = WorkerReport(
        bin_id=payload.bin_id,
        status=payload.status,
        timestamp=datetime.now(timezone.utc).isoformat(),
        image_url=payload.image_url,
    )
    try:
        get_state().add_report(report)
    except KeyError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Bin {payload.bin_id} not found",
        ) from exc
    return WorkerReportModel.from_domain(report)
