"""Driver report schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..models.domain import ReportStatus, WorkerReport


class WorkerReportRequest(BaseModel):
    bin_id: str = Field(..., min_length=1)
    status: ReportStatus
    image_url: Optional[str] = Field(default=None, description="Verification photo captured by the driver.")


class WorkerReportModel(BaseModel):
    bin_id: str
    status: ReportStatus
    timestamp: str
    image_url: Optional[str] = None

    @classmethod
    def from_domain(cls, report: WorkerReport) -> "WorkerReportModel":
        return cls(
            bin_id=report.bin_id,
            status=report.status,
            timestamp=report.timestamp,
            image_url=report.image_url,
        )
