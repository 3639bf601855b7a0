"""Bin collection API schemas."""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..models.domain import BinRecord


class BinRecordModel(BaseModel):
    """Wire shape of a bin: ``{id, lat, lng, level, lastUpdate}``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    bin_id: str = Field(..., min_length=1, validation_alias=AliasChoices("id", "bin_id"), serialization_alias="id")
    latitude: float = Field(..., ge=-90, le=90, validation_alias=AliasChoices("lat", "latitude"), serialization_alias="lat")
    longitude: float = Field(
        ..., ge=-180, le=180, validation_alias=AliasChoices("lng", "longitude"), serialization_alias="lng"
    )
    level: int = Field(..., ge=0, le=100, description="Fill level percentage.")
    last_update: str = Field(
        ..., validation_alias=AliasChoices("lastUpdate", "last_update"), serialization_alias="lastUpdate"
    )

    @classmethod
    def from_domain(cls, record: BinRecord) -> "BinRecordModel":
        # domain records are trusted; coordinates outside the upload ranges still serialize
        return cls.model_construct(
            bin_id=record.bin_id,
            latitude=record.latitude,
            longitude=record.longitude,
            level=record.level,
            last_update=record.last_update,
        )

    def to_domain(self) -> BinRecord:
        return BinRecord(
            bin_id=self.bin_id,
            latitude=self.latitude,
            longitude=self.longitude,
            level=self.level,
            last_update=self.last_update,
        )


class BinCollectionResponse(BaseModel):
    total: int
    items: List[BinRecordModel]
