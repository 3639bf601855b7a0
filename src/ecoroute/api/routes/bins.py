"""Bin collection endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Body, File, HTTPException, UploadFile, status

from ...data.bins_repository import BinDataError
from ...schemas.bins import BinCollectionResponse, BinRecordModel
from ...services.dashboard.state import get_state

router = APIRouter(prefix="/bins", tags=["bins"])


def _collection_response() -> BinCollectionResponse:
    bins = get_state().bins
    return BinCollectionResponse(total=len(bins), items=[BinRecordModel.from_domain(bin_) for bin_ in bins])


@router.get("", response_model=BinCollectionResponse, status_code=status.HTTP_200_OK)
def list_bins() -> BinCollectionResponse:
    return _collection_response()


@router.put("", response_model=BinCollectionResponse, status_code=status.HTTP_200_OK)
def replace_bins(payload: Any = Body(...)) -> BinCollectionResponse:
    """Replace the whole collection with a JSON array of bins."""
    try:
        get_state().load_records(payload)
    except BinDataError as exc:
        logging.warning(f"Rejected bin payload: {exc}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _collection_response()


@router.post("/upload", response_model=BinCollectionResponse, status_code=status.HTTP_201_CREATED)
async def upload_bins(file: UploadFile = File(...)) -> BinCollectionResponse:
    """Upload a ``.json`` bin dataset; the current collection is kept if it is invalid."""
    if not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Filename is required.")

    suffix = Path(file.filename).suffix.lower()
    if suffix != ".json":
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail="Only .json files are supported.")

    contents = await file.read()
    try:
        get_state().load_json(contents)
    except BinDataError as exc:
        logging.warning(f"Rejected bin upload '{file.filename}': {exc}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _collection_response()


@router.post("/regenerate", response_model=BinCollectionResponse, status_code=status.HTTP_200_OK)
def regenerate_bins() -> BinCollectionResponse:
    """Assign fresh random fill levels to every bin."""
    get_state().refresh_levels()
    return _collection_response()


@router.post("/reset", response_model=BinCollectionResponse, status_code=status.HTTP_200_OK)
def reset_bins() -> BinCollectionResponse:
    """Replace the collection with a new mock dataset around the depot."""
    get_state().reset()
    return _collection_response()
