"""Prefecture reference endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from ...data import reference_repository
from ...exceptions import EstimateError
from ...schemas.estimates import PrefectureDistanceModel, PrefectureModel
from .estimates import to_http_error

router = APIRouter(tags=["prefectures"])

logger = logging.getLogger(__name__)


@router.get("/prefectures", response_model=List[PrefectureModel])
def list_prefectures() -> List[PrefectureModel]:
    try:
        prefectures = reference_repository.get_all_prefectures()
    except EstimateError as exc:
        logger.error(f"Prefecture lookup failed: {exc}")
        raise to_http_error(exc) from exc
    return [PrefectureModel(prefecture_id=p.prefecture_id, prefecture_name=p.prefecture_name) for p in prefectures]


@router.get("/distances/{prefecture_id_from}/{prefecture_id_to}", response_model=PrefectureDistanceModel)
def prefecture_distance(prefecture_id_from: str, prefecture_id_to: str) -> PrefectureDistanceModel:
    """Straight-line distance between two prefectures; 0 when no record exists."""
    try:
        distance = reference_repository.get_distance(prefecture_id_from, prefecture_id_to)
    except EstimateError as exc:
        logger.error(f"Distance lookup failed: {exc}")
        raise to_http_error(exc) from exc
    except Exception as exc:
        logger.exception(f"Error looking up distance: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to look up distance: {str(exc)}",
        ) from exc
    return PrefectureDistanceModel(
        prefecture_id_from=prefecture_id_from,
        prefecture_id_to=prefecture_id_to,
        distance_km=distance,
    )
