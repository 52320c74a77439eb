"""Estimate endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...exceptions import (
    DataIntegrityError,
    EstimateError,
    GeocodingError,
    PricingLookupError,
    RoutingError,
    ServiceNotConfiguredError,
)
from ...schemas.estimates import EstimateRequest, OrderRequest, OrderResponse, PriceBreakdown
from ...services.estimate import service as estimate_service

router = APIRouter(prefix="/estimates", tags=["estimates"])

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[EstimateError], int]] = [
    (GeocodingError, status.HTTP_502_BAD_GATEWAY),
    (RoutingError, status.HTTP_502_BAD_GATEWAY),
    (PricingLookupError, 422),
    (ServiceNotConfiguredError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (DataIntegrityError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def to_http_error(exc: EstimateError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.post("/price", response_model=PriceBreakdown, status_code=status.HTTP_200_OK)
def price(payload: EstimateRequest) -> PriceBreakdown:
    try:
        return estimate_service.calculate_price(payload)
    except EstimateError as exc:
        logger.error(f"Estimate failed: {exc}")
        raise to_http_error(exc) from exc


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def submit(payload: OrderRequest) -> OrderResponse:
    try:
        return estimate_service.submit_order(payload)
    except EstimateError as exc:
        logger.error(f"Order submission failed: {exc}")
        raise to_http_error(exc) from exc
