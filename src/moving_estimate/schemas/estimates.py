"""Estimate request/response schemas."""

from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel, Field, field_validator


class PackageLineModel(BaseModel):
    package_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=0)


class EstimateRequest(BaseModel):
    old_prefecture_id: str = Field(..., min_length=1, description="Prefecture code of the current home (e.g. '13').")
    new_prefecture_id: str = Field(..., min_length=1, description="Prefecture code of the new home.")
    old_address: str = Field(..., min_length=1, description="Address below the prefecture level.")
    new_address: str = Field(..., min_length=1)
    moving_date: date
    packages: List[PackageLineModel] = Field(default_factory=list)
    option_service_ids: List[int] = Field(default_factory=list)

    @field_validator("option_service_ids")
    @classmethod
    def _unique_option_services(cls, value: List[int]) -> List[int]:
        """Each option service is charged and stored once, in first-seen order."""
        return list(dict.fromkeys(value))


class OrderRequest(EstimateRequest):
    customer_name: str = Field(..., min_length=1)
    tel: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)


class PriceBreakdown(BaseModel):
    distance_km: float
    distance_price: int
    box_count: int
    truck_price: int
    season_factor: float
    option_service_price: int
    total_price: int


class OrderResponse(BaseModel):
    customer_id: int
    estimate: PriceBreakdown


class PrefectureModel(BaseModel):
    prefecture_id: str
    prefecture_name: str


class PrefectureDistanceModel(BaseModel):
    prefecture_id_from: str
    prefecture_id_to: str
    distance_km: float
