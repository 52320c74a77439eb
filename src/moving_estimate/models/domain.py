"""Domain models for reference data and customer orders."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(slots=True, frozen=True)
class Prefecture:
    prefecture_id: str
    prefecture_name: str


@dataclass(slots=True, frozen=True)
class PrefectureDistance:
    """Straight-line distance between two prefectures; valid in both directions."""

    prefecture_id_from: str
    prefecture_id_to: str
    distance: float


@dataclass(slots=True)
class CustomerPackage:
    package_id: int
    package_number: int
    customer_id: Optional[int] = None


@dataclass(slots=True)
class CustomerOptionService:
    service_id: int
    customer_id: Optional[int] = None


@dataclass(slots=True)
class Customer:
    """A customer submitting a move; receives its identifier when inserted."""

    old_prefecture_id: str
    new_prefecture_id: str
    customer_name: str
    tel: str
    email: str
    old_address: str
    new_address: str
    customer_id: Optional[int] = None


@dataclass(slots=True)
class Order:
    customer: Customer
    moving_date: date
    packages: List[CustomerPackage] = field(default_factory=list)
    option_service_ids: List[int] = field(default_factory=list)
