"""Price components of a moving estimate."""

from __future__ import annotations

import math
from datetime import date
from typing import Iterable

from ...config import settings
from ...data import reference_repository
from ...models.domain import CustomerPackage

# month -> multiplier; the busy season around the fiscal-year turnover and September transfers
SEASON_FACTORS = {
    3: 1.5,
    4: 1.5,
    9: 1.2,
}
DEFAULT_SEASON_FACTOR = 1.0


def season_factor(planned_date: date) -> float:
    """Multiplier applied to the base price for the planned moving date."""
    return SEASON_FACTORS.get(planned_date.month, DEFAULT_SEASON_FACTOR)


def boxes_for(package_id: int) -> int:
    return reference_repository.get_box_per_package(package_id)


def total_boxes(packages: Iterable[CustomerPackage]) -> int:
    """Boxes needed to carry every package line."""
    return sum(package.package_number * boxes_for(package.package_id) for package in packages if package.package_number > 0)


def truck_price(box_count: int) -> int:
    return reference_repository.get_price_per_truck(box_count)


def optional_service_price(service_id: int) -> int:
    return reference_repository.get_price_per_optional_service(service_id)


def distance_price(distance_km: float, price_per_km: int | None = None) -> int:
    """Charge for the driving distance; partial kilometres are not billed."""
    if distance_km < 0:
        raise ValueError(f"Distance must be non-negative, got {distance_km}")
    rate = settings.price_per_km if price_per_km is None else price_per_km
    return math.floor(distance_km) * rate


def final_price(
    price_for_distance: int,
    price_for_truck: int,
    factor: float,
    option_prices: Iterable[int] = (),
) -> int:
    """Combine the components: seasonal factor on transport, option services added on top."""
    return math.floor((price_for_distance + price_for_truck) * factor) + sum(option_prices)
