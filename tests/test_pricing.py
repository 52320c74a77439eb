from datetime import date

import pytest

from src.moving_estimate.exceptions import PricingLookupError
from src.moving_estimate.models.domain import CustomerPackage
from src.moving_estimate.services.pricing import calculator


@pytest.mark.parametrize(
    "month, expected",
    [(1, 1.0), (2, 1.0), (3, 1.5), (4, 1.5), (5, 1.0), (8, 1.0), (9, 1.2), (10, 1.0), (12, 1.0)],
)
def test_season_factor(month: int, expected: float) -> None:
    assert calculator.season_factor(date(2025, month, 15)) == expected


def test_distance_price_ignores_partial_kilometres() -> None:
    assert calculator.distance_price(12.99, price_per_km=100) == 1200
    assert calculator.distance_price(0.0, price_per_km=100) == 0


def test_distance_price_uses_configured_rate(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(calculator.settings, "price_per_km", 80)

    assert calculator.distance_price(10.0) == 800


def test_distance_price_rejects_negative_distance() -> None:
    with pytest.raises(ValueError):
        calculator.distance_price(-1.0)


def test_final_price_applies_factor_before_options() -> None:
    assert calculator.final_price(40000, 30000, 1.5, [3000, 5000]) == 113000
    assert calculator.final_price(1001, 0, 1.2) == 1201


def test_total_boxes(fake_db) -> None:
    packages = [
        CustomerPackage(package_id=1, package_number=10),
        CustomerPackage(package_id=2, package_number=1),
        CustomerPackage(package_id=4, package_number=0),
    ]

    assert calculator.total_boxes(packages) == 25


def test_component_lookups(fake_db) -> None:
    assert calculator.boxes_for(3) == 5
    assert calculator.truck_price(25) == 30000
    assert calculator.optional_service_price(1) == 3000

    with pytest.raises(PricingLookupError):
        calculator.truck_price(1000)
