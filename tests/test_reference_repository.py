import pytest

from src.moving_estimate.data import reference_repository
from src.moving_estimate.exceptions import DataIntegrityError, PricingLookupError


def test_distance_lookup_is_symmetric(fake_db) -> None:
    forward = reference_repository.get_distance("13", "27")
    backward = reference_repository.get_distance("27", "13")

    assert forward == backward == 403.0


def test_distance_lookup_defaults_to_zero_when_missing(fake_db) -> None:
    assert reference_repository.get_distance("01", "27") == 0
    assert reference_repository.find_distance("01", "27") is None


def test_find_distance_keeps_requested_direction(fake_db) -> None:
    record = reference_repository.find_distance("27", "13")

    assert record is not None
    assert record.prefecture_id_from == "27"
    assert record.prefecture_id_to == "13"


def test_prefecture_name_lookup(fake_db) -> None:
    assert reference_repository.get_prefecture_name("13") == "東京都"


def test_prefecture_name_requires_exactly_one_row(fake_db) -> None:
    with pytest.raises(DataIntegrityError):
        reference_repository.get_prefecture_name("99")

    fake_db.tables["prefecture"].append({"prefecture_id": "13", "prefecture_name": "東京"})
    with pytest.raises(DataIntegrityError):
        reference_repository.get_prefecture_name("13")


def test_prefecture_name_lookup_does_not_interpolate_identifier(fake_db) -> None:
    with pytest.raises(DataIntegrityError):
        reference_repository.get_prefecture_name("13 OR 1=1")


def test_get_all_prefectures_sorted(fake_db) -> None:
    prefectures = reference_repository.get_all_prefectures()

    assert [p.prefecture_id for p in prefectures] == ["01", "13", "27"]
    assert prefectures[1].prefecture_name == "東京都"


def test_truck_price_picks_cheapest_covering_tier(fake_db) -> None:
    assert reference_repository.get_price_per_truck(10) == 30000
    assert reference_repository.get_price_per_truck(80) == 30000
    assert reference_repository.get_price_per_truck(81) == 45000


def test_truck_price_is_monotonic(fake_db) -> None:
    prices = [reference_repository.get_price_per_truck(boxes) for boxes in range(0, 201)]

    assert all(earlier <= later for earlier, later in zip(prices, prices[1:]))


def test_truck_price_without_covering_tier_fails(fake_db) -> None:
    with pytest.raises(PricingLookupError):
        reference_repository.get_price_per_truck(201)


def test_box_and_option_lookups(fake_db) -> None:
    assert reference_repository.get_box_per_package(2) == 15
    assert reference_repository.get_price_per_optional_service(2) == 5000

    with pytest.raises(PricingLookupError):
        reference_repository.get_box_per_package(42)
    with pytest.raises(PricingLookupError):
        reference_repository.get_price_per_optional_service(42)
