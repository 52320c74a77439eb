"""Real driving distance between two customer addresses."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Protocol, Sequence

from ...config import settings
from ...data import reference_repository
from ..geocoding.client import GeocodingClient
from ..routing.ors_client import RouteClient

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    def get_coordinates(self, address: str) -> list[str]: ...


class Router(Protocol):
    def get_route_distance(self, origin: Sequence[str], destination: Sequence[str]) -> float: ...


class DistanceResolver:
    """Turns prefecture ids plus street addresses into a driving distance.

    Prefecture names are looked up and prepended to the raw addresses, both
    full addresses are geocoded, and a single route request measures the
    distance between the resulting coordinates.
    """

    def __init__(
        self,
        geocoder: Geocoder | None = None,
        router: Router | None = None,
        prefecture_name_lookup: Callable[[str], str] | None = None,
        parallel_geocoding: bool | None = None,
    ) -> None:
        self.geocoder = geocoder or GeocodingClient()
        self.router = router or RouteClient()
        self.prefecture_name_lookup = prefecture_name_lookup or reference_repository.get_prefecture_name
        self.parallel_geocoding = (
            settings.parallel_geocoding if parallel_geocoding is None else parallel_geocoding
        )

    def full_address(self, prefecture_id: str, address: str) -> str:
        return f"{self.prefecture_name_lookup(prefecture_id)}{address}"

    def _geocode_pair(self, old_address: str, new_address: str) -> tuple[list[str], list[str]]:
        if not self.parallel_geocoding:
            return self.geocoder.get_coordinates(old_address), self.geocoder.get_coordinates(new_address)

        with ThreadPoolExecutor(max_workers=2) as executor:
            old_future = executor.submit(self.geocoder.get_coordinates, old_address)
            new_future = executor.submit(self.geocoder.get_coordinates, new_address)
            # result() re-raises the geocoder's exception in this thread
            return old_future.result(), new_future.result()

    def resolve(
        self,
        old_prefecture_id: str,
        new_prefecture_id: str,
        old_address: str,
        new_address: str,
    ) -> float:
        """Driving distance in meters between the old and new addresses."""
        full_old_address = self.full_address(old_prefecture_id, old_address)
        full_new_address = self.full_address(new_prefecture_id, new_address)
        logger.info(f"Resolving distance from '{full_old_address}' to '{full_new_address}'")

        old_coordinate, new_coordinate = self._geocode_pair(full_old_address, full_new_address)
        distance = self.router.get_route_distance(old_coordinate, new_coordinate)

        logger.info(f"Driving distance {old_prefecture_id} -> {new_prefecture_id}: {distance:.1f} m")
        return distance

    def resolve_km(
        self,
        old_prefecture_id: str,
        new_prefecture_id: str,
        old_address: str,
        new_address: str,
    ) -> float:
        return self.resolve(old_prefecture_id, new_prefecture_id, old_address, new_address) / 1000.0
