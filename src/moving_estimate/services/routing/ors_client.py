"""HTTP client for the openrouteservice directions API."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx

from ...config import settings
from ...exceptions import RoutingError, ServiceNotConfiguredError

logger = logging.getLogger(__name__)


def _lon_lat(coordinate: Sequence[str]) -> str:
    if len(coordinate) != 2:
        raise RoutingError(f"Expected a (longitude, latitude) pair, got {list(coordinate)!r}")
    lon, lat = coordinate
    return f"{lon},{lat}"


def parse_route_distance(data: Any) -> float:
    """Return ``features[0].properties.summary.distance`` from a directions response."""
    if not isinstance(data, dict):
        raise RoutingError("Routing response is not a JSON object")
    features = data.get("features")
    if not features:
        raise RoutingError("Routing response contains no route features")
    try:
        distance = features[0]["properties"]["summary"]["distance"]
    except (KeyError, IndexError, TypeError) as exc:
        raise RoutingError(f"Routing response is missing the route summary: {exc}") from exc
    try:
        value = float(distance)
    except (TypeError, ValueError) as exc:
        raise RoutingError(f"Route distance is not numeric: {distance!r}") from exc
    if value < 0:
        raise RoutingError(f"Route distance is negative: {value}")
    return value


class RouteClient:
    def __init__(
        self,
        base_url: str | None = None,
        profile: str | None = None,
        api_key: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or settings.routing_base_url).rstrip("/")
        self.profile = profile or settings.routing_profile
        self.api_key = api_key or settings.routing_api_key
        if not self.api_key:
            raise ServiceNotConfiguredError(
                "Routing API key is not configured. Set the MOVE_ROUTING_API_KEY environment variable."
            )
        self.user_agent = user_agent or settings.http_user_agent
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout)

    def get_route_distance(self, origin: Sequence[str], destination: Sequence[str]) -> float:
        """Driving distance in meters between two ``(lon, lat)`` coordinates."""
        params = {
            "api_key": self.api_key,
            "start": _lon_lat(origin),
            "end": _lon_lat(destination),
        }
        headers = {"Accept": "application/json, application/geo+json", "User-Agent": self.user_agent}
        url = f"{self.base_url}/v2/directions/{self.profile}"

        client = self._get_client()
        try:
            response = client.get(url, params=params, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            raise RoutingError(f"Routing service returned HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise RoutingError(f"Failed to reach routing service at {self.base_url}: {exc}") from exc
        except ValueError as exc:
            raise RoutingError(f"Routing response is not valid JSON: {exc}") from exc
        finally:
            client.close()

        distance = parse_route_distance(data)
        logger.debug(f"Route {params['start']} -> {params['end']}: {distance:.1f} m")
        return distance
