"""HTTP client for the XML geocoding service."""

from __future__ import annotations

import logging
from xml.etree.ElementTree import Element

import httpx
from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from ...config import settings
from ...exceptions import GeocodingError

logger = logging.getLogger(__name__)


def _child_text(parent: Element, tag: str) -> str | None:
    element = next(parent.iter(tag), None)
    if element is None:
        return None
    text = "".join(element.itertext()).strip()
    return text or None


def parse_coordinates(xml: str | bytes) -> list[str]:
    """Extract ``[lon, lat]`` from the first ``<coordinate>`` element of a geocoding response."""
    try:
        root = ET.fromstring(xml)
    except (ET.ParseError, DefusedXmlException) as exc:
        raise GeocodingError(f"Malformed geocoding response: {exc}") from exc

    coordinate = next(root.iter("coordinate"), None)
    if coordinate is None:
        error = _child_text(root, "error")
        detail = f" ({error})" if error else ""
        raise GeocodingError(f"Geocoding response has no <coordinate> element{detail}")

    lat = _child_text(coordinate, "lat")
    lon = _child_text(coordinate, "lon")
    if lat is None or lon is None:
        raise GeocodingError("Geocoding response is missing <lat> or <lon>")
    return [lon, lat]


class GeocodingClient:
    def __init__(
        self,
        url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = url or settings.geocoding_url
        self.user_agent = user_agent or settings.http_user_agent
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds

    def _get_client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout)

    def get_coordinates(self, address: str) -> list[str]:
        """Resolve a free-text address to ``[longitude, latitude]`` strings."""
        headers = {"Accept": "application/xml", "User-Agent": self.user_agent}
        client = self._get_client()
        try:
            response = client.get(self.url, params={"q": address}, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise GeocodingError(
                f"Geocoding service returned HTTP {exc.response.status_code} for '{address}'"
            ) from exc
        except httpx.HTTPError as exc:
            raise GeocodingError(f"Failed to reach geocoding service at {self.url}: {exc}") from exc
        finally:
            client.close()

        coordinates = parse_coordinates(response.content)
        logger.debug(f"Geocoded '{address}' to lon={coordinates[0]}, lat={coordinates[1]}")
        return coordinates
