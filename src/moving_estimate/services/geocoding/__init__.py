"""Address geocoding."""

from .client import GeocodingClient, parse_coordinates

__all__ = ["GeocodingClient", "parse_coordinates"]
