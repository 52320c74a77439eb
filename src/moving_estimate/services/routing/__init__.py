"""Driving-distance routing."""

from .ors_client import RouteClient, parse_route_distance

__all__ = ["RouteClient", "parse_route_distance"]
