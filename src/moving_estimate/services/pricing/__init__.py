"""Pricing rules for moving estimates."""

from .calculator import (
    boxes_for,
    distance_price,
    final_price,
    optional_service_price,
    season_factor,
    total_boxes,
    truck_price,
)

__all__ = [
    "boxes_for",
    "distance_price",
    "final_price",
    "optional_service_price",
    "season_factor",
    "total_boxes",
    "truck_price",
]
