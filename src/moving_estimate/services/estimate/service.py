"""Estimate orchestration: distance, boxes, truck, options and season."""

from __future__ import annotations

import logging

from ...models.domain import Customer, CustomerPackage, Order
from ...persistence.orders import register_order
from ...schemas.estimates import EstimateRequest, OrderRequest, OrderResponse, PriceBreakdown
from ..distance.resolver import DistanceResolver
from ..pricing import calculator

logger = logging.getLogger(__name__)


def _packages(payload: EstimateRequest) -> list[CustomerPackage]:
    return [
        CustomerPackage(package_id=line.package_id, package_number=line.quantity)
        for line in payload.packages
    ]


def calculate_price(payload: EstimateRequest) -> PriceBreakdown:
    """Compute the full price breakdown for a move without persisting anything."""
    resolver = DistanceResolver()
    distance_km = resolver.resolve_km(
        payload.old_prefecture_id,
        payload.new_prefecture_id,
        payload.old_address,
        payload.new_address,
    )

    price_for_distance = calculator.distance_price(distance_km)
    box_count = calculator.total_boxes(_packages(payload))
    price_for_truck = calculator.truck_price(box_count)
    factor = calculator.season_factor(payload.moving_date)
    option_prices = [calculator.optional_service_price(service_id) for service_id in payload.option_service_ids]

    total = calculator.final_price(price_for_distance, price_for_truck, factor, option_prices)
    logger.info(
        f"Estimate {payload.old_prefecture_id} -> {payload.new_prefecture_id}: "
        f"{distance_km:.1f} km, {box_count} boxes, factor {factor}, total {total}"
    )
    return PriceBreakdown(
        distance_km=distance_km,
        distance_price=price_for_distance,
        box_count=box_count,
        truck_price=price_for_truck,
        season_factor=factor,
        option_service_price=sum(option_prices),
        total_price=total,
    )


def submit_order(payload: OrderRequest) -> OrderResponse:
    """Price the move, then register the customer and their order.

    Pricing runs first so a failed external lookup never leaves a stored order
    without an estimate.
    """
    estimate = calculate_price(payload)
    order = Order(
        customer=Customer(
            old_prefecture_id=payload.old_prefecture_id,
            new_prefecture_id=payload.new_prefecture_id,
            customer_name=payload.customer_name,
            tel=payload.tel,
            email=payload.email,
            old_address=payload.old_address,
            new_address=payload.new_address,
        ),
        moving_date=payload.moving_date,
        packages=_packages(payload),
        option_service_ids=list(payload.option_service_ids),
    )
    customer_id = register_order(order)
    return OrderResponse(customer_id=customer_id, estimate=estimate)
