"""Order persistence: customers, their packages and selected options."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ..db.supabase import require_supabase_client
from ..exceptions import DataIntegrityError
from ..models.domain import Customer, CustomerOptionService, CustomerPackage, Order

logger = logging.getLogger(__name__)


def insert_customer(customer: Customer) -> int:
    """Insert a customer row and store the generated identifier on ``customer``.

    Returns:
        The generated customer id.
    """
    supabase = require_supabase_client()
    record: dict[str, Any] = {
        "old_prefecture_id": customer.old_prefecture_id,
        "new_prefecture_id": customer.new_prefecture_id,
        "customer_name": customer.customer_name,
        "tel": customer.tel,
        "email": customer.email,
        "old_address": customer.old_address,
        "new_address": customer.new_address,
    }
    response = supabase.table("customer").insert(record).execute()
    rows = response.data or []
    if len(rows) != 1 or "customer_id" not in rows[0]:
        raise DataIntegrityError("Customer insert did not return a generated customer_id")
    customer.customer_id = int(rows[0]["customer_id"])
    return customer.customer_id


def insert_customer_option_service(option: CustomerOptionService) -> int:
    """Insert one selected option service. Returns the number of rows written."""
    supabase = require_supabase_client()
    response = (
        supabase.table("customer_option_service")
        .insert({"customer_id": option.customer_id, "service_id": option.service_id})
        .execute()
    )
    return len(response.data or [])


def batch_insert_customer_packages(packages: list[CustomerPackage]) -> list[int]:
    """Insert all package lines in a single request. Returns per-row write counts."""
    if not packages:
        return []
    supabase = require_supabase_client()
    records = [
        {
            "customer_id": package.customer_id,
            "package_id": package.package_id,
            "package_number": package.package_number,
        }
        for package in packages
    ]
    response = supabase.table("customer_package").insert(records).execute()
    written = len(response.data or [])
    return [1 if index < written else 0 for index in range(len(records))]


def register_order(order: Order) -> int:
    """Persist the customer, option services and packages of an order in sequence."""
    customer_id = insert_customer(order.customer)

    for service_id in order.option_service_ids:
        insert_customer_option_service(CustomerOptionService(service_id=service_id, customer_id=customer_id))

    packages = [replace(package, customer_id=customer_id) for package in order.packages if package.package_number > 0]
    batch_insert_customer_packages(packages)

    logger.info(
        f"Registered order for customer {customer_id}: "
        f"{len(packages)} package lines, {len(order.option_service_ids)} option services"
    )
    return customer_id
