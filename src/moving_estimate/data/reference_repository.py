"""Read-only lookups against the reference pricing tables."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..db.supabase import require_supabase_client
from ..exceptions import DataIntegrityError, PricingLookupError
from ..models.domain import Prefecture, PrefectureDistance

logger = logging.getLogger(__name__)


def _rows(response: Any) -> list[dict]:
    return list(response.data or [])


def get_all_prefectures() -> list[Prefecture]:
    """Return every prefecture ordered by identifier."""
    supabase = require_supabase_client()
    response = supabase.table("prefecture").select("prefecture_id, prefecture_name").order("prefecture_id").execute()
    return [
        Prefecture(prefecture_id=str(row["prefecture_id"]), prefecture_name=row["prefecture_name"])
        for row in _rows(response)
    ]


def get_prefecture_name(prefecture_id: str) -> str:
    """Resolve a prefecture id to its display name.

    Exactly one row must match; anything else means the reference data is broken.
    """
    supabase = require_supabase_client()
    response = (
        supabase.table("prefecture")
        .select("prefecture_name")
        .eq("prefecture_id", prefecture_id)
        .execute()
    )
    rows = _rows(response)
    if len(rows) != 1:
        raise DataIntegrityError(
            f"Expected exactly one prefecture for id '{prefecture_id}', found {len(rows)}"
        )
    return rows[0]["prefecture_name"]


def find_distance(prefecture_id_from: str, prefecture_id_to: str) -> Optional[PrefectureDistance]:
    """Look up the stored distance for a prefecture pair in either direction."""
    supabase = require_supabase_client()
    for first, second in ((prefecture_id_from, prefecture_id_to), (prefecture_id_to, prefecture_id_from)):
        response = (
            supabase.table("prefecture_distance")
            .select("prefecture_id_from, prefecture_id_to, distance")
            .eq("prefecture_id_from", first)
            .eq("prefecture_id_to", second)
            .limit(1)
            .execute()
        )
        rows = _rows(response)
        if rows:
            return PrefectureDistance(
                prefecture_id_from=prefecture_id_from,
                prefecture_id_to=prefecture_id_to,
                distance=float(rows[0]["distance"]),
            )
    return None


def get_distance(prefecture_id_from: str, prefecture_id_to: str, default: float = 0.0) -> float:
    """Return the straight-line distance [km] between two prefectures, or ``default`` when unknown."""
    record = find_distance(prefecture_id_from, prefecture_id_to)
    if record is None:
        logger.warning(f"No distance record for prefectures {prefecture_id_from} -> {prefecture_id_to}")
        return default
    return record.distance


def get_box_per_package(package_id: int) -> int:
    """Number of boxes one unit of the given package type occupies."""
    supabase = require_supabase_client()
    response = supabase.table("package_box").select("box").eq("package_id", package_id).execute()
    rows = _rows(response)
    if not rows:
        raise PricingLookupError(f"No box count registered for package {package_id}")
    if len(rows) > 1:
        raise DataIntegrityError(f"Multiple box counts registered for package {package_id}")
    return int(rows[0]["box"])


def get_price_per_truck(box_num: int) -> int:
    """Price of the cheapest truck whose capacity covers ``box_num`` boxes."""
    supabase = require_supabase_client()
    response = (
        supabase.table("truck_capacity")
        .select("max_box, price")
        .gte("max_box", box_num)
        .order("price")
        .limit(1)
        .execute()
    )
    rows = _rows(response)
    if not rows:
        raise PricingLookupError(f"No truck can carry {box_num} boxes")
    return int(rows[0]["price"])


def get_price_per_optional_service(service_id: int) -> int:
    supabase = require_supabase_client()
    response = supabase.table("optional_service").select("price").eq("service_id", service_id).execute()
    rows = _rows(response)
    if not rows:
        raise PricingLookupError(f"Unknown optional service {service_id}")
    if len(rows) > 1:
        raise DataIntegrityError(f"Multiple prices registered for optional service {service_id}")
    return int(rows[0]["price"])
