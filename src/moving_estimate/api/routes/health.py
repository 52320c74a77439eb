"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check database connection and reference data availability."""
    from ...db.supabase import get_supabase_client

    supabase = get_supabase_client()
    if not supabase:
        return {
            "configured": False,
            "message": "Supabase not configured. Set MOVE_SUPABASE_URL and MOVE_SUPABASE_KEY environment variables.",
        }

    try:
        response = supabase.table("prefecture").select("prefecture_id", count="exact").limit(1).execute()
        count = response.count or 0
        return {
            "configured": True,
            "connected": True,
            "prefectures_count": count,
            "message": f"Database connected. Found {count} prefectures.",
        }
    except Exception as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }
