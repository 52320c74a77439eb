"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="MOVE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Moving Estimate API"
    api_prefix: str = "/api"

    geocoding_url: str = Field(
        default="https://www.geocoding.jp/api/",
        description="Geocoding endpoint returning XML with <coordinate><lat/><lon/></coordinate>.",
    )
    routing_base_url: str = Field(
        default="https://api.openrouteservice.org",
        description="Base URL of the openrouteservice directions API.",
    )
    routing_profile: str = Field(default="driving-car")
    routing_api_key: Optional[str] = Field(
        default=None,
        description="API key passed to the routing service.",
    )
    http_user_agent: str = Field(
        default="moving-estimate/1.0",
        description="User-Agent header sent to the geocoding and routing services.",
    )
    http_timeout_seconds: float = Field(default=10.0, gt=0.0)
    parallel_geocoding: bool = Field(
        default=True,
        description="Geocode origin and destination addresses concurrently.",
    )

    price_per_km: int = Field(default=100, ge=0, description="Yen charged per kilometre of driving distance.")

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
