"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ECOROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "EcoRoute Smart Waste API"
    api_prefix: str = "/api"
    depot_latitude: float = Field(default=28.6949, ge=-90.0, le=90.0, description="Central depot latitude.")
    depot_longitude: float = Field(default=77.1350, ge=-180.0, le=180.0, description="Central depot longitude.")
    truck_speed_kmh: float = Field(default=20.0, gt=0.0, description="Average collection truck speed.")
    fuel_consumption_l_per_km: float = Field(
        default=0.4,
        ge=0.0,
        description="Fuel burned per kilometre (2.5 km/L for a heavy garbage truck).",
    )
    time_per_bin_min: float = Field(default=5.0, ge=0.0, description="Service time spent at each bin.")
    optimize_fill_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Minimum fill level (inclusive) for a bin to be part of the optimized route.",
    )
    mock_bin_count: int = Field(default=20, ge=0)
    mock_spread_deg: float = Field(default=0.02, ge=0.0)
    mock_seed: Optional[int] = Field(default=None, description="Seed for reproducible mock datasets.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
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
