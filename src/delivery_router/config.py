"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_PLANNER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Delivery Route Planner API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root log level applied at application start.")
    average_speed_kmh: float = Field(
        default=40.0,
        gt=0.0,
        description="Average travel speed used to turn route distance into driving time.",
    )
    dwell_minutes_per_stop: float = Field(
        default=5.0,
        ge=0.0,
        description="Fixed time spent at every stop (unloading, handover).",
    )
    default_strategy: Literal["construction_only", "construction_plus_2opt"] = Field(
        default="construction_plus_2opt",
        description="Optimization strategy used when a request does not name one.",
    )
    depot_presets_file: Optional[Path] = Field(
        default=None,
        description="Optional Excel workbook with named depots (Code, Name, Latitude, Longitude).",
    )
    default_depot: str = Field(default="EILON", description="Depot preset code used when a request names none.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("depot_presets_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

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
