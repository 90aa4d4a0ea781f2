"""Configuration management."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Puzzle settings pulled from environment variables (prefix ``FOURCOLOR_``)."""

    # Region
    screen_width: int = Field(default=640, gt=0, description="Region width")
    screen_height: int = Field(default=480, gt=0, description="Region height")

    # Mesh generation
    max_triangles: int = Field(default=30, ge=1, description="Maximum number of triangles")
    min_triangles: int = Field(
        default=10, ge=1, description="Mesh size accepted when growth stalls instead of restarting"
    )
    max_backtracks: int = Field(default=200, ge=0, description="Restarts from the seed triangle")
    random_seed: Optional[int] = Field(
        default=None, description="Fixed random seed; unset or 0 uses the current time"
    )

    # Opening animation
    reveal_ticks_per_layer: int = Field(default=60, ge=1, description="Ticks spent drawing one edge layer")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    model_config = SettingsConfigDict(
        env_prefix="FOURCOLOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError(f"log_format must be 'json' or 'console', got {value!r}")
        return value


def get_settings() -> Settings:
    """Read settings from the environment."""
    return Settings()
