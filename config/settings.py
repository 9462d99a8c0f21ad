"""Configuration settings loaded from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    log_level: str = Field(default="INFO", description="Logging level")

    # Simulation runner
    simulation_days: int = Field(
        default=2,
        ge=0,
        description="Number of days the CLI simulates when --days is not given",
    )

    model_config = {"extra": "ignore"}

    @property
    def debug(self) -> bool:
        """Whether per-item rule tracing is enabled."""
        return self.log_level.upper() == "DEBUG"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance loaded from environment."""
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        simulation_days=int(os.getenv("SIMULATION_DAYS", "2")),
    )
