"""Configuration for Kairos MCP."""

import os

from pydantic import BaseModel, Field

# ============================================================================
# Planning constants
# ============================================================================

# Share of the remaining work window held back from planning
CAPACITY_SAFETY_MARGIN = 0.2

# Demand may exceed the 7-day velocity by this share before the reality check fires
VELOCITY_TOLERANCE = 0.1

# HARD bankruptcy archives pending tasks whose goal scores below this
HARD_BANKRUPTCY_THRESHOLD = 5

# Completed tasks under goals scoring at least this count as high impact
HIGH_IMPACT_THRESHOLD = 7

# Importance tiers for schedule blocks
HIGH_TIER_THRESHOLD = 8
MEDIUM_TIER_THRESHOLD = 5

ANALYTICS_WINDOW_DAYS = 7
DEFAULT_ESTIMATED_MINUTES = 30
DEFAULT_ENERGY = 3
DEFAULT_PRIORITY = 3


class KairosConfig(BaseModel):
    """Runtime settings, read from ``KAIROS_*`` environment variables."""

    database_url: str = Field(default="sqlite:///kairos.db", description="SQLAlchemy database URL")
    log_level: str = Field(default="INFO", description="Root log level for the server process")
    capacity_margin: float = Field(default=CAPACITY_SAFETY_MARGIN, ge=0.0, lt=1.0)
    velocity_tolerance: float = Field(default=VELOCITY_TOLERANCE, ge=0.0)

    @classmethod
    def from_env(cls) -> "KairosConfig":
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            raw = os.environ.get(f"KAIROS_{field_name.upper()}")
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls.model_validate(values)
