"""
Application configuration using Pydantic settings.
"""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Land and grid
    cell_side_ft: float = Field(
        default=9.0,
        description="Side length of one grid cell in feet (cells are square)"
    )
    default_property_size_acres: float = Field(
        default=1.0,
        description="Land size used for a new planning session, in acres"
    )
    default_forest_age: int = Field(
        default=1,
        description="Forest age in years used for a new planning session"
    )

    # Scoring profit (fixed constants, independent of the economic projection)
    scoring_setup_cost: float = Field(
        default=1000.0,
        description="One-off cost used by the score panel profit figure"
    )
    scoring_annual_cost: float = Field(
        default=500.0,
        description="Yearly cost used by the score panel profit figure"
    )

    # Economic projection defaults (user editable per session)
    default_setup_costs: dict[str, float] = Field(
        default={
            "landCost": 10000.0,
            "soilPreparation": 2000.0,
            "irrigation": 3000.0,
            "initialPlants": 1000.0,
            "tools": 500.0,
        },
        description="Initial setup cost table for a new planning session"
    )
    default_annual_costs: dict[str, float] = Field(
        default={
            "maintenance": 1000.0,
            "water": 500.0,
            "additionalPlants": 200.0,
        },
        description="Initial annual cost table for a new planning session"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Whether per-client rate limiting is applied"
    )
    rate_limit_requests: int = Field(
        default=100,
        description="Maximum requests per minute per client"
    )

    # Application Settings
    app_name: str = Field(
        default="Food Forest Planner",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
