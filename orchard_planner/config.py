"""
Application configuration using Pydantic settings.
"""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Orchard Geometry
    bed_width_ft: float = Field(
        default=9.0,
        description="Width of a single planting bed in feet"
    )
    grid_spacing_ft: float = Field(
        default=1.5,
        description="Spacing of the planting grid lines inside a bed in feet"
    )
    bed4_row_spacing_ft: float = Field(
        default=3.0,
        description="Row pitch for vine/vegetable placements in Bed 4"
    )

    # Density Scaling
    default_utilization: float = Field(
        default=0.82,
        gt=0,
        le=1,
        description="Fraction of an acre usable for K-modules after roads, ponds and sheds"
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
        default="Palekar Orchard Planner",
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
