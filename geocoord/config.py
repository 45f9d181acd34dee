"""Application configuration via Pydantic Settings.

NOTE: Every variable is mapped explicitly (GEOCOORD_EARTH_RADIUS_M, etc.) so a
typo in .env fails loudly instead of silently falling back to a default.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from geocoord.domain.policies.distance import (
    EARTH_RADIUS_M,
    VINCENTY_MAX_ITERATIONS,
    VINCENTY_TOLERANCE,
)


class Settings(BaseSettings):
    # Distance model
    earth_radius_m: float = Field(
        default=EARTH_RADIUS_M,
        gt=0,
        validation_alias="GEOCOORD_EARTH_RADIUS_M",
    )
    vincenty_max_iterations: int = Field(
        default=VINCENTY_MAX_ITERATIONS,
        ge=1,
        validation_alias="GEOCOORD_VINCENTY_MAX_ITERATIONS",
    )
    vincenty_tolerance: float = Field(
        default=VINCENTY_TOLERANCE,
        gt=0,
        validation_alias="GEOCOORD_VINCENTY_TOLERANCE",
    )

    # API
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="GEOCOORD_CORS_ORIGINS",
    )

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
