import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import Field, PositiveFloat, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .configuration.rate_grid import DEFAULT_EVALUATION_PRINCIPAL, DEFAULT_RATE_GRID
from .exceptions import ConfigurationError


if Path(".env.dev").exists():
    load_dotenv(".env.dev", override=False)

load_dotenv(".env", override=False)

ENVIRONMENT = os.getenv("ENVIRONMENT", "dev").lower()
ENV_FILE = ".env.dev" if ENVIRONMENT == "dev" else ".env"


class Settings(BaseSettings):
    """Application settings with environment variable loading."""

    # Application
    app_name: str = "tranche-optimizer"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: Optional[str] = None
    environment: str = ENVIRONMENT

    # Search inputs
    evaluation_principal: PositiveFloat = DEFAULT_EVALUATION_PRINCIPAL
    rate_grid: Dict[int, float] = Field(
        default_factory=lambda: dict(DEFAULT_RATE_GRID),
        description="Annual rate in percent keyed by duration in years (JSON in env).",
    )

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid application settings", details={"errors": exc.errors()}
        ) from exc


settings = get_settings()
