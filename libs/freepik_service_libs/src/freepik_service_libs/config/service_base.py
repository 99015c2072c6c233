"""Base settings shared by every Freepik Icons process."""

from __future__ import annotations

from freepik_common.config_enums import Environment
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Environment and logging settings common to all services."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment for the service",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    def is_development(self) -> bool:
        return self.ENVIRONMENT in (Environment.DEVELOPMENT, Environment.TESTING)

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION
