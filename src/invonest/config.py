"""Settings for InvoNest, read from ``INVONEST_*`` environment variables or ``.env``."""

from decimal import Decimal
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from invonest.domain.value_objects import RoundingStrategy


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings.

    Examples:
        INVONEST_ENVIRONMENT=production
        INVONEST_LOG_LEVEL=DEBUG
        INVONEST_ROUNDING_STRATEGY=per_item
        INVONEST_DEFAULT_TAX_RATE=12
    """

    model_config = SettingsConfigDict(
        env_prefix="INVONEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "InvoNest"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] = "console"
    log_file: Path | None = None

    api_host: str = "127.0.0.1"
    api_port: int = Field(default=8000, ge=1, le=65535)

    default_tax_rate: Decimal = Field(
        default=Decimal("18"),
        ge=0,
        le=100,
        description="GST rate for HSN codes missing from the rate table",
    )
    rounding_strategy: RoundingStrategy = Field(
        default=RoundingStrategy.PER_INVOICE,
        description="Round invoice totals from exact sums, or sum rounded items",
    )
    currency_label: str = Field(
        default="Rupees", description="Currency name used in amounts in words"
    )

    @model_validator(mode="after")
    def apply_environment_defaults(self) -> "Settings":
        """Debug on in development; JSON logs in production unless set explicitly."""
        if self.environment is Environment.DEVELOPMENT and "debug" not in self.model_fields_set:
            self.debug = True
        if self.environment is Environment.PRODUCTION and "log_format" not in self.model_fields_set:
            self.log_format = "json"
        return self

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment is Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """Cached settings; call ``get_settings.cache_clear()`` to reload."""
    return Settings()
