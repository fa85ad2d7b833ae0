"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, PositiveFloat, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INVENTORY_API_BASE_URL = "http://10.10.0.85:5000/inventory/api/v1"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for metastore conversion and inventory enrichment.

    Environment variable names map directly to field names in uppercase.
    Example: `inventory_api_base_url` reads from `INVENTORY_API_BASE_URL`.

    Attributes:
        environment_name: Runtime environment label.
        log_level: Root logging level name.
        inventory_api_base_url: Base URL of the zone inventory service.
        inventory_request_timeout_seconds: Per-request HTTP timeout for inventory lookups.
        inventory_max_concurrency: Maximum number of zone lookups in flight at once.
        enrichment_deadline_seconds: Optional bound on total enrichment latency for one read.
        metastore_namespace: Namespace assigned to newly created persisted records.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    log_level: str = Field(default="INFO")
    inventory_api_base_url: str = Field(default=DEFAULT_INVENTORY_API_BASE_URL)
    inventory_request_timeout_seconds: float = Field(default=10.0, gt=0)
    inventory_max_concurrency: int = Field(default=1, ge=1)
    enrichment_deadline_seconds: PositiveFloat | None = Field(default=None)
    metastore_namespace: str = Field(default="federation", min_length=1)

    @field_validator("inventory_api_base_url")
    @classmethod
    def _validate_inventory_base_url(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            return DEFAULT_INVENTORY_API_BASE_URL
        return stripped_value

    @field_validator("metastore_namespace")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_configure_logging(settings: AppSettings) -> None:
    """Configure root logging from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        None: Configures the logging module as side effect.
    """

    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
