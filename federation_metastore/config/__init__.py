"""Configuration package for runtime settings and startup validation."""

from .settings import (
	DEFAULT_INVENTORY_API_BASE_URL,
	AppSettings,
	SettingsLoadError,
	config_configure_logging,
	config_load_settings,
)

__all__ = [
	"AppSettings",
	"DEFAULT_INVENTORY_API_BASE_URL",
	"SettingsLoadError",
	"config_configure_logging",
	"config_load_settings",
]
