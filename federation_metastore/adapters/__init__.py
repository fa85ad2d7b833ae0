"""Adapter layer package for zone inventory integration boundaries."""

from .interfaces import InventoryLookupPort, ZoneDetailsEnrichmentResult
from .inventory_api import InventoryApiClient
from .inventory_errors import (
	InventoryAdapterError,
	InventoryConnectionError,
	InventoryDecodeError,
	InventoryRequestBuildError,
	InventoryStatusError,
	InventoryTimeoutError,
)

__all__ = [
	"InventoryAdapterError",
	"InventoryApiClient",
	"InventoryConnectionError",
	"InventoryDecodeError",
	"InventoryLookupPort",
	"InventoryRequestBuildError",
	"InventoryStatusError",
	"InventoryTimeoutError",
	"ZoneDetailsEnrichmentResult",
]
