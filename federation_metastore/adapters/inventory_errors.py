"""Project-native typed exceptions for zone inventory lookup failures."""

from __future__ import annotations


class InventoryAdapterError(Exception):
    """Base exception for inventory adapter failures.

    Attributes:
        zone_id: Zone identifier of the failed lookup, when known.
    """

    def __init__(self, message: str, zone_id: str | None = None):
        super().__init__(message)
        self.zone_id = zone_id


class InventoryRequestBuildError(InventoryAdapterError, ValueError):
    """Lookup request could not be built, usually from a malformed base URL."""


class InventoryConnectionError(InventoryAdapterError, ConnectionError):
    """Transport-level connectivity failure during inventory communication."""


class InventoryTimeoutError(InventoryAdapterError, TimeoutError):
    """Transport timeout while waiting for the inventory response."""


class InventoryStatusError(InventoryAdapterError):
    """Inventory answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code returned by inventory.
        reason_phrase: HTTP status text returned by inventory.
    """

    def __init__(self, message: str, status_code: int, reason_phrase: str, zone_id: str | None = None):
        super().__init__(message=message, zone_id=zone_id)
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class InventoryDecodeError(InventoryAdapterError, ValueError):
    """Inventory response body did not match the zone-details JSON contract."""
