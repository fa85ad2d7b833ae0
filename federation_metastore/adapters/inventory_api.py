"""Zone inventory HTTP adapter used to enrich offered availability zones."""

from __future__ import annotations

import logging
from typing import Final

import httpx
from pydantic import ValidationError

from .interfaces import InventoryLookupPort, ZoneDetailsEnrichmentResult
from .inventory_errors import (
    InventoryConnectionError,
    InventoryDecodeError,
    InventoryRequestBuildError,
    InventoryStatusError,
    InventoryTimeoutError,
)

logger = logging.getLogger(__name__)


class InventoryApiClient(InventoryLookupPort):
    """Adapter implementation for the inventory `zone-details` lookup.

    One pooled `httpx.Client` is created per adapter and reused for every
    lookup. The adapter performs exactly one GET per call and never retries.
    """

    _USER_AGENT: Final[str] = "federation-metastore/1.0 (Python/httpx)"
    _ZONE_DETAILS_PATH: Final[str] = "zone-details"
    _ZONE_ID_PARAMETER: Final[str] = "zoneid"

    def __init__(
        self,
        base_url: str,
        request_timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize inventory adapter.

        Args:
            base_url: Inventory API base URL, resolved once from settings.
            request_timeout_seconds: HTTP request timeout in seconds.
            transport: Optional httpx transport, used to fake the inventory in tests.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_base_url = base_url.strip()
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._base_url = normalized_base_url.rstrip("/")
        self._request_timeout_seconds = request_timeout_seconds
        self._http_client = httpx.Client(
            timeout=request_timeout_seconds,
            headers={"User-Agent": self._USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Return the resolved inventory base URL."""

        return self._base_url

    def inventory_fetch_zone_details(self, zone_id: str) -> ZoneDetailsEnrichmentResult:
        """Fetch geography details and geolocation for one zone.

        Args:
            zone_id: Zone identifier passed as the `zoneid` query parameter.

        Returns:
            ZoneDetailsEnrichmentResult: Decoded inventory metadata.

        Raises:
            InventoryRequestBuildError: Raised when the lookup URL cannot be built.
            InventoryTimeoutError: Raised when the request times out.
            InventoryConnectionError: Raised for other transport failures.
            InventoryStatusError: Raised when inventory answers with a non-200 status.
            InventoryDecodeError: Raised when the body is not the expected JSON document.
        """

        request_url = f"{self._base_url}/{self._ZONE_DETAILS_PATH}"
        logger.info("Fetching zone details from inventory url=%s zone_id=%s", request_url, zone_id)

        try:
            response = self._http_client.get(request_url, params={self._ZONE_ID_PARAMETER: zone_id})
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as error:
            logger.error("Invalid inventory request url=%s: %s", request_url, error)
            raise InventoryRequestBuildError(
                f"Inventory request could not be built for url={request_url}", zone_id=zone_id
            ) from error
        except httpx.TimeoutException as error:
            logger.error("Inventory request timed out zone_id=%s: %s", zone_id, error)
            raise InventoryTimeoutError("Inventory request timed out", zone_id=zone_id) from error
        except httpx.RequestError as error:
            logger.error("Inventory request failed zone_id=%s: %s", zone_id, error)
            raise InventoryConnectionError("Inventory transport request failed", zone_id=zone_id) from error

        status_text = f"{response.status_code} {response.reason_phrase}".strip()
        logger.info("Received inventory response with status: %s", status_text)
        if response.status_code != httpx.codes.OK:
            raise InventoryStatusError(
                f"Inventory request failed with status: {status_text}",
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                zone_id=zone_id,
            )

        try:
            zone_details = ZoneDetailsEnrichmentResult.model_validate_json(response.content)
        except ValidationError as error:
            logger.error("Error decoding inventory response zone_id=%s: %s", zone_id, error)
            raise InventoryDecodeError(
                f"Inventory response for zone_id={zone_id} is not a valid zone-details document",
                zone_id=zone_id,
            ) from error

        logger.info("Successfully decoded inventory response for zone_id=%s", zone_id)
        return zone_details

    def inventory_close(self) -> None:
        """Release the pooled HTTP client."""

        self._http_client.close()

    def __enter__(self) -> InventoryApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.inventory_close()
