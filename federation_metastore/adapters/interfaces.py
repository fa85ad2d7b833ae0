"""Typed interfaces for adapter-layer responsibilities."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ZoneDetailsEnrichmentResult(BaseModel):
    """Inventory response contract for one zone lookup.

    Attributes:
        geography_details: Provider and location descriptor, e.g. `aws,Milan`.
        geolocation: Latitude/longitude pair, e.g. `45.4642,9.19`.
    """

    model_config = ConfigDict(frozen=True)

    geography_details: StrictStr = Field(alias="geographyDetails")
    geolocation: StrictStr


class InventoryLookupPort(Protocol):
    """Port definition for fetching zone enrichment metadata."""

    def inventory_fetch_zone_details(self, zone_id: str) -> ZoneDetailsEnrichmentResult:
        """Fetch geography metadata for one zone.

        Args:
            zone_id: Zone identifier.

        Returns:
            ZoneDetailsEnrichmentResult: Inventory metadata for the zone.

        Raises:
            InventoryAdapterError: Raised when the lookup fails for any reason.
        """
