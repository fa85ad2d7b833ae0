"""Typed interfaces for enrichment-layer orchestration."""

from collections.abc import Sequence
from typing import Protocol

from federation_metastore.domain import ZoneDetails


class ZoneEnrichmentPort(Protocol):
    """Port definition for enriching offered zones with inventory metadata."""

    def enrichment_enrich_offered_zones(self, zone_ids: Sequence[str]) -> list[ZoneDetails]:
        """Return enriched zone details, position-aligned with `zone_ids`.

        Args:
            zone_ids: Offered zone identifiers in record order.

        Returns:
            list[ZoneDetails]: One enriched entry per input zone id.

        Raises:
            InventoryAdapterError: Raised when any single lookup fails.
            EnrichmentDeadlineExceededError: Raised when enrichment runs out of time.
        """
