"""Offered-zone enrichment orchestrator backed by the inventory adapter."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging

from federation_metastore.adapters import InventoryLookupPort
from federation_metastore.domain import ZoneDetails

from .gather import enrichment_gather_fail_fast
from .interfaces import ZoneEnrichmentPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoneEnrichmentConfig:
    """Configuration values for offered-zone enrichment.

    Attributes:
        max_concurrency: Maximum lookups in flight; 1 runs lookups sequentially.
        deadline_seconds: Optional bound on total enrichment latency.
    """

    max_concurrency: int = 1
    deadline_seconds: float | None = None


class ZoneEnrichmentOrchestrator(ZoneEnrichmentPort):
    """Enrich offered zones one inventory lookup per zone, failing on the first error.

    Results are recomputed on every call; nothing is cached.
    """

    def __init__(self, inventory_client: InventoryLookupPort, config: ZoneEnrichmentConfig | None = None):
        """Initialize enrichment orchestrator dependencies.

        Args:
            inventory_client: Adapter performing single-zone lookups.
            config: Optional enrichment configuration.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        resolved_config = config or ZoneEnrichmentConfig()
        if inventory_client is None:
            raise ValueError("inventory_client must not be None")
        if resolved_config.max_concurrency < 1:
            raise ValueError("config.max_concurrency must be >= 1")
        if resolved_config.deadline_seconds is not None and resolved_config.deadline_seconds <= 0:
            raise ValueError("config.deadline_seconds must be > 0")

        self._inventory_client = inventory_client
        self._config = resolved_config

    def enrichment_enrich_offered_zones(self, zone_ids: Sequence[str]) -> list[ZoneDetails]:
        """Return enriched zone details, position-aligned with `zone_ids`.

        Args:
            zone_ids: Offered zone identifiers in record order.

        Returns:
            list[ZoneDetails]: One enriched entry per input zone id.

        Raises:
            InventoryAdapterError: Raised unchanged from the first failing lookup.
            EnrichmentDeadlineExceededError: Raised when the configured deadline expires.
        """

        ordered_zone_ids = list(zone_ids)
        tasks = [self._enrichment_build_lookup_task(zone_id) for zone_id in ordered_zone_ids]
        return enrichment_gather_fail_fast(
            tasks=tasks,
            max_concurrency=self._config.max_concurrency,
            deadline_seconds=self._config.deadline_seconds,
        )

    def _enrichment_build_lookup_task(self, zone_id: str) -> Callable[[], ZoneDetails]:
        def _lookup() -> ZoneDetails:
            logger.info("Fetching geolocation and geography details from inventory zone_id=%s", zone_id)
            enrichment = self._inventory_client.inventory_fetch_zone_details(zone_id)
            logger.info("Completed inventory enrichment zone_id=%s", zone_id)
            return ZoneDetails(
                zone_id=zone_id,
                geography_details=enrichment.geography_details,
                geolocation=enrichment.geolocation,
            )

        return _lookup
