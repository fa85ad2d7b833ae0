"""Bootstrap wiring for settings-driven dependency assembly."""

from __future__ import annotations

from dataclasses import dataclass

from federation_metastore.adapters import InventoryApiClient
from federation_metastore.config import AppSettings, config_load_settings
from federation_metastore.enrichment import ZoneEnrichmentConfig, ZoneEnrichmentOrchestrator
from federation_metastore.mapping import ApplicationInstanceConverter, FederationConverter


@dataclass(frozen=True)
class MetastoreComponents:
    """Wired converter stack handed to the endpoint and reconciliation layers.

    Attributes:
        settings: Validated runtime settings.
        inventory_client: Pooled inventory adapter; close it on shutdown.
        zone_enrichment: Offered-zone enrichment orchestrator.
        application_instance_converter: Application instance converter.
        federation_converter: Federation converter.
    """

    settings: AppSettings
    inventory_client: InventoryApiClient
    zone_enrichment: ZoneEnrichmentOrchestrator
    application_instance_converter: ApplicationInstanceConverter
    federation_converter: FederationConverter


def bootstrap_create_inventory_client(settings: AppSettings) -> InventoryApiClient:
    """Build the inventory adapter from validated settings."""

    return InventoryApiClient(
        base_url=settings.inventory_api_base_url,
        request_timeout_seconds=settings.inventory_request_timeout_seconds,
    )


def bootstrap_create_zone_enrichment(
    settings: AppSettings,
    inventory_client: InventoryApiClient,
) -> ZoneEnrichmentOrchestrator:
    """Build the enrichment orchestrator from validated settings."""

    return ZoneEnrichmentOrchestrator(
        inventory_client=inventory_client,
        config=ZoneEnrichmentConfig(
            max_concurrency=settings.inventory_max_concurrency,
            deadline_seconds=settings.enrichment_deadline_seconds,
        ),
    )


def bootstrap_create_components(settings: AppSettings | None = None) -> MetastoreComponents:
    """Assemble the converter stack after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        MetastoreComponents: Fully wired components.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    inventory_client = bootstrap_create_inventory_client(resolved_settings)
    zone_enrichment = bootstrap_create_zone_enrichment(resolved_settings, inventory_client)
    return MetastoreComponents(
        settings=resolved_settings,
        inventory_client=inventory_client,
        zone_enrichment=zone_enrichment,
        application_instance_converter=ApplicationInstanceConverter(),
        federation_converter=FederationConverter(zone_enrichment=zone_enrichment),
    )
